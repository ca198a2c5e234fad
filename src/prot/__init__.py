import sys
from pathlib import Path
from typing import BinaryIO, TextIO

if sys.version_info < (3, 10):
    raise Exception("The prot code needs Python 3.10 or later.")

# Note that the version string below must have the following format,
# otherwise it will not be found by the version() function in ../../setup.py
__version__ = "1.0.0"


File = TextIO | BinaryIO | str | Path
