#!/usr/bin/env python

"""
Read an RNA sequence from a file and write the protein it codes for to
another file.

By default, amino acids before the first start codon (AUG) are ignored,
and a stop codon ends the protein. Translation resumes at the next start
codon, so the output is the concatenation of all the proteins found. Use
--waitforstart 0 and --usestop 0 to translate every codon (stop codons are
always left out of the output).
"""

import sys

from prot.cli import main


if __name__ == "__main__":
    sys.exit(main())
