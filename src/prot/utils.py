import bz2
import gzip
from contextlib import contextmanager
from pathlib import Path


@contextmanager
def asHandle(fileNameOrHandle, mode="rt", encoding="UTF-8"):
    """
    Decorator for file opening that makes it easy to open compressed files
    and which can be passed an already-open file handle or a file name.
    Based on L{Bio.File.as_handle}.

    @param fileNameOrHandle: Either a C{str} or C{Path} file name, or a file
        handle. A handle is yielded as is, and is not closed.
    @param mode: The C{str} mode to use for opening the file.
    @param encoding: The C{str} encoding to use when opening the file.
    @return: A generator that can be turned into a context manager via
        L{contextlib.contextmanager}.
    """
    if isinstance(fileNameOrHandle, (Path, str)):
        fileNameOrHandle = str(fileNameOrHandle)
        if "b" in mode:
            encoding = None
        if fileNameOrHandle.endswith(".gz"):
            with gzip.open(fileNameOrHandle, mode=mode, encoding=encoding) as fp:
                yield fp
        elif fileNameOrHandle.endswith(".bz2"):
            with bz2.open(fileNameOrHandle, mode=mode, encoding=encoding) as fp:
                yield fp
        else:
            with open(fileNameOrHandle, mode, encoding=encoding) as fp:
                yield fp
    else:
        yield fileNameOrHandle


@contextmanager
def openOr(filename, mode="r", defaultFp=None, specialCaseHyphen=True):
    """
    A context manager to either open a file or use a pre-opened default file.

    @param filename: If not C{None}, this is the argument to pass to
        C{asHandle} along with C{mode}. If C{None}, C{defaultFp} is used.
    @param mode: The C{str} file opening mode, used if C{filename} is not
        C{None}.
    @param defaultFp: An open file-like object to yield if C{filename} is
        C{None}.
    @param specialCaseHyphen: If C{True}, treat '-' as a C{None} filename
        and yield the C{defaultFp}.
    """
    if filename is None or filename == "-" and specialCaseHyphen:
        yield defaultFp
    else:
        with asHandle(filename, mode) as fp:
            yield fp
