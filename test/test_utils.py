import bz2
import gzip
import builtins
from io import BytesIO, StringIO
from unittest import TestCase
from unittest.mock import mock_open, patch

from prot.utils import asHandle, openOr


class TestAsHandle(TestCase):
    """
    Test the asHandle function
    """

    def testOpenFile(self):
        """
        When an open file pointer is passed to asHandle, that same file
        pointer must be returned.
        """
        fp = StringIO("AUG")
        with asHandle(fp) as newfp:
            self.assertIs(fp, newfp)

    def testOpenFileIsNotClosed(self):
        """
        When an open file pointer is passed to asHandle, it must not be
        closed on leaving the context.
        """
        fp = StringIO("AUG")
        with asHandle(fp):
            pass
        self.assertFalse(fp.closed)

    def testStr(self):
        """
        When a string filename is passed to asHandle, it must be possible to
        read the correct data from the fp that is returned.
        """
        mockOpener = mock_open(read_data="AUG")
        with patch.object(builtins, "open", mockOpener):
            with asHandle("file") as fp:
                self.assertEqual("AUG", fp.read())

    def testWriteMode(self):
        """
        When a write mode is passed to asHandle, the file must be opened with
        that mode.
        """
        mockOpener = mock_open()
        with patch.object(builtins, "open", mockOpener):
            with asHandle("file", "wt") as fp:
                fp.write("MF")
        mockOpener.assert_called_once_with("file", "wt", encoding="UTF-8")
        mockOpener().write.assert_called_once_with("MF")

    def testBZ2(self):
        """
        When a string '*.bz2' filename is passed to asHandle, it must be
        possible to read the correct data from the fp that is returned.
        """
        result = BytesIO(b"AUG")

        with patch.object(bz2, "BZ2File") as mockMethod:
            mockMethod.return_value = result
            with asHandle("file.bz2") as fp:
                self.assertEqual("AUG", fp.read())

    def testGzip(self):
        """
        When a string '*.gz' filename is passed to asHandle, it must be
        possible to read the correct data from the fp that is returned.
        """
        result = BytesIO(b"AUG")

        with patch.object(gzip, "GzipFile") as mockMethod:
            mockMethod.return_value = result
            with asHandle("file.gz") as fp:
                self.assertEqual("AUG", fp.read())


class TestOpenOr(TestCase):
    """
    Test the openOr function.
    """

    def testNone(self):
        """
        A filename of C{None} must result in the default file being yielded.
        """
        default = StringIO()
        with openOr(None, "r", default) as fp:
            self.assertIs(default, fp)

    def testHyphen(self):
        """
        A filename of '-' must result in the default file being yielded.
        """
        default = StringIO()
        with openOr("-", "r", default) as fp:
            self.assertIs(default, fp)

    def testHyphenNotSpecial(self):
        """
        A filename of '-' must be opened if C{specialCaseHyphen} is C{False}.
        """
        mockOpener = mock_open(read_data="AUG")
        with patch.object(builtins, "open", mockOpener):
            with openOr("-", "r", StringIO(), specialCaseHyphen=False) as fp:
                self.assertEqual("AUG", fp.read())
        mockOpener.assert_called_once_with("-", "r", encoding="UTF-8")

    def testFilename(self):
        """
        A filename must be opened.
        """
        mockOpener = mock_open(read_data="AUG")
        with patch.object(builtins, "open", mockOpener):
            with openOr("file", "r", StringIO()) as fp:
                self.assertEqual("AUG", fp.read())
