from unittest import TestCase
from unittest.mock import patch

from prot.progress import maybeProgressBar


class TestMaybeProgressBar(TestCase):
    """
    Test the maybeProgressBar function.
    """

    def testNotShown(self):
        """
        When no progress bar is wanted, the yielded object must have an update
        method that does nothing.
        """
        with maybeProgressBar(False, 100, "Decoding ") as bar:
            self.assertIsNone(bar.update(50))

    def testNotATerminal(self):
        """
        When standard error is not a terminal, no progress bar must be shown.
        """
        with patch("os.isatty", return_value=False):
            with maybeProgressBar(True, 100, "Decoding ") as bar:
                self.assertEqual("Bar", bar.__name__)
                bar.update(50)
