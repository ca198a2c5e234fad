import os
from contextlib import contextmanager
import progressbar  # type: ignore


@contextmanager
def maybeProgressBar(show, inputSize, prefix="Decoding "):
    """
    A context manager to maybe show a progress bar while reading input.

    @param show: If C{True} and standard error is a terminal, yield a
        progress bar, else a class with an C{update} method that does nothing.
    @param inputSize: The C{int} size of the input, in bytes.
    @param prefix: A C{str} prefix, to appear at the start of the progress bar.
    """
    if show and os.isatty(2):
        widgets = [
            progressbar.DataSize(),
            " ",
            progressbar.Percentage(format="%(percentage)3d%%"),
            " ",
            progressbar.Bar(marker="\x1b[33m#\x1b[39m"),
            " ",
            progressbar.FileTransferSpeed(),
            " ",
            progressbar.ETA(format="ETA: %(eta)8s"),
        ]
        with progressbar.ProgressBar(
            max_value=inputSize, widgets=widgets, prefix=prefix
        ) as bar:
            yield bar
    else:

        class Bar:
            update = staticmethod(lambda _: None)

        yield Bar
