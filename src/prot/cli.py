import argparse
import os
import sys
from collections import namedtuple
from contextlib import ExitStack

from prot.decode import FRAMES, decode
from prot.errors import InvalidCodonError, MissingEndCodonError
from prot.progress import maybeProgressBar
from prot.utils import openOr

EXIT_OK = 0
EXIT_BAD_INPUT_PATH = -1
EXIT_BAD_OUTPUT_PATH = -2
EXIT_BAD_FRAME = -3
EXIT_OPEN_FAILED = -4
EXIT_INVALID_CODON = -5
EXIT_MISSING_END_CODON = -6
EXIT_BAD_ARGUMENTS = -7

DEFAULT_INPUT = "in.txt"
DEFAULT_OUTPUT = "out.txt"

EPILOG = """\
The program reads an RNA sequence from the input file and writes the decoded
amino acids to the output file. See http://rosalind.info/problems/prot/

Reading frames are described at https://en.wikipedia.org/wiki/Genetic_code

The program exits with status 0 on success and an error code otherwise.

Error code | Meaning
-1         | Input file path does not have a file name or the file does not
           | exist.
-2         | Output file path does not have a file name.
-3         | Invalid reading frame value.
-4         | Error while opening input and/or output file.
-5         | Input file contains an invalid codon - a codon that contains
           | characters other than A, U, C, G.
-6         | Missing end codon - the decoded sequence in the output file is
           | not finished.
-7         | Error parsing input arguments.
"""

DecodeOptions = namedtuple(
    "DecodeOptions",
    ("input", "output", "frame", "waitForStart", "useStopCodon", "progress"),
)


class DecodeArgumentParser(argparse.ArgumentParser):
    """
    An argument parser that exits with C{EXIT_BAD_ARGUMENTS} on error.
    """

    def error(self, message):
        print("Error parsing input arguments: %s" % message, file=sys.stderr)
        self.print_help(sys.stderr)
        sys.exit(EXIT_BAD_ARGUMENTS)


def makeParser():
    """
    Make an argument parser for the RNA to protein program.

    @return: A C{DecodeArgumentParser} instance.
    """
    parser = DecodeArgumentParser(
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="Translate an RNA sequence into a protein sequence.",
        epilog=EPILOG,
    )
    addDecodeCommandLineOptions(parser)
    return parser


def addDecodeCommandLineOptions(parser):
    """
    Add decoding command-line options to an argparse parser.

    @param parser: An C{argparse.ArgumentParser} instance.
    """
    parser.add_argument(
        "-i",
        "--input",
        default=DEFAULT_INPUT,
        metavar="FILENAME",
        help=(
            "The RNA input file. Use - for standard input "
            "(default: %s)." % DEFAULT_INPUT
        ),
    )

    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT,
        metavar="FILENAME",
        help=(
            "The protein output file. It is overwritten if it exists. Use - "
            "for standard output (default: %s)." % DEFAULT_OUTPUT
        ),
    )

    parser.add_argument(
        "-f",
        "--frame",
        type=int,
        default=0,
        metavar="N",
        help=(
            "The RNA reading frame, the number of leading bases to skip. "
            "Valid: %s (default: 0)." % ", ".join(map(str, FRAMES))
        ),
    )

    parser.add_argument(
        "-w",
        "--waitforstart",
        choices=("0", "1"),
        default="1",
        help=(
            "If 1, amino acids decoded before the first start codon are "
            "ignored (default: 1)."
        ),
    )

    parser.add_argument(
        "-s",
        "--usestop",
        choices=("0", "1"),
        default="1",
        help=(
            "If 1, amino acids decoded after a stop codon and before the next "
            "start codon are ignored, and the input must not end inside a "
            "decoded region (default: 1)."
        ),
    )

    parser.add_argument(
        "--progress",
        default=False,
        action="store_true",
        help="Show a progress bar (only when reading an uncompressed file).",
    )


def parseDecodeCommandLineOptions(args):
    """
    Examine parsed command-line options and return decoding options.

    @param args: An argparse namespace, as returned by the argparse
        C{parse_args} function.
    @return: A C{DecodeOptions} instance.
    """
    return DecodeOptions(
        input=args.input,
        output=args.output,
        frame=args.frame,
        waitForStart=args.waitforstart == "1",
        useStopCodon=args.usestop == "1",
        progress=args.progress,
    )


def checkOptions(options):
    """
    Check decoding options before any file is opened.

    @param options: A C{DecodeOptions} instance.
    @return: An C{int} exit code, C{EXIT_OK} if the options are usable.
    """
    if options.input != "-" and (
        not os.path.basename(options.input) or not os.path.exists(options.input)
    ):
        print(
            "Input file path does not have a file name or the file does not "
            "exist.",
            file=sys.stderr,
        )
        return EXIT_BAD_INPUT_PATH

    if options.output != "-" and not os.path.basename(options.output):
        print("Output file path does not have a file name.", file=sys.stderr)
        return EXIT_BAD_OUTPUT_PATH

    if options.frame not in FRAMES:
        print("Invalid reading frame value.", file=sys.stderr)
        return EXIT_BAD_FRAME

    return EXIT_OK


def decodeFromOptions(options):
    """
    Check options, open files, and decode.

    @param options: A C{DecodeOptions} instance.
    @return: An C{int} exit code.
    """
    result = checkOptions(options)
    if result != EXIT_OK:
        return result

    # The size of a compressed file says nothing about how much RNA it holds.
    inputSize = 0
    if (
        options.progress
        and options.input != "-"
        and not options.input.endswith((".gz", ".bz2"))
    ):
        inputSize = os.path.getsize(options.input)

    # The input is read as bytes so a non-UTF-8 byte is an invalid codon.
    stdin = sys.stdin.buffer if options.input == "-" else None

    with ExitStack() as stack:
        try:
            infp = stack.enter_context(openOr(options.input, "rb", stdin))
            outfp = stack.enter_context(openOr(options.output, "wt", sys.stdout))
        except OSError as e:
            print(
                "Error while opening input and/or output file: %s" % e,
                file=sys.stderr,
            )
            return EXIT_OPEN_FAILED

        with maybeProgressBar(inputSize > 0, inputSize) as bar:
            try:
                decode(
                    infp,
                    outfp,
                    frame=options.frame,
                    waitForStart=options.waitForStart,
                    useStopCodon=options.useStopCodon,
                    progress=bar,
                )
            except InvalidCodonError as e:
                print("Invalid codon: %s" % e.codon, file=sys.stderr)
                return EXIT_INVALID_CODON
            except MissingEndCodonError:
                print(
                    "Missing end codon - the decoded sequence is not finished.",
                    file=sys.stderr,
                )
                return EXIT_MISSING_END_CODON

    return EXIT_OK


def main(argv=None):
    """
    Run the RNA to protein program.

    @param argv: A C{list} of C{str} arguments, or C{None} to use
        C{sys.argv[1:]}.
    @return: An C{int} exit code.
    """
    args = makeParser().parse_args(argv)
    return decodeFromOptions(parseDecodeCommandLineOptions(args))
