from io import StringIO
from typing import Optional

from prot import File
from prot.codonTable import START, STOP, lookup
from prot.errors import InvalidCodonError, MissingEndCodonError
from prot.rna import isValidCodon
from prot.utils import asHandle

WAITING = "waiting"
ACTIVE = "active"
CLOSED = "closed"

FRAMES = (0, 1, 2)

# How many codons to decode between calls to a progress bar update.
PROGRESS_INTERVAL = 10000


class DecodeState:
    """
    Track whether translation is active, codon by codon.

    Translation is active between a start codon (or the beginning of the
    input, if C{waitForStart} is C{False}) and a stop codon. Stop codons only
    end a translated region if C{useStopCodon} is C{True}, otherwise they
    are skipped.

    @param waitForStart: If C{True}, amino acids before the first start
        codon are not emitted.
    @param useStopCodon: If C{True}, a stop codon closes the current region
        and nothing is emitted until the next start codon.
    """

    def __init__(self, waitForStart: bool = True, useStopCodon: bool = True):
        self.useStopCodon = useStopCodon
        self.started = not waitForStart
        self.ended = False

    def __str__(self):
        return "<%s: %s>" % (self.__class__.__name__, self.state)

    @property
    def state(self) -> str:
        """
        Get the current state.

        @return: One of C{WAITING}, C{ACTIVE} or C{CLOSED}.
        """
        if self.started:
            return ACTIVE
        return CLOSED if self.ended else WAITING

    @property
    def unterminated(self) -> bool:
        """
        Has a region been opened and not closed when it had to be?
        """
        return self.useStopCodon and self.started and not self.ended

    def feed(self, aa: str) -> Optional[str]:
        """
        Process the next translated codon.

        @param aa: A 1-letter C{str} amino acid, or C{STOP}.
        @return: The C{str} amino acid to emit, or C{None} if nothing should
            be emitted.
        """
        if not self.started:
            if aa != START:
                return None
            # The start codon codes for an amino acid too.
            self.started = True
            self.ended = False

        if aa == STOP:
            if self.useStopCodon:
                self.started = False
                self.ended = True
            return None

        return aa


def decode(
    fp: File,
    out: File,
    frame: int = 0,
    waitForStart: bool = True,
    useStopCodon: bool = True,
    progress=None,
) -> int:
    """
    Translate RNA read from one file to amino acids written to another.

    @param fp: A file name or an open file handle (text or binary) to read
        RNA from. A named file is read as bytes, so any byte that is not
        A, C, G or U is reported as an invalid codon. A handle is not closed.
    @param out: A file name or an open text file handle to write amino acids
        to. A handle is not closed.
    @param frame: The C{int} reading frame, 0, 1 or 2. This many characters
        are skipped before the first codon is read.
    @param waitForStart: If C{True}, amino acids before the first start
        codon are not written.
    @param useStopCodon: If C{True}, amino acids after a stop codon are not
        written until the next start codon, and the input must not end
        inside a translated region.
    @param progress: If not C{None}, an object with an C{update} method that
        will be called with the number of characters read so far.
    @raise ValueError: If C{frame} is not 0, 1 or 2.
    @raise InvalidCodonError: If a codon contains anything other than A, C,
        G or U. Amino acids already written are not removed.
    @raise MissingEndCodonError: If C{useStopCodon} is C{True} and the input
        ends inside a translated region.
    @return: The C{int} number of amino acids written.
    """
    if frame not in FRAMES:
        raise ValueError(
            "Reading frame must be one of %s (got %r)."
            % (", ".join(map(str, FRAMES)), frame)
        )

    state = DecodeState(waitForStart=waitForStart, useStopCodon=useStopCodon)
    count = 0

    with asHandle(fp, "rb") as infp, asHandle(out, "wt") as outfp:
        offset = len(infp.read(frame)) if frame else 0
        write = outfp.write
        codonCount = 0

        while True:
            codon = infp.read(3)
            if isinstance(codon, bytes):
                codon = codon.decode("latin-1")

            if len(codon) < 3:
                # A partial codon at the end of the input is ignored.
                offset += len(codon)
                break

            if not isValidCodon(codon):
                raise InvalidCodonError(codon, offset)

            aa = state.feed(lookup(codon))
            if aa is not None:
                write(aa)
                count += 1

            offset += 3
            codonCount += 1
            if progress is not None and codonCount % PROGRESS_INTERVAL == 0:
                progress.update(offset)

        if progress is not None:
            progress.update(offset)

    if state.unterminated:
        raise MissingEndCodonError(
            "Missing end codon - the decoded sequence is not finished."
        )

    return count


def translate(
    sequence: str,
    frame: int = 0,
    waitForStart: bool = True,
    useStopCodon: bool = True,
) -> str:
    """
    Translate an RNA sequence.

    @param sequence: A C{str} RNA sequence.
    @param frame: The C{int} reading frame, 0, 1 or 2.
    @param waitForStart: If C{True}, ignore amino acids before the first
        start codon.
    @param useStopCodon: If C{True}, ignore amino acids after a stop codon
        until the next start codon, and insist that the sequence does not
        end inside a translated region.
    @raise ValueError: If C{frame} is not 0, 1 or 2.
    @raise InvalidCodonError: If C{sequence} contains an invalid codon.
    @raise MissingEndCodonError: If C{useStopCodon} is C{True} and
        C{sequence} ends inside a translated region.
    @return: The C{str} protein.
    """
    out = StringIO()
    decode(
        StringIO(sequence),
        out,
        frame=frame,
        waitForStart=waitForStart,
        useStopCodon=useStopCodon,
    )
    return out.getvalue()
