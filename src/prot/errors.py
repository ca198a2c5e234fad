class DecodeError(Exception):
    """An RNA sequence could not be decoded to a protein."""


class InvalidCodonError(DecodeError):
    """
    A codon containing something other than A, C, G or U was read.

    @param codon: The C{str} offending codon.
    @param offset: The C{int} (0-based) offset of the codon in the input,
        counting any characters skipped to get to the reading frame.
    """

    def __init__(self, codon: str, offset: int):
        super().__init__("Invalid codon %r at offset %d." % (codon, offset))
        self.codon = codon
        self.offset = offset


class MissingEndCodonError(DecodeError):
    """The input ended inside a translated region (no closing stop codon)."""
