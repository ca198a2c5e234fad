# The standard genetic code, as RNA codons.
#
# The table is built once, from the Biopython standard RNA codon table, and
# is exposed read-only. Stop codons translate to STOP (they are not in
# Biopython's forward table).

from types import MappingProxyType
from typing import Mapping

from Bio.Data.CodonTable import standard_rna_table

# The symbol stop codons translate to. It is never written to the output.
STOP = "."

# The symbol the start codon translates to. It is written to the output.
START = "M"

START_CODON = "AUG"
STOP_CODONS = ("UAA", "UAG", "UGA")


def _makeCodonTable() -> Mapping[str, str]:
    """
    Build the codon to amino acid table.

    @raise ValueError: If the Biopython table does not contain exactly
        61 sense codons and our 3 stop codons.
    @return: A read-only C{dict} mapping all 64 RNA codons to a 1-letter
        amino acid C{str} or to C{STOP}.
    """
    table = dict(standard_rna_table.forward_table)

    if sorted(standard_rna_table.stop_codons) != sorted(STOP_CODONS):
        raise ValueError(
            "Unexpected stop codons in the standard RNA table: %s."
            % ", ".join(sorted(standard_rna_table.stop_codons))
        )

    for codon in STOP_CODONS:
        table[codon] = STOP

    if len(table) != 64 or table[START_CODON] != START:
        raise ValueError("The standard RNA codon table is incomplete.")

    return MappingProxyType(table)


CODON_TABLE = _makeCodonTable()


def lookup(codon: str) -> str:
    """
    Translate a codon.

    @param codon: A C{str} RNA codon. This must be valid (see
        L{prot.rna.isValidCodon}).
    @raise KeyError: If C{codon} is not a valid RNA codon.
    @return: The 1-letter C{str} amino acid for C{codon}, or C{STOP}.
    """
    return CODON_TABLE[codon]
