RNA_LETTERS = frozenset("ACGU")


def isValidCodon(codon: str) -> bool:
    """
    Is a string a valid RNA codon?

    @param codon: A C{str} to check. Case is significant.
    @return: C{True} if C{codon} has three characters, each of which is
        A, C, G or U.
    """
    return len(codon) == 3 and all(base in RNA_LETTERS for base in codon)
