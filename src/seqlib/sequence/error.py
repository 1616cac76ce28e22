# This source code is part of the Seqlib package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains all possible errors and warnings of the
`sequence` subpackage.
"""

__name__ = "seqlib.sequence"
__author__ = "The Seqlib contributors"
__all__ = [
    "SeqError",
    "InvalidCharactersError",
    "InvalidCharacterError",
    "InvalidByteError",
    "InvalidSliceError",
    "ZeroLengthAlleleWarning",
]


class SeqError(Exception):
    """
    Base class for all errors raised by sequence validation and
    range operations.
    """

    pass


class InvalidCharactersError(SeqError):
    """
    Indicates that a sequence contains one or more symbols, that are
    not part of its :class:`Alphabet`.

    Parameters
    ----------
    alphabet : Alphabet
        The alphabet the sequence was validated against.
    invalid : iterable of str
        The offending symbols.
        They are stored upper-cased, de-duplicated and sorted.
    """

    def __init__(self, alphabet, invalid):
        self.alphabet = alphabet
        self.invalid = tuple(sorted(set(invalid)))
        super().__init__(
            f"Invalid sequence for {alphabet}: found unsupported symbol(s): "
            f"{', '.join(self.invalid)}. "
            f"Allowed symbols are standard bases plus IUPAC ambiguity codes "
            f"for {alphabet}."
        )

    def __reduce__(self):
        return type(self), (self.alphabet, self.invalid)


class InvalidCharacterError(SeqError):
    """
    Indicates that a single decoded character is not a base of the
    given :class:`Alphabet`.
    """

    def __init__(self, alphabet, invalid):
        self.alphabet = alphabet
        self.invalid = invalid
        super().__init__(
            f"Invalid {alphabet} base: '{invalid}'. "
            f"Allowed symbols are standard bases plus IUPAC ambiguity codes "
            f"for {alphabet}."
        )

    def __reduce__(self):
        return type(self), (self.alphabet, self.invalid)


class InvalidByteError(SeqError):
    """
    Indicates that a single raw byte does not represent a base of the
    given :class:`Alphabet`.
    """

    def __init__(self, alphabet, invalid):
        self.alphabet = alphabet
        self.invalid = invalid
        super().__init__(
            f"Invalid {alphabet} byte value: {invalid}. "
            f"Expected an ASCII letter representing a nucleotide "
            f"(e.g. A,C,G,T/U,N)."
        )

    def __reduce__(self):
        return type(self), (self.alphabet, self.invalid)


class InvalidSliceError(SeqError):
    """
    Indicates that a requested subsequence range violates
    ``0 <= start <= end <= length``.
    """

    def __init__(self, start, end, length):
        self.start = start
        self.end = end
        self.length = length
        super().__init__(
            f"Invalid subsequence coordinates: requested range "
            f"[{start}, {end}) on a sequence of length {length}. "
            f"Indices are 0-based and the end position is exclusive."
        )

    def __reduce__(self):
        return type(self), (self.start, self.end, self.length)


class ZeroLengthAlleleWarning(UserWarning):
    """
    Indicates that a mutation was created with an empty reference and
    an empty alternative allele.
    """

    pass
