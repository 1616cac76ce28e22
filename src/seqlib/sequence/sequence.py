# This source code is part of the Seqlib package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
The module contains the :class:`Seq` class.
"""

__name__ = "seqlib.sequence"
__author__ = "The Seqlib contributors"
__all__ = ["Seq"]

import numpy as np
from seqlib.copyable import Copyable
from seqlib.sequence.alphabet import Alphabet
from seqlib.sequence.base import Base
from seqlib.sequence.error import InvalidCharactersError, InvalidSliceError


class Seq(Copyable):
    """
    A validated nucleotide sequence.

    A :class:`Seq` is a succession of bases, that are all part of its
    :class:`Alphabet`.
    Internally, a :class:`Seq` object stores a *NumPy* :class:`ndarray`
    of symbol codes, the *sequence code*.
    The alphabet is fixed for the lifetime of the object.

    The whole input is validated upon creation:
    If any symbol is not part of the alphabet, an
    :class:`InvalidCharactersError` listing all offending symbols is
    raised, hence a :class:`Seq` can never contain an invalid symbol.

    All transformations (complement, reverse, reverse complement) are
    available in two flavors:
    The plain methods return a new :class:`Seq` and leave this object
    unchanged, the ``*_in_place()`` methods modify this object and
    return ``None``.

    A :class:`Seq` can be indexed with an integer, which returns the
    :class:`Base` at that position, or with a :class:`slice`, which
    returns a new :class:`Seq`.
    Concatenation of two sequences of the same alphabet is achieved
    with the '+' operator.

    Parameters
    ----------
    sequence : str or bytes or ndarray or iterable object of str or Base, optional
        The symbols, the :class:`Seq` is initialized with.
        Lower case letters are accepted.
        :class:`Base` objects must belong to `alphabet`.
        By default the sequence is empty.
    alphabet : Alphabet, optional
        The alphabet of the sequence.
        By default :attr:`Alphabet.DNA` is used.

    Examples
    --------

    >>> dna_seq = Seq("agact")
    >>> print(dna_seq)
    AGACT
    >>> print(dna_seq.reverse_complement())
    AGTCT
    >>> dna_seq.complement_in_place()
    >>> print(dna_seq)
    TCTGA
    >>> print(dna_seq[1:3])
    CT
    >>> print(Seq("ACGU", Alphabet.RNA).complement())
    UGCA
    >>> try:
    ...     Seq("AGXCT")
    ... except InvalidCharactersError as e:
    ...     print(e)
    Invalid sequence for DNA: found unsupported symbol(s): X. Allowed symbols are standard bases plus IUPAC ambiguity codes for DNA.
    """

    def __init__(self, sequence="", alphabet=Alphabet.DNA):
        if not isinstance(alphabet, Alphabet):
            raise TypeError(
                f"Expected 'Alphabet', but got '{type(alphabet).__name__}'"
            )
        self._alphabet = alphabet
        if not isinstance(sequence, (str, bytes, bytearray, np.ndarray)):
            symbols = []
            # Bases of another alphabet are invalid, even if the letter
            # exists in this alphabet
            foreign = []
            for symbol in sequence:
                if isinstance(symbol, Base):
                    if symbol.get_alphabet() is not alphabet:
                        foreign.append(symbol.to_char())
                        continue
                    symbol = symbol.to_char()
                symbols.append(symbol)
            if foreign:
                raise InvalidCharactersError(
                    alphabet, foreign + alphabet.get_invalid_symbols(symbols)
                )
            sequence = symbols
        self._code = alphabet.encode_multiple(sequence)

    def __repr__(self):
        """Represent Seq as a string for debugging."""
        return f'Seq("{self.to_canonical_string()}", alphabet={self._alphabet!r})'

    def __copy_create__(self):
        return Seq(alphabet=self._alphabet)

    def __copy_fill__(self, clone):
        super().__copy_fill__(clone)
        clone._code = self._code.copy()

    def _from_code(self, code):
        # 'code' is expected to be valid for the alphabet of this object
        seq = Seq(alphabet=self._alphabet)
        seq._code = code
        return seq

    @property
    def code(self):
        """
        The sequence code as read-only :class:`ndarray`.
        """
        code = self._code.view()
        code.flags.writeable = False
        return code

    @property
    def bases(self):
        """
        The bases of this sequence as list of :class:`Base` objects.
        """
        return list(self)

    def get_alphabet(self):
        """
        Get the alphabet of this sequence.

        Returns
        -------
        alphabet : Alphabet
            The alphabet.
        """
        return self._alphabet

    def is_empty(self):
        """
        Check whether the sequence contains no bases.

        Returns
        -------
        is_empty : bool
            True, if the length of the sequence is 0.
        """
        return len(self._code) == 0

    def to_canonical_string(self):
        """
        Render the sequence as string of upper case letters.

        Returns
        -------
        string : str
            The canonical string.
        """
        return self._alphabet.decode_multiple(self._code)

    def get_symbol_frequency(self):
        """
        Get the number of occurrences of each symbol in the sequence.

        If a symbol does not occur in the sequence, but it is in the
        alphabet, its number of occurrences is 0.

        Returns
        -------
        frequency : dict
            A dictionary containing the symbols as keys and the
            corresponding number of occurrences in the sequence as
            values.
        """
        counts = np.bincount(self._code, minlength=len(self._alphabet))
        return {
            symbol: count.item()
            for symbol, count in zip(self._alphabet.get_symbols(), counts)
        }

    def complement(self):
        """
        Get the complementary sequence.

        Returns
        -------
        complement : Seq
            The complementary sequence.
            This object is not modified.

        See Also
        --------
        complement_in_place
        """
        return self._from_code(self._alphabet.complement_code(self._code))

    def complement_in_place(self):
        """
        Replace every base of this sequence with its complement.

        See Also
        --------
        complement
        """
        self._alphabet.complement_code(self._code, out=self._code)

    def reverse(self):
        """
        Get the reversed sequence.

        Returns
        -------
        reversed : Seq
            The reversed sequence.
            This object is not modified.

        See Also
        --------
        reverse_in_place
        """
        return self._from_code(self._code[::-1].copy())

    def reverse_in_place(self):
        """
        Reverse the order of the bases in this sequence.

        See Also
        --------
        reverse
        """
        self._code[:] = self._code[::-1]

    def reverse_complement(self):
        """
        Get the reverse complement of the sequence.

        Returns
        -------
        rev_compl : Seq
            The reverse complementary sequence.
            This object is not modified.

        See Also
        --------
        reverse_complement_in_place
        """
        return self._from_code(self._alphabet.complement_code(self._code[::-1]))

    def reverse_complement_in_place(self):
        """
        Reverse and complement this sequence in a single pass.

        See Also
        --------
        reverse_complement
        """
        self._alphabet.complement_code(self._code[::-1], out=self._code)

    def slice(self, start, end):
        """
        Get the subsequence in the half-open range ``[start, end)``.

        In contrast to indexing with a :class:`slice`, negative or out
        of bounds positions are not allowed.

        Parameters
        ----------
        start, end : int
            0-based start and exclusive end position.

        Returns
        -------
        subsequence : Seq
            The subsequence.
            It is empty if `start` equals `end`.

        Raises
        ------
        InvalidSliceError
            If not ``0 <= start <= end <= len(self)``.

        Examples
        --------

        >>> print(Seq("ACGTTA").slice(1, 4))
        CGT
        """
        if not 0 <= start <= end <= len(self):
            raise InvalidSliceError(start, end, len(self))
        return self._from_code(self._code[start:end].copy())

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._from_code(self._code[index].copy())
        code = self._code[index]
        if isinstance(code, np.ndarray):
            raise TypeError(f"Invalid index type '{type(index).__name__}'")
        return self._alphabet.get_base_type().from_code(code)

    def __len__(self):
        return len(self._code)

    def __iter__(self):
        base_type = self._alphabet.get_base_type()
        for code in self._code:
            yield base_type.from_code(code)

    def __eq__(self, item):
        if not isinstance(item, Seq):
            return False
        if self._alphabet is not item._alphabet:
            return False
        return np.array_equal(self._code, item._code)

    # Sequences are mutable
    __hash__ = None

    def __str__(self):
        return self.to_canonical_string()

    def __add__(self, sequence):
        if not isinstance(sequence, Seq):
            return NotImplemented
        if self._alphabet is not sequence._alphabet:
            raise ValueError("The sequences alphabets are not compatible")
        return self._from_code(np.concatenate((self._code, sequence._code)))
