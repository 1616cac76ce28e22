# This source code is part of the Seqlib package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "seqlib.sequence"
__author__ = "The Seqlib contributors"
__all__ = ["Alphabet"]

import enum
from numbers import Integral
import numpy as np
from seqlib.sequence.error import (
    InvalidByteError,
    InvalidCharacterError,
    InvalidCharactersError,
)


class Alphabet(enum.Enum):
    """
    This enum defines the allowed symbols of a :class:`Seq` and handles
    the encoding/decoding between symbols and symbol codes.

    Both alphabets contain the four standard bases of the respective
    nucleic acid and the IUPAC ambiguity codes.
    They only differ in ``T`` (DNA) and ``U`` (RNA).

    The *symbol code* of a symbol is its index in the symbol tuple
    returned by :meth:`get_symbols()`.
    Encoding is case-insensitive, decoding always yields the canonical
    upper case letter.

    Examples
    --------

    >>> print(Alphabet.DNA.encode("g"))
    2
    >>> print(Alphabet.RNA.decode(3))
    U
    >>> print(Alphabet.DNA.decode_multiple(Alphabet.DNA.encode_multiple("acgn")))
    ACGN
    >>> try:
    ...     Alphabet.DNA.encode_multiple("AGXCTZX")
    ... except InvalidCharactersError as e:
    ...     print(e.invalid)
    ('X', 'Z')
    """

    DNA = "DNA"
    RNA = "RNA"

    def __str__(self):
        return self.value

    def __repr__(self):
        return f"Alphabet.{self.name}"

    def __len__(self):
        return len(_symbols[self])

    def get_symbols(self):
        """
        Get the canonical symbols in the alphabet.

        Returns
        -------
        symbols : tuple of str
            The symbols.
            The index of a symbol is its symbol code.
        """
        return _symbols[self]

    def get_base_type(self):
        """
        Get the :class:`Base` subclass, whose members are the bases of
        this alphabet.

        Returns
        -------
        base_type : type
            Either :class:`DnaBase` or :class:`RnaBase`.
        """
        # Import at this position to avoid circular import
        from seqlib.sequence.base import DnaBase, RnaBase

        return DnaBase if self is Alphabet.DNA else RnaBase

    def is_valid_symbol(self, symbol):
        """
        Check whether a single character is a (case-insensitive) symbol
        of this alphabet.

        Parameters
        ----------
        symbol : object
            The symbol to check.

        Returns
        -------
        is_valid : bool
            True, if `symbol` can be encoded, false otherwise.
        """
        if not isinstance(symbol, str) or len(symbol) != 1 or not symbol.isascii():
            return False
        return _encode_tables[self][ord(symbol)] != _ILLEGAL

    def encode(self, symbol):
        """
        Use the alphabet to encode a single character.

        Parameters
        ----------
        symbol : str
            The character to encode. Lower case is accepted.

        Returns
        -------
        code : int
            The symbol code of `symbol`.

        Raises
        ------
        InvalidCharacterError
            If `symbol` is not in the alphabet.
        """
        if not self.is_valid_symbol(symbol):
            raise InvalidCharacterError(
                self, symbol.upper() if isinstance(symbol, str) else symbol
            )
        return int(_encode_tables[self][ord(symbol)])

    def encode_byte(self, byte):
        """
        Use the alphabet to encode a single raw byte.

        Parameters
        ----------
        byte : int or bytes
            The byte value (0-255) or a :class:`bytes` object of
            length 1.

        Returns
        -------
        code : int
            The symbol code of `byte`.

        Raises
        ------
        InvalidByteError
            If `byte` does not represent a symbol of the alphabet.
        """
        if isinstance(byte, (bytes, bytearray)) and len(byte) == 1:
            value = byte[0]
        elif (
            isinstance(byte, Integral)
            and not isinstance(byte, bool)
            and 0 <= byte <= 255
        ):
            value = int(byte)
        else:
            raise InvalidByteError(self, byte)
        code = _encode_tables[self][value]
        if code == _ILLEGAL:
            raise InvalidByteError(self, value)
        return int(code)

    def encode_multiple(self, symbols):
        """
        Encode multiple symbols at once.

        In contrast to :meth:`encode()`, all symbols are checked before
        an exception is raised, so that the exception reports every
        offending symbol.

        Parameters
        ----------
        symbols : str or bytes or ndarray or iterable object of str or bytes
            The symbols to encode.
            The method is fastest when a :class:`str` or :class:`bytes`
            object or an :class:`ndarray` with dtype ``|S1`` is given.

        Returns
        -------
        code : ndarray, dtype=uint8
            The sequence code.

        Raises
        ------
        InvalidCharactersError
            If any of the `symbols` is not in the alphabet.
        """
        if isinstance(symbols, np.ndarray):
            if symbols.dtype != np.dtype("|S1"):
                # e.g. 'U1' arrays are checked element-wise
                return self.encode_multiple(symbols.tolist())
            symbols = np.frombuffer(symbols.tobytes(), dtype=np.ubyte)
        elif isinstance(symbols, str):
            if not symbols.isascii():
                self._raise_for_invalid(symbols)
            symbols = np.frombuffer(symbols.encode("ASCII"), dtype=np.ubyte)
        elif isinstance(symbols, (bytes, bytearray)):
            symbols = np.frombuffer(bytes(symbols), dtype=np.ubyte)
        else:
            symbols = [_as_letter(symbol) for symbol in symbols]
            self._raise_for_invalid(symbols)
            return np.array(
                [_encode_tables[self][ord(symbol)] for symbol in symbols],
                dtype=np.uint8,
            )

        code = _encode_tables[self][symbols]
        illegal_mask = code == _ILLEGAL
        if illegal_mask.any():
            raise InvalidCharactersError(
                self, [chr(byte).upper() for byte in np.unique(symbols[illegal_mask])]
            )
        return code

    def decode(self, code):
        """
        Use the alphabet to decode a symbol code.

        Parameters
        ----------
        code : int
            The symbol code to be decoded.

        Returns
        -------
        symbol : str
            The canonical symbol corresponding to `code`.
        """
        if code < 0 or code >= len(self):
            raise ValueError(f"'{code:d}' is not a valid code")
        return _symbols[self][code]

    def decode_multiple(self, code):
        """
        Decode a sequence code into a string of canonical symbols.

        Parameters
        ----------
        code : ndarray, dtype=uint8
            The sequence code to decode.

        Returns
        -------
        symbols : str
            The decoded symbols.
        """
        return _decode_tables[self][code].tobytes().decode("ASCII")

    def complement_code(self, code, out=None):
        """
        Map symbol codes to the codes of their complementary symbols.

        Parameters
        ----------
        code : int or ndarray, dtype=uint8
            The symbol code(s) to be complemented.
        out : ndarray, dtype=uint8, optional
            If given, the result is written into this array.
            It may be the same array as `code`.

        Returns
        -------
        compl_code : int or ndarray, dtype=uint8
            The complementary symbol code(s).
        """
        return np.take(_complement_tables[self], code, out=out)

    def get_invalid_symbols(self, symbols):
        """
        Find all symbols, that are not part of this alphabet.

        Parameters
        ----------
        symbols : iterable object of str or bytes
            The symbols to check.

        Returns
        -------
        invalid : list of str
            The offending symbols in upper case, in order of occurrence.
        """
        invalid = []
        for symbol in symbols:
            symbol = _as_letter(symbol)
            if not self.is_valid_symbol(symbol):
                invalid.append(
                    symbol.upper() if isinstance(symbol, str) else str(symbol)
                )
        return invalid

    def _raise_for_invalid(self, symbols):
        invalid = self.get_invalid_symbols(symbols)
        if invalid:
            raise InvalidCharactersError(self, invalid)


def _as_letter(symbol):
    # Single bytes, e.g. elements of a '|S1' array, are treated as letters
    if isinstance(symbol, (bytes, bytearray)):
        return symbol.decode("latin-1")
    return symbol


# Marks bytes, that do not represent a symbol, in the encoding tables
_ILLEGAL = 255

_symbols = {
    Alphabet.DNA: (
        "A", "C", "G", "T", "R", "Y", "W", "S", "M", "K", "H", "B", "V", "D", "N"
    ),
    Alphabet.RNA: (
        "A", "C", "G", "U", "R", "Y", "W", "S", "M", "K", "H", "B", "V", "D", "N"
    ),
}  # fmt: skip

_dna_complements = {
    "A": "T",
    "C": "G",
    "G": "C",
    "T": "A",
    "R": "Y",
    "Y": "R",
    "W": "W",
    "S": "S",
    "M": "K",
    "K": "M",
    "H": "D",
    "B": "V",
    "V": "B",
    "D": "H",
    "N": "N",
}
_complements = {
    Alphabet.DNA: _dna_complements,
    Alphabet.RNA: {
        key.replace("T", "U"): value.replace("T", "U")
        for key, value in _dna_complements.items()
    },
}


def _create_encode_table(symbols):
    table = np.full(256, _ILLEGAL, dtype=np.uint8)
    for code, symbol in enumerate(symbols):
        table[ord(symbol)] = code
        table[ord(symbol.lower())] = code
    return table


def _create_complement_table(symbols, complements):
    return np.array(
        [symbols.index(complements[symbol]) for symbol in symbols], dtype=np.uint8
    )


_encode_tables = {
    alphabet: _create_encode_table(symbols) for alphabet, symbols in _symbols.items()
}
_decode_tables = {
    alphabet: np.array(symbols, dtype="|S1") for alphabet, symbols in _symbols.items()
}
_complement_tables = {
    alphabet: _create_complement_table(symbols, _complements[alphabet])
    for alphabet, symbols in _symbols.items()
}
