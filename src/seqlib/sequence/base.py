# This source code is part of the Seqlib package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "seqlib.sequence"
__author__ = "The Seqlib contributors"
__all__ = ["ChemClass", "Base", "DnaBase", "RnaBase"]

import enum
from seqlib.sequence.alphabet import Alphabet
from seqlib.sequence.error import InvalidCharacterError


class ChemClass(enum.Enum):
    """
    The chemical class of a nucleobase.

    Ambiguity codes, that may stand for a purine as well as for a
    pyrimidine, are :attr:`AMBIGUOUS`.
    """

    PURINE = "Purine"
    PYRIMIDINE = "Pyrimidine"
    AMBIGUOUS = "Ambiguous"

    def __str__(self):
        return self.value


class Base(enum.Enum):
    """
    A single validated nucleotide symbol.

    This class only defines the behavior shared by all bases.
    The actual bases are the members of its subclasses
    :class:`DnaBase` and :class:`RnaBase`, one per alphabet.
    Each member has its canonical upper case letter as value, hence
    ``DnaBase("A") is DnaBase.A``.

    Bases from different alphabets never compare equal, even if they
    share the same letter.

    Examples
    --------

    >>> base = Base.parse("g", Alphabet.DNA)
    >>> print(base)
    G
    >>> print(base.chemical_class())
    Purine
    >>> print(base.complement())
    C
    >>> print(RnaBase.parse(b"a").complement())
    U
    """

    def __str__(self):
        return self.value

    def __repr__(self):
        return f"{type(self).__name__}.{self.name}"

    @classmethod
    def parse(cls, symbol, alphabet=None):
        """
        Parse a single symbol into a base.

        Parsing is case-insensitive.

        Parameters
        ----------
        symbol : str or bytes or int or Base
            The symbol to parse.
            A :class:`str` is treated as a decoded character, a
            :class:`bytes` object of length 1 or an :class:`int` is
            treated as raw byte.
        alphabet : Alphabet, optional
            The alphabet to validate against.
            Must be given, if this method is called on :class:`Base`
            itself, otherwise it defaults to the alphabet of the
            subclass.

        Returns
        -------
        base : Base
            The parsed base, a member of ``alphabet.get_base_type()``.

        Raises
        ------
        InvalidCharacterError
            If `symbol` is a character that is not in the alphabet.
        InvalidByteError
            If `symbol` is a byte that does not represent a base of the
            alphabet.
        """
        if alphabet is None:
            if cls not in _alphabets:
                raise TypeError("An alphabet is required to parse a generic base")
            alphabet = _alphabets[cls]
        elif cls in _alphabets and _alphabets[cls] is not alphabet:
            raise ValueError(
                f"'{cls.__name__}' cannot be parsed from the {alphabet} alphabet"
            )

        if isinstance(symbol, Base):
            if symbol.get_alphabet() is not alphabet:
                raise InvalidCharacterError(alphabet, symbol.to_char())
            return symbol
        if isinstance(symbol, str):
            code = alphabet.encode(symbol)
        else:
            code = alphabet.encode_byte(symbol)
        return alphabet.get_base_type().from_code(code)

    @classmethod
    def from_code(cls, code):
        """
        Get the base corresponding to a symbol code.

        Parameters
        ----------
        code : int
            The symbol code in the alphabet of this base type.

        Returns
        -------
        base : Base
            The base.
        """
        return _members[cls][code]

    def get_alphabet(self):
        """
        Get the alphabet this base belongs to.

        Returns
        -------
        alphabet : Alphabet
            The alphabet.
        """
        return _alphabets[type(self)]

    def get_code(self):
        """
        Get the symbol code of this base.

        Returns
        -------
        code : int
            The symbol code.
        """
        return self.get_alphabet().encode(self.value)

    def to_char(self):
        """
        Get the canonical upper case letter of this base.

        Returns
        -------
        char : str
            The letter.
        """
        return self.value

    def chemical_class(self):
        """
        Get the chemical class of this base.

        Returns
        -------
        chem_class : ChemClass
            :attr:`ChemClass.PURINE` for *A*, *G* and *R*,
            :attr:`ChemClass.PYRIMIDINE` for *C*, *T*, *U* and *Y*,
            :attr:`ChemClass.AMBIGUOUS` for all other ambiguity codes.
        """
        return _chem_classes.get(self.value, ChemClass.AMBIGUOUS)

    def complement(self):
        """
        Get the complementary base according to IUPAC.

        Returns
        -------
        complement : Base
            The complementary base from the same alphabet.
        """
        return type(self).from_code(
            int(self.get_alphabet().complement_code(self.get_code()))
        )


class DnaBase(Base):
    """
    A base of the :attr:`Alphabet.DNA` alphabet.
    """

    A = "A"
    C = "C"
    G = "G"
    T = "T"
    R = "R"
    Y = "Y"
    W = "W"
    S = "S"
    M = "M"
    K = "K"
    H = "H"
    B = "B"
    V = "V"
    D = "D"
    N = "N"


class RnaBase(Base):
    """
    A base of the :attr:`Alphabet.RNA` alphabet.
    """

    A = "A"
    C = "C"
    G = "G"
    U = "U"
    R = "R"
    Y = "Y"
    W = "W"
    S = "S"
    M = "M"
    K = "K"
    H = "H"
    B = "B"
    V = "V"
    D = "D"
    N = "N"


_alphabets = {
    DnaBase: Alphabet.DNA,
    RnaBase: Alphabet.RNA,
}

# Members indexed by their symbol code
_members = {
    base_type: tuple(base_type(symbol) for symbol in alphabet.get_symbols())
    for base_type, alphabet in _alphabets.items()
}

_chem_classes = {
    "A": ChemClass.PURINE,
    "G": ChemClass.PURINE,
    "R": ChemClass.PURINE,
    "C": ChemClass.PYRIMIDINE,
    "T": ChemClass.PYRIMIDINE,
    "U": ChemClass.PYRIMIDINE,
    "Y": ChemClass.PYRIMIDINE,
}
