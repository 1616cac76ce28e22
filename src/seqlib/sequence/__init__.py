# This source code is part of the Seqlib package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for handling nucleotide sequences and small variants.

A :class:`Seq` is a succession of bases.
The set of bases, that can occur in a sequence, is defined by its
:class:`Alphabet`, either :attr:`Alphabet.DNA` or :attr:`Alphabet.RNA`.
Both alphabets contain the standard bases of the respective nucleic
acid and the IUPAC ambiguity codes.
If a :class:`Seq` is created with any symbol, that is not in the
given :class:`Alphabet`, an :class:`InvalidCharactersError` is raised,
that lists all offending symbols.

A single symbol is represented by a :class:`Base`, more specifically
by a member of :class:`DnaBase` or :class:`RnaBase`.
Each base knows its complement and its :class:`ChemClass`.

Internally, a :class:`Seq` is saved as a *NumPy* :class:`ndarray`
of integer values, where each integer represents a symbol in the
:class:`Alphabet`.
For example, ``'A'``, ``'C'``, ``'G'`` and ``'T'`` are encoded into
0, 1, 2 and 3, respectively.
These integer values are called *symbol code*, the encoding of an entire
sequence of symbols is called *sequence code*.

On top of sequences, a :class:`SmallMutation` describes the replacement
of a reference allele with an alternative allele.
It is classified by its allele lengths into a :class:`SmallMutationType`
and, for single nucleotide variants, into a :class:`TiTv`.

All errors raised by this subpackage are subclasses of
:class:`SeqError`.
"""

__name__ = "seqlib.sequence"
__author__ = "The Seqlib contributors"

from .error import *
from .alphabet import *
from .base import *
from .sequence import *
from .mutation import *
