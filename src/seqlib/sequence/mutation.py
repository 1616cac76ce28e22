# This source code is part of the Seqlib package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
The module contains the :class:`SmallMutation` class and its derived
classifications.
"""

__name__ = "seqlib.sequence"
__author__ = "The Seqlib contributors"
__all__ = ["SmallMutation", "SmallMutationType", "TiTv"]

import enum
import warnings
from seqlib.copyable import Copyable
from seqlib.sequence.base import ChemClass
from seqlib.sequence.error import ZeroLengthAlleleWarning


class SmallMutationType(enum.Enum):
    """
    The type of a small variant, determined by the lengths of its
    reference and alternative allele.
    """

    SNV = "SNV"
    DOUBLET = "DOUBLET"
    MNV = "MNV"
    INSERTION = "INSERTION"
    DELETION = "DELETION"

    def __str__(self):
        return self.value

    @staticmethod
    def from_lengths(reflen, altlen):
        """
        Classify a variant by its allele lengths.

        Parameters
        ----------
        reflen, altlen : int
            The length of the reference and the alternative allele.

        Returns
        -------
        mutation_type : SmallMutationType
            :attr:`INSERTION` if the alternative allele is longer,
            :attr:`DELETION` if it is shorter.
            Alleles of equal length are a :attr:`SNV` (length 1), a
            :attr:`DOUBLET` (length 2) or a :attr:`MNV` (otherwise).

        Notes
        -----
        Two empty alleles are classified as :attr:`MNV`.
        Callers working with formats that forbid empty alleles, like
        VCF, need to reject them beforehand.

        Examples
        --------

        >>> print(SmallMutationType.from_lengths(1, 3))
        INSERTION
        >>> print(SmallMutationType.from_lengths(2, 2))
        DOUBLET
        """
        if altlen > reflen:
            return SmallMutationType.INSERTION
        elif altlen < reflen:
            return SmallMutationType.DELETION
        elif reflen == 1:
            return SmallMutationType.SNV
        elif reflen == 2:
            return SmallMutationType.DOUBLET
        else:
            # Also includes the degenerate case of two empty alleles
            return SmallMutationType.MNV


class TiTv(enum.Enum):
    """
    Distinguishes substitutions within a chemical class (transitions)
    from substitutions between purines and pyrimidines (transversions).
    """

    TRANSITION = "Transition"
    TRANSVERSION = "Transversion"

    def __str__(self):
        return self.value

    @staticmethod
    def from_chemical_class(reference, alternative):
        """
        Classify a substitution by the chemical classes of the
        reference and the alternative base.

        Parameters
        ----------
        reference, alternative : ChemClass
            The chemical classes of both bases.

        Returns
        -------
        titv : TiTv or None
            ``None`` if any of both classes is
            :attr:`ChemClass.AMBIGUOUS`.
        """
        if ChemClass.AMBIGUOUS in (reference, alternative):
            return None
        if reference is alternative:
            return TiTv.TRANSITION
        return TiTv.TRANSVERSION


class SmallMutation(Copyable):
    """
    A small genomic variant, i.e. the replacement of a reference allele
    with an alternative allele at a position of a chromosome.

    The mutation takes ownership of the given sequences:
    They should not be modified by the caller afterwards.
    Apart from attaching a context sequence via :meth:`add_context()`,
    a mutation is not modified after its creation.

    Parameters
    ----------
    chromosome : str
        The name of the chromosome.
    position : int
        The 1-based start position of the variant.
    reference, alternative : Seq
        The reference and the alternative allele.
    multiallelic : bool, optional
        Whether the variant site has more than one alternative allele.
    context : Seq, optional
        The sequence surrounding the variant.

    Warns
    -----
    ZeroLengthAlleleWarning
        If both alleles are empty.

    Examples
    --------

    >>> mutation = SmallMutation("chr1", 1000, Seq("A"), Seq("G"))
    >>> print(mutation)
    chr1:1000 A>G (delta: 0; class: SNV; multiallelic:false)
    >>> print(mutation.titv())
    Transition
    >>> print(SmallMutation("chr2", 5, Seq("AG"), Seq("A")).classify())
    DELETION
    """

    def __init__(
        self,
        chromosome,
        position,
        reference,
        alternative,
        multiallelic=False,
        context=None,
    ):
        self._chromosome = chromosome
        self._position = position
        self._reference = reference
        self._alternative = alternative
        self._multiallelic = multiallelic
        self._context = context
        if len(reference) == 0 and len(alternative) == 0:
            warnings.warn(
                f"Mutation at {chromosome}:{position} has an empty reference "
                f"and alternative allele",
                ZeroLengthAlleleWarning,
            )

    def __repr__(self):
        """Represent SmallMutation as a string for debugging."""
        return (
            f"SmallMutation({self._chromosome!r}, {self._position!r}, "
            f"{self._reference!r}, {self._alternative!r}, "
            f"multiallelic={self._multiallelic!r}, context={self._context!r})"
        )

    def __str__(self):
        return (
            f"{self._chromosome}:{self._position} "
            f"{self._reference}>{self._alternative} "
            f"(delta: {self.delta()}; class: {self.classify()}; "
            f"multiallelic:{str(self._multiallelic).lower()})"
        )

    def __eq__(self, item):
        if not isinstance(item, SmallMutation):
            return False
        return (
            self._chromosome == item._chromosome
            and self._position == item._position
            and self._reference == item._reference
            and self._alternative == item._alternative
            and self._multiallelic == item._multiallelic
            and self._context == item._context
        )

    # Mutations are mutable via 'add_context()'
    __hash__ = None

    def __copy_create__(self):
        # Alleles of the copy must not share storage with the original
        # -> Copy sequences before handing them to the constructor
        return SmallMutation(
            self._chromosome,
            self._position,
            self._reference.copy(),
            self._alternative.copy(),
            self._multiallelic,
            None if self._context is None else self._context.copy(),
        )

    @property
    def chromosome(self):
        """
        The name of the chromosome.
        """
        return self._chromosome

    @property
    def position(self):
        """
        The 1-based start position of the variant.
        """
        return self._position

    @property
    def reference(self):
        """
        The reference allele as :class:`Seq`.
        """
        return self._reference

    @property
    def alternative(self):
        """
        The alternative allele as :class:`Seq`.
        """
        return self._alternative

    @property
    def multiallelic(self):
        """
        Whether the variant site has more than one alternative allele.
        """
        return self._multiallelic

    @property
    def context(self):
        """
        The sequence surrounding the variant or ``None``, if no context
        was attached.
        """
        return self._context

    def add_context(self, seq):
        """
        Attach the sequence surrounding the variant.

        An already attached context sequence is replaced.

        Parameters
        ----------
        seq : Seq
            The context sequence.
        """
        self._context = seq

    def reflen(self):
        """
        Get the length of the reference allele.

        Returns
        -------
        reflen : int
            The number of bases in the reference allele.
        """
        return len(self._reference)

    def altlen(self):
        """
        Get the length of the alternative allele.

        Returns
        -------
        altlen : int
            The number of bases in the alternative allele.
        """
        return len(self._alternative)

    def delta(self):
        """
        Get the net length change caused by this mutation.

        Returns
        -------
        delta : int
            Positive for a net insertion, negative for a net deletion
            and 0 for substitutions of equal length.
        """
        return self.altlen() - self.reflen()

    def classify(self):
        """
        Get the type of this mutation.

        Returns
        -------
        mutation_type : SmallMutationType
            The type, determined by the allele lengths.

        See Also
        --------
        SmallMutationType.from_lengths
        """
        return SmallMutationType.from_lengths(self.reflen(), self.altlen())

    def titv(self):
        """
        Determine whether this mutation is a transition or a
        transversion.

        Returns
        -------
        titv : TiTv or None
            ``None`` if this mutation is not a :attr:`SmallMutationType.SNV`
            or if any of both bases is ambiguous.
        """
        if self.classify() is not SmallMutationType.SNV:
            return None
        return TiTv.from_chemical_class(
            self._reference[0].chemical_class(),
            self._alternative[0].chemical_class(),
        )
