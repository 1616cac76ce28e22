# This source code is part of the Seqlib package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import warnings
import pytest
import seqlib.sequence as seq


def create_mutation(ref, alt, **kwargs):
    return seq.SmallMutation("chr1", 42, seq.Seq(ref), seq.Seq(alt), **kwargs)


@pytest.mark.parametrize(
    "ref, alt, exp_class, exp_delta, exp_titv",
    [
        ("A", "AG", seq.SmallMutationType.INSERTION, 1, None),
        ("AG", "A", seq.SmallMutationType.DELETION, -1, None),
        ("A", "G", seq.SmallMutationType.SNV, 0, seq.TiTv.TRANSITION),
        ("C", "T", seq.SmallMutationType.SNV, 0, seq.TiTv.TRANSITION),
        ("A", "C", seq.SmallMutationType.SNV, 0, seq.TiTv.TRANSVERSION),
        ("T", "G", seq.SmallMutationType.SNV, 0, seq.TiTv.TRANSVERSION),
        ("A", "A", seq.SmallMutationType.SNV, 0, seq.TiTv.TRANSITION),
        ("A", "N", seq.SmallMutationType.SNV, 0, None),
        ("W", "C", seq.SmallMutationType.SNV, 0, None),
        ("AG", "CT", seq.SmallMutationType.DOUBLET, 0, None),
        ("AGT", "CTA", seq.SmallMutationType.MNV, 0, None),
        ("ACGTACGT", "TTTTTTTT", seq.SmallMutationType.MNV, 0, None),
        ("A", "ACGTA", seq.SmallMutationType.INSERTION, 4, None),
        ("ACGTA", "", seq.SmallMutationType.DELETION, -5, None),
    ],
)
def test_classification(ref, alt, exp_class, exp_delta, exp_titv):
    mutation = create_mutation(ref, alt)
    assert mutation.reflen() == len(ref)
    assert mutation.altlen() == len(alt)
    assert mutation.delta() == exp_delta
    assert mutation.classify() is exp_class
    assert mutation.titv() is exp_titv


@pytest.mark.parametrize(
    "reflen, altlen, exp_class",
    [
        (0, 0, seq.SmallMutationType.MNV),
        (1, 1, seq.SmallMutationType.SNV),
        (2, 2, seq.SmallMutationType.DOUBLET),
        (3, 3, seq.SmallMutationType.MNV),
        (100, 100, seq.SmallMutationType.MNV),
        (0, 1, seq.SmallMutationType.INSERTION),
        (1, 0, seq.SmallMutationType.DELETION),
        (3, 2, seq.SmallMutationType.DELETION),
    ],
)
def test_type_from_lengths(reflen, altlen, exp_class):
    assert seq.SmallMutationType.from_lengths(reflen, altlen) is exp_class


@pytest.mark.parametrize(
    "ref_class, alt_class, exp_titv",
    [
        (seq.ChemClass.PURINE, seq.ChemClass.PURINE, seq.TiTv.TRANSITION),
        (seq.ChemClass.PYRIMIDINE, seq.ChemClass.PYRIMIDINE, seq.TiTv.TRANSITION),
        (seq.ChemClass.PURINE, seq.ChemClass.PYRIMIDINE, seq.TiTv.TRANSVERSION),
        (seq.ChemClass.PYRIMIDINE, seq.ChemClass.PURINE, seq.TiTv.TRANSVERSION),
        (seq.ChemClass.AMBIGUOUS, seq.ChemClass.PURINE, None),
        (seq.ChemClass.PYRIMIDINE, seq.ChemClass.AMBIGUOUS, None),
        (seq.ChemClass.AMBIGUOUS, seq.ChemClass.AMBIGUOUS, None),
    ],
)
def test_titv_from_chemical_class(ref_class, alt_class, exp_titv):
    assert seq.TiTv.from_chemical_class(ref_class, alt_class) is exp_titv


def test_zero_length_alleles():
    """
    Two empty alleles are accepted and classified as MNV, but a warning
    is raised.
    """
    with pytest.warns(seq.ZeroLengthAlleleWarning):
        mutation = create_mutation("", "")
    assert mutation.classify() is seq.SmallMutationType.MNV
    assert mutation.delta() == 0
    assert mutation.titv() is None


def test_no_warning_for_nonempty_alleles():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        create_mutation("", "A")
        create_mutation("A", "")


@pytest.mark.parametrize(
    "ref, alt, multiallelic, exp_str",
    [
        ("A", "AG", False, "chr1:42 A>AG (delta: 1; class: INSERTION; multiallelic:false)"),
        ("AG", "A", True, "chr1:42 AG>A (delta: -1; class: DELETION; multiallelic:true)"),
        ("a", "g", False, "chr1:42 A>G (delta: 0; class: SNV; multiallelic:false)"),
        ("AG", "CT", False, "chr1:42 AG>CT (delta: 0; class: DOUBLET; multiallelic:false)"),
    ],
)  # fmt: skip
def test_str(ref, alt, multiallelic, exp_str):
    mutation = create_mutation(ref, alt, multiallelic=multiallelic)
    assert str(mutation) == exp_str


def test_enum_str():
    assert [str(t) for t in seq.SmallMutationType] == [
        "SNV",
        "DOUBLET",
        "MNV",
        "INSERTION",
        "DELETION",
    ]
    assert str(seq.TiTv.TRANSITION) == "Transition"
    assert str(seq.TiTv.TRANSVERSION) == "Transversion"


def test_fields():
    reference = seq.Seq("A")
    alternative = seq.Seq("T")
    mutation = seq.SmallMutation("chrX", 1, reference, alternative, True)
    assert mutation.chromosome == "chrX"
    assert mutation.position == 1
    assert mutation.reference is reference
    assert mutation.alternative is alternative
    assert mutation.multiallelic is True
    assert mutation.context is None


def test_context():
    mutation = create_mutation("A", "G")
    context = seq.Seq("CCAGG")
    mutation.add_context(context)
    assert mutation.context == context
    # A previously attached context is replaced
    mutation.add_context(seq.Seq("TTATT"))
    assert str(mutation.context) == "TTATT"
    # The context does not influence the classification
    assert mutation.classify() is seq.SmallMutationType.SNV
    assert mutation.titv() is seq.TiTv.TRANSITION


def test_copy():
    mutation = create_mutation("A", "G", context=seq.Seq("CAG"))
    clone = mutation.copy()
    assert clone == mutation
    clone.reference.complement_in_place()
    clone.context.reverse_in_place()
    assert str(mutation.reference) == "A"
    assert str(mutation.context) == "CAG"
    assert clone != mutation


def test_equality():
    assert create_mutation("A", "G") == create_mutation("A", "G")
    assert create_mutation("A", "G") != create_mutation("A", "C")
    assert create_mutation("A", "G") != create_mutation("A", "G", multiallelic=True)
    assert create_mutation("A", "G") != create_mutation(
        "A", "G", context=seq.Seq("AAG")
    )
    assert create_mutation("A", "G") != "chr1:42 A>G"
