from importlib.metadata import version
import seqlib


def test_version():
    """
    Check if the version in the package is equal to the version of the
    installed distribution.
    """
    assert seqlib.__version__ == version("seqlib")
