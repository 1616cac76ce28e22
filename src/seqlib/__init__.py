# This source code is part of the Seqlib package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This is the top-level package of *Seqlib*.
It only provides the base classes shared by the subpackages.
The actual functionality is located in :mod:`seqlib.sequence`.
"""

__version__ = "0.1.0"
__name__ = "seqlib"
__author__ = "The Seqlib contributors"

from .copyable import *
