# This source code is part of the Seqlib package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import doctest
from importlib import import_module
import numpy as np
import pytest


@pytest.mark.parametrize(
    "package_name, context_package_names",
    [
        pytest.param("seqlib", []),
        pytest.param("seqlib.sequence", []),
    ],
)
def test_doctest(package_name, context_package_names):
    """
    Run all doctest strings in all Seqlib subpackages.
    """
    # Collect all attributes of this package and its subpackages
    # as globals for the doctests
    globs = {}
    # The package itself is also used as context
    for name in context_package_names + [package_name]:
        context_package = import_module(name)
        globs.update(
            {attr: getattr(context_package, attr) for attr in dir(context_package)}
        )
    # Add frequently used modules
    globs["np"] = np

    # Run doctests
    # This test does not use 'testmod()', as the classes of each
    # subpackage are defined in its submodules
    package = import_module(package_name)
    runner = doctest.DocTestRunner(
        verbose=False,
        optionflags=doctest.ELLIPSIS
        | doctest.REPORT_ONLY_FIRST_FAILURE
        | doctest.NORMALIZE_WHITESPACE,
    )
    for test in doctest.DocTestFinder(exclude_empty=False).find(
        package,
        package.__name__,
        # The classes are members of the subpackage, but the finder
        # would falsely identify them as members of an external module
        # -> Omit this check
        module=False,
        extraglobs=globs,
    ):
        runner.run(test)
    results = doctest.TestResults(runner.failures, runner.tries)
    try:
        assert results.failed == 0
    except AssertionError:
        print(f"Failing doctest in module {package}")
        raise
