# This source code is part of the Seqlib package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Check the code and the stub files of *Seqlib* with *mypy* and print the
errors grouped by module.
"""

import re
import sys
import mypy.api as mypy


def module_from_file(file_name):
    return file_name.replace("src/", "") \
                    .replace(".pyi", "") \
                    .replace(".py", "") \
                    .replace("/", ".") \
                    .replace(".__init__", "")


def print_errors(err_dict):
    for module, errors in err_dict.items():
        print(module)
        for line, msg in errors:
            print(f"{line}:\t{msg}")
        print()


ignore = [
    r"Name '.*' already defined \(by an import\)",
]
ignore_patterns = [re.compile(e) for e in ignore]
py_dict = {}
pyi_dict = {}

out, _, status = mypy.run(["--ignore-missing-imports", "src/seqlib"])
for err in out.split("\n"):
    fields = err.split(":", maxsplit=3)
    if len(fields) != 4:
        # Summary line
        continue
    file_name, line, err_type, msg = [field.strip() for field in fields]
    if err_type != "error":
        continue
    if any(pattern.match(msg) is not None for pattern in ignore_patterns):
        continue
    err_dict = pyi_dict if file_name.endswith(".pyi") else py_dict
    errors = err_dict.setdefault(module_from_file(file_name), [])
    if (line, msg) not in errors:
        errors.append((line, msg))


print("Code:")
print_errors(py_dict)
print()
print()
print("Stubs:")
print_errors(pyi_dict)
sys.exit(0 if not py_dict and not pyi_dict else 1)
