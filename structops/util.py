"""
structops.util - assorted helpers
=================================

A structural assertion, argument binding, small filesystem helpers and
two text serializations (CSV lines and loadable literals).
"""

import csv
import functools
import io
import json
import os
from pathlib import Path
from typing import Any, Callable, Optional, Sequence, Union

from .core import InvalidArgument, entries, is_integer, is_structured
from .log import get_logger
from .table import deep_compare

logger = get_logger("util")

PathLike = Union[str, "os.PathLike[str]"]


# ═══════════════════════════════════════════════════════════════════
#  ASSERTION AND BINDING
# ═══════════════════════════════════════════════════════════════════

def assert_equal(val1: Any, val2: Any, message: Optional[str] = None) -> None:
    """
    Raise AssertionError(message) unless val1 equals val2.

    Two structures are compared recursively with deep_compare (ignoring
    any custom __eq__ of the outer pair); anything else with ==.
    """
    if is_structured(val1) and is_structured(val2):
        ok = deep_compare(val1, val2, ignore_equality=True)
    else:
        ok = val1 == val2
    if not ok:
        raise AssertionError(message if message is not None else f"{val1!r} != {val2!r}")


def curry(fn: Callable, value: Any) -> Callable:
    """
    Bind value as the first argument of fn.

        five_plus = curry(lambda x, y: x + y, 5)
        five_plus(10) == 15
    """
    return functools.partial(fn, value)


# ═══════════════════════════════════════════════════════════════════
#  FILESYSTEM
# ═══════════════════════════════════════════════════════════════════

def read_file(name: PathLike) -> str:
    logger.debug("reading %s", name)
    return Path(name).read_text()


def write_file(name: PathLike, text: str) -> None:
    logger.debug("writing %d characters to %s", len(text), name)
    Path(name).write_text(text)


def lsdir(path: PathLike) -> list[str]:
    """Names of the entries of directory path, sorted."""
    return sorted(os.listdir(path))


def isfile(path: PathLike) -> bool:
    return Path(path).is_file()


def isdir(path: PathLike) -> bool:
    return Path(path).is_dir()


def dir_path(path: str) -> str:
    """
    The directory part of path, with its trailing slash.

        dir_path("/home/foo/report.txt") == "/home/foo/"
        dir_path("report.txt") == ""
    """
    cut = path.rfind("/")
    return path[:cut + 1] if cut >= 0 else ""


def mod_search(modname: str, path: str) -> Optional[str]:
    """
    Find a module file along a search path.

    path is a ';'-separated list of templates in which '?' stands for the
    module name with dots turned into slashes, e.g. "./?.py;lib/?/init.py".
    Returns the first existing file name, or None.
    """
    relative = modname.replace(".", "/")
    for template in path.split(";"):
        if not template:
            continue
        candidate = template.replace("?", relative)
        if os.path.exists(candidate):
            return candidate
    return None


# ═══════════════════════════════════════════════════════════════════
#  SERIALIZATION
# ═══════════════════════════════════════════════════════════════════

def to_csv(values: Sequence) -> str:
    """
    One CSV line from a sequence of values.

        to_csv([1, 2, 3, 4]) == "1,2,3,4"
        to_csv(["a,b", "c"]) == '"a,b",c'
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(str(v) for v in values)
    # Drop the terminator of the single written row.
    return buffer.getvalue()[:-1]


def serialize(obj: Any) -> str:
    """
    Table-literal text for obj, in "{ [key] = value, }" form.

        serialize(1) == "1"
        serialize("hello") == '"hello"'
        serialize([1, 2]) == "{\\n  [1] = 1,\\n  [2] = 2,\\n}\\n"

    Only numbers, strings and structures of them can be serialized.
    """
    if is_integer(obj) or isinstance(obj, float):
        return repr(obj)
    if isinstance(obj, str):
        return json.dumps(obj)
    if is_structured(obj):
        lines = ["{\n"]
        for key, value in entries(obj).items():
            lines.append(f"  [{serialize(key)}] = {serialize(value)},\n")
        lines.append("}\n")
        return "".join(lines)
    raise InvalidArgument(f"cannot serialize a {type(obj).__name__}")
