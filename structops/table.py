"""
structops.table - StructuralOps
===============================

Deep comparison, deep copy and small algebra over associative structures.

A structure is a mapping (usually a dict) or a sequence (list or tuple).
A sequence is treated as the mapping {1: s[0], 2: s[1], ...}, so the
operations here accept either.  Keys mapped to ABSENT do not exist.


EQUALITY
────────

deep_compare(a, b) is structural equality:

    deep_compare(34, 34)                                  → True
    deep_compare(["m1", "m2", ["s1"]], ["m1", "m2", ["s1"]])  → True
    deep_compare(["m1", "m2", ["s1"]], [["s1"], "m1", "m2"])  → False

Two structures whose classes share their own __eq__ are compared with
that __eq__ instead, unless ignore_equality is set.  ignore_equality applies to
the outermost pair only.


PURE AND IN-PLACE
─────────────────

    insert_with(fn, key, value, table)    mutates table IN PLACE
    inserted_with(fn, key, value, table)  returns (new_table, previous)

Everything else returns new objects.
"""

import copy
import functools
from collections.abc import Mapping, MutableMapping
from typing import Any, Callable, Iterator, Optional, Union

from .core import (
    ABSENT,
    InvalidArgument,
    apply,
    entries,
    is_structured,
    lookup,
    require_structure,
    sequence_length,
    sequence_part,
)

__all__ = [
    "deep_compare", "deepcopy", "size", "sequence_length", "sequence_part",
    "invert", "find_with", "pairs_by_keys",
    "insert_with", "inserted_with",
]


# ═══════════════════════════════════════════════════════════════════
#  EQUALITY
# ═══════════════════════════════════════════════════════════════════

_PLAIN_EQ = (dict.__eq__, list.__eq__, tuple.__eq__, object.__eq__)


def has_custom_equality(value: Any) -> bool:
    """
    Does value's class bring its own __eq__?

    Plain dicts, lists and tuples (and subclasses that leave __eq__ alone)
    do not.  A Mapping that is not a dict must define __eq__ to be
    comparable at all, and does.
    """
    eq = getattr(type(value), "__eq__", None)
    if eq in _PLAIN_EQ:
        return False
    return eq is not Mapping.__eq__


def _atoms_equal(a: Any, b: Any) -> bool:
    # bool is a subclass of int, but True is not 1.
    if (type(a) is bool) != (type(b) is bool):
        return False
    return a == b


def _shared_equality(a: Any, b: Any) -> bool:
    # Delegate only when both sides bring the same __eq__, so that the
    # result does not depend on argument order.
    if not (has_custom_equality(a) and has_custom_equality(b)):
        return False
    return getattr(type(a), "__eq__") is getattr(type(b), "__eq__")


def deep_compare(a: Any, b: Any, ignore_equality: bool = False) -> bool:
    """
    Structural equality of a and b.

    Atoms compare with ==.  An atom never equals a structure.  Two
    structures are equal when every key of each one is present in the
    other with a deep_compare-equal value.  Key order and container type
    do not matter: ["x", "y"] equals {1: "x", 2: "y"}.

    Unless ignore_equality is true, two structures sharing the same custom
    __eq__ (see has_custom_equality) are compared with that __eq__.
    """
    a_structured = is_structured(a)
    b_structured = is_structured(b)
    if a_structured != b_structured:
        return False
    if not a_structured:
        return _atoms_equal(a, b)

    if not ignore_equality and _shared_equality(a, b):
        return a == b

    a_entries = entries(a)
    b_entries = entries(b)
    for key, a_val in a_entries.items():
        b_val = b_entries.get(key, ABSENT)
        if b_val is ABSENT or not deep_compare(a_val, b_val):
            return False
    for key, b_val in b_entries.items():
        a_val = a_entries.get(key, ABSENT)
        if a_val is ABSENT or not deep_compare(a_val, b_val):
            return False
    return True


# ═══════════════════════════════════════════════════════════════════
#  COPY
# ═══════════════════════════════════════════════════════════════════

def deepcopy(value: Any) -> Any:
    """
    Recursive copy of value, keys and values alike.

    Atoms are returned as they are.  Each copied structure is an instance
    of the same class as its source, so subclasses keep their methods and
    custom equality; the class is shared, not duplicated.  Mapping keys
    holding ABSENT are not copied; lists and tuples keep every position.
    """
    if not is_structured(value):
        return value

    if isinstance(value, tuple):
        items = [deepcopy(v) for v in value]
        if hasattr(value, "_fields"):
            return type(value)._make(items)
        if type(value) is tuple:
            return tuple(items)
        return type(value)(items)

    if isinstance(value, list):
        # Shallow clone first: same class, same instance attributes.
        result = copy.copy(value)
        result[:] = [deepcopy(v) for v in value]
        return result

    pairs = [(deepcopy(k), deepcopy(v)) for k, v in value.items() if v is not ABSENT]
    if not isinstance(value, MutableMapping):
        return type(value)(dict(pairs))
    result = copy.copy(value)
    result.clear()
    for k, v in pairs:
        result[k] = v
    return result


# ═══════════════════════════════════════════════════════════════════
#  INSPECTION
# ═══════════════════════════════════════════════════════════════════

def size(structure: Any) -> int:
    """
    Total number of present keys.

    Unlike sequence_length(), which counts only the 1..n integer keys,
    this counts every key, so size() >= sequence_length().

        sample = {1: "one", 2: "two", "age": 29, "name": "George"}
        size(sample) == 4
        sequence_length(sample) == 2
    """
    require_structure(structure)
    return len(entries(structure))


def invert(structure: Any) -> dict:
    """
    New dict mapping each value of structure to its key.

        invert({"color": "blue", "sound": "bark"}) == {"blue": "color", "bark": "sound"}

    When values repeat, a later pair overwrites an earlier one.
    """
    require_structure(structure)
    inverted: dict = {}
    for key, value in entries(structure).items():
        try:
            inverted[value] = key
        except TypeError as exc:
            raise InvalidArgument(f"cannot invert unhashable value {value!r}") from exc
    return inverted


def find_with(fn: Callable[[Any], Any], structure: Any) -> Union[tuple[Any, Any], bool]:
    """
    Find the first value for which fn returns something truthy.

    Returns (key, fn(value)) for that value, or False when nothing
    matches.  Values are tried in the structure's iteration order.

        find_with(lambda v: v if len(v) > 4 else None, ["cat", "horse"])
            == (2, "horse")
    """
    require_structure(structure)
    for key, value in entries(structure).items():
        result = apply(fn, value)
        if result:
            return key, result
    return False


def _sort_key(compare: Callable[[Any, Any], Any]):
    def cmp(a: Any, b: Any) -> int:
        if apply(compare, a, b):
            return -1
        if apply(compare, b, a):
            return 1
        return 0
    return functools.cmp_to_key(cmp)


def pairs_by_keys(
    structure: Any,
    compare: Optional[Callable[[Any, Any], Any]] = None,
) -> Iterator[tuple[Any, Any]]:
    """
    Iterate (key, value) pairs of structure in sorted key order.

    compare(a, b) is a "less than" predicate; the default is the natural
    ordering of the keys.  Keys are collected and sorted when this is
    called, before the first pair is produced.

        words = {"the": 47, "an": 22, "locations": 5, "hour": 8}
        [k for k, _ in pairs_by_keys(words)] == ["an", "hour", "locations", "the"]
    """
    require_structure(structure)
    snapshot = entries(structure)
    keys = list(snapshot)
    try:
        if compare is None:
            keys.sort()
        else:
            keys.sort(key=_sort_key(compare))
    except TypeError as exc:
        raise InvalidArgument(f"keys cannot be ordered: {exc}") from exc
    return iter([(key, snapshot[key]) for key in keys])


# ═══════════════════════════════════════════════════════════════════
#  INSERTION  (insert_with is IN PLACE)
# ═══════════════════════════════════════════════════════════════════

def insert_with(
    fn: Callable[[Any, Any, Any], Any],
    key: Any,
    value: Any,
    structure: MutableMapping,
) -> Any:
    """
    Insert value under key, combining it with an existing value via fn.

    Mutates structure IN PLACE.  If key is missing, value is stored and
    ABSENT is returned.  If key is present, fn(key, value, previous) is
    stored and previous is returned.

        owns = {"shoes": "Cindy"}
        add_to = lambda k, v, pv: pv + " " + v

        insert_with(add_to, "hat", "Sam", owns)     → ABSENT
        insert_with(add_to, "shoes", "Sam", owns)   → "Cindy"
        owns == {"shoes": "Cindy Sam", "hat": "Sam"}
    """
    if not isinstance(structure, MutableMapping):
        raise InvalidArgument(
            f"insert_with needs a mutable mapping, got {type(structure).__name__}"
        )
    previous = lookup(structure, key)
    if previous is ABSENT:
        structure[key] = value
    else:
        structure[key] = apply(fn, key, value, previous)
    return previous


def inserted_with(
    fn: Callable[[Any, Any, Any], Any],
    key: Any,
    value: Any,
    structure: Any,
) -> tuple[dict, Any]:
    """Pure counterpart of insert_with(): returns (new_dict, previous)."""
    require_structure(structure)
    result = entries(structure)
    previous = insert_with(fn, key, value, result)
    return result, previous
