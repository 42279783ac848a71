"""
structops.core - shared vocabulary
==================================

Everything the sequence and structure modules agree on lives here:

    • ABSENT, the "no value" sentinel
    • the error taxonomy (StructOpsError, TransformError, InvalidArgument)
    • the classification of values into sequences, mappings and atoms
    • the sequence view of a mapping (its contiguous 1..n integer keys)
    • guarded application of caller-supplied functions


§1  ABSENT IS NOT AN ERROR
──────────────────────────

Several operations have a legitimate "nothing to report" outcome:

    maximum([])                         → ABSENT
    reduce(fn, [])                      → ABSENT
    insert_with(fn, "new", v, table)    → ABSENT    (nothing was replaced)

ABSENT is a falsy singleton.  It is never raised and never confused with
None, which is an ordinary value a caller may store in a structure.


§2  SEQUENCES AND MAPPINGS
──────────────────────────

A sequence is a list or a tuple.  Strings and bytes are atoms even though
Python can iterate them.

A mapping may also carry a sequence: its values under the keys 1, 2, ..., n
(stopping at the first missing key).  Conversely every sequence can be seen
as the mapping {1: s[0], 2: s[1], ...}.  This lets the structure operations
treat lists and dicts uniformly:

    entries(["a", "b"])              → {1: "a", 2: "b"}
    sequence_length({1: "a", 2: "b", "x": 0})   → 2
"""

from collections.abc import Mapping
from typing import Any, Callable


# ═══════════════════════════════════════════════════════════════════
#  THE ABSENT SENTINEL
# ═══════════════════════════════════════════════════════════════════

class _Absent:
    """Type of the ABSENT singleton.  Not instantiated directly."""
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self):
        return (_Absent, ())


ABSENT = _Absent()


# ═══════════════════════════════════════════════════════════════════
#  ERRORS
# ═══════════════════════════════════════════════════════════════════

class StructOpsError(Exception):
    """Base class for every error raised by structops."""


class TransformError(StructOpsError):
    """A caller-supplied function is not callable or raised while applied."""


class InvalidArgument(StructOpsError, ValueError):
    """An argument has the wrong type or an unusable value."""


# ═══════════════════════════════════════════════════════════════════
#  CLASSIFICATION
# ═══════════════════════════════════════════════════════════════════

def is_sequence(value: Any) -> bool:
    """True for lists and tuples (and their subclasses)."""
    return isinstance(value, (list, tuple))


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_structured(value: Any) -> bool:
    """True for anything the structure operations recurse into."""
    return isinstance(value, (list, tuple, Mapping))


def is_integer(value: Any) -> bool:
    # bool is a subclass of int, but True is not a position.
    return isinstance(value, int) and not isinstance(value, bool)


def require_sequence(value: Any, name: str = "seq") -> None:
    if not is_sequence(value):
        raise InvalidArgument(
            f"{name} must be a list or tuple, got {type(value).__name__}"
        )


def require_structure(value: Any, name: str = "structure") -> None:
    if not is_structured(value):
        raise InvalidArgument(
            f"{name} must be a mapping, list or tuple, got {type(value).__name__}"
        )


# ═══════════════════════════════════════════════════════════════════
#  KEY/VALUE VIEW OF A STRUCTURE
# ═══════════════════════════════════════════════════════════════════

def entries(structure: Any) -> dict:
    """
    The present key/value pairs of a structure, as a fresh dict.

    Sequences are keyed 1..n.  Mapping keys whose value is ABSENT are
    left out: a key mapped to ABSENT is a key that is not there.
    """
    if is_sequence(structure):
        return {i: v for i, v in enumerate(structure, 1) if v is not ABSENT}
    return {k: v for k, v in structure.items() if v is not ABSENT}


def lookup(structure: Any, key: Any) -> Any:
    """structure[key] with sequence keys counted from 1; ABSENT if missing."""
    if is_sequence(structure):
        if is_integer(key) and 1 <= key <= len(structure):
            return structure[key - 1]
        return ABSENT
    try:
        return structure.get(key, ABSENT)
    except TypeError:
        # Unhashable key: it cannot be in the mapping.
        return ABSENT


def sequence_length(structure: Any) -> int:
    """
    Number of contiguous integer keys 1, 2, ..., n holding a value.

    For a list or tuple this is simply its length.  For a mapping it is
    the size of the "array part" and is never larger than size().
    """
    require_structure(structure)
    if is_sequence(structure):
        return len(structure)
    n = 0
    while lookup(structure, n + 1) is not ABSENT:
        n += 1
    return n


def sequence_part(structure: Any) -> list:
    """The values under keys 1..sequence_length(structure), in order."""
    n = sequence_length(structure)
    return [lookup(structure, i) for i in range(1, n + 1)]


# ═══════════════════════════════════════════════════════════════════
#  APPLYING CALLER-SUPPLIED FUNCTIONS
# ═══════════════════════════════════════════════════════════════════

def apply(fn: Callable, *args: Any) -> Any:
    """
    Call fn(*args), reporting any failure as a TransformError.

    The original exception is kept as __cause__.  Errors raised by the
    library itself pass through unchanged.
    """
    if not callable(fn):
        raise TransformError(f"{fn!r} is not callable")
    try:
        return fn(*args)
    except StructOpsError:
        raise
    except Exception as exc:
        name = getattr(fn, "__name__", repr(fn))
        raise TransformError(f"{name} failed: {exc}") from exc
