"""
structops.sequence - SequenceOps
================================

Generic operations over ordered sequences (lists and tuples).

    map(lambda n: "* " + n, ["one", "two"])     → ["* one", "* two"]
    slice(["a", "b", "c", "d"], 2, 3)           → ["b", "c"]
    splice(["a", "b", "c", "d"], 2, 1, ["x"])   → (["a", "x", "c", "d"], ["b"])
    flatten([[1, 2], 3, [4, [5, 6]]])           → [1, 2, 3, 4, 5, 6]

Several names shadow builtins (map, filter, any, all, slice).  Import the
module, not its names:

    from structops import sequence as seq
    seq.map(str, [1, 2])


POSITIONS
─────────

slice and splice count positions from 1 and their bounds are inclusive:
slice(s, 1, 3) is the first three elements.  Out-of-range positions are
clamped, never raised.

A negative position p is rewritten as  length + 1 - p.  This is NOT the
usual "count from the end" rule (that would be length + 1 + p): with six
elements, slice(s, -1) starts at position 8 and is empty.


PURE AND IN-PLACE
─────────────────

Every operation returns a new list and leaves its inputs alone, except

    merge(target, source)    appends source to target IN PLACE, returns target

merged() is its pure twin.
"""

from typing import Any, Callable, Optional, Sequence

from .core import (
    ABSENT,
    InvalidArgument,
    apply,
    is_integer,
    is_sequence,
    require_sequence,
)
from .log import get_logger

logger = get_logger("sequence")


# ═══════════════════════════════════════════════════════════════════
#  ITERATION
# ═══════════════════════════════════════════════════════════════════

class ValueIterator:
    """
    Forward-only cursor over the elements of a sequence.

    Calling the iterator returns the next element, and ABSENT forever
    once the sequence is exhausted.  It is also a regular Python
    iterator; both styles advance the same cursor, and neither can
    rewind it.
    """
    __slots__ = ("_items", "_pos")

    def __init__(self, items: Sequence):
        self._items = items
        self._pos = 0

    def __call__(self) -> Any:
        if self._pos >= len(self._items):
            return ABSENT
        value = self._items[self._pos]
        self._pos += 1
        return value

    def __iter__(self) -> "ValueIterator":
        return self

    def __next__(self) -> Any:
        if self._pos >= len(self._items):
            raise StopIteration
        return self()

    def __repr__(self) -> str:
        return f"ValueIterator(pos={self._pos}, len={len(self._items)})"


def values(seq: Sequence) -> ValueIterator:
    """Lazy iterator over the elements of seq."""
    require_sequence(seq)
    return ValueIterator(seq)


# ═══════════════════════════════════════════════════════════════════
#  TRANSFORMS AND FOLDS
# ═══════════════════════════════════════════════════════════════════

def map(fn: Callable[[Any], Any], seq: Sequence) -> list:
    """
    Apply fn to every element, returning the list of results.

        map(lambda n: "* " + n, ["one", "two"]) == ["* one", "* two"]
    """
    require_sequence(seq)
    return [apply(fn, item) for item in seq]


def reduce(fn: Callable[[Any, Any], Any], seq: Sequence, init: Any = ABSENT) -> Any:
    """
    Left fold of seq with fn(accumulated, item).

    Without init the first element is the seed and folding starts at the
    second one; an empty seq then reduces to ABSENT.

        reduce(lambda c, n: c + n, [1, 2, 3], 0) == 6
        reduce(lambda c, n: c + n, ["All", "The", "Time"]) == "AllTheTime"
    """
    require_sequence(seq)
    result = init
    start = 0
    if init is ABSENT:
        if not seq:
            return ABSENT
        result = seq[0]
        start = 1
    for i in range(start, len(seq)):
        result = apply(fn, result, seq[i])
    return result


def _to_text(item: Any) -> str:
    if isinstance(item, str):
        return item
    if isinstance(item, (int, float)) and not isinstance(item, bool):
        return str(item)
    raise InvalidArgument(f"cannot join a {type(item).__name__}: {item!r}")


def join(seq: Sequence, separator: str = "") -> str:
    """
    Join the elements of seq into a string, separated by separator.

    Strings and numbers are accepted; anything else is an InvalidArgument.

        join(["a", "b", "c"]) == "abc"
        join(["a", "b", "c"], " ") == "a b c"
    """
    require_sequence(seq)
    if not isinstance(separator, str):
        raise InvalidArgument(f"separator must be a string, got {separator!r}")
    return separator.join(_to_text(item) for item in seq)


def reverse(seq: Sequence) -> list:
    require_sequence(seq)
    return list(seq[::-1])


def any(predicate: Callable[[Any], Any], seq: Sequence) -> bool:
    """True as soon as one element satisfies predicate; False for []."""
    require_sequence(seq)
    for item in seq:
        if apply(predicate, item):
            return True
    return False


def all(predicate: Callable[[Any], Any], seq: Sequence) -> bool:
    """False as soon as one element fails predicate; True for []."""
    require_sequence(seq)
    for item in seq:
        if not apply(predicate, item):
            return False
    return True


def _extreme(seq: Sequence, better: Callable[[Any, Any], bool], label: str) -> Any:
    require_sequence(seq)
    best = ABSENT
    for item in seq:
        if item is None or item is ABSENT or item is False:
            continue
        if best is ABSENT:
            best = item
            continue
        try:
            if better(item, best):
                best = item
        except TypeError:
            logger.debug("%s: skipping %r, not comparable with %r", label, item, best)
    return best


def maximum(seq: Sequence) -> Any:
    """
    Largest element of seq, or ABSENT when there is none.

    None and False elements are skipped, and so are elements that cannot
    be ordered against the current maximum.

        maximum([4, 5, 99, 13]) == 99
    """
    return _extreme(seq, lambda a, b: a > b, "maximum")


def minimum(seq: Sequence) -> Any:
    """Smallest element of seq, or ABSENT; skips like maximum()."""
    return _extreme(seq, lambda a, b: a < b, "minimum")


def filter(predicate: Callable[[Any], Any], seq: Sequence) -> list:
    """
    The elements satisfying predicate, in their original order.

        filter(lambda n: n < 5, [12, 7, 4]) == [4]
    """
    require_sequence(seq)
    return [item for item in seq if apply(predicate, item)]


# ═══════════════════════════════════════════════════════════════════
#  POSITIONAL OPERATIONS  (1-based, inclusive)
# ═══════════════════════════════════════════════════════════════════

def _position(value: Any, name: str) -> int:
    if not is_integer(value):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    return value


def slice(seq: Sequence, first: int, last: Optional[int] = None) -> list:
    """
    Elements first..last of seq, both inclusive, counted from 1.

    last defaults to the end of seq.  A negative bound p becomes
    len(seq) + 1 - p.  Bounds are then clamped to [1, len(seq)], and an
    empty list is returned when first > last.

        s = ["a", "b", "c", "d", "e", "f"]
        slice(s, 1, 3) == ["a", "b", "c"]
        slice(s, 6) == ["f"]
        slice(s, 5) == ["e", "f"]
    """
    require_sequence(seq)
    length = len(seq)
    first = _position(first, "first")
    last = length if last is None else _position(last, "last")

    if first < 0:
        first = length + 1 - first
    if last < 0:
        last = length + 1 - last

    first = max(first, 1)
    last = min(last, length)
    if first > last:
        return []
    return list(seq[first - 1:last])


def splice(
    seq: Sequence,
    start: int,
    delete_count: Optional[int] = None,
    ins_values: Optional[Sequence] = None,
) -> tuple[list, list]:
    """
    Remove delete_count elements starting at position start and put
    ins_values in their place.

    Returns (remainder, removed): the spliced copy of seq and the list of
    elements taken out.  seq itself is not modified.

    start is clamped to [1, len(seq) + 1].  Without delete_count
    everything from start to the end is removed; a negative count
    removes nothing.

        s = ["a", "b", "c", "d", "e", "f"]
        splice(s, 3)                   == (["a", "b"], ["c", "d", "e", "f"])
        splice(s, 3, 2, ["one", "two"]) == (["a", "b", "one", "two", "e", "f"],
                                            ["c", "d"])
        splice(s, 3, 0, ["one"])       == (["a", "b", "one", "c", "d", "e", "f"], [])
    """
    require_sequence(seq)
    if ins_values is None:
        ins_values = []
    require_sequence(ins_values, "ins_values")

    length = len(seq)
    start = min(max(_position(start, "start"), 1), length + 1)
    if delete_count is None:
        end = length
    else:
        count = max(_position(delete_count, "delete_count"), 0)
        end = min(start - 1 + count, length)

    # Python offsets: kept head is seq[:start-1], removed is seq[start-1:end].
    head = list(seq[:start - 1])
    removed = list(seq[start - 1:end])
    remainder = merge(head, ins_values)
    remainder.extend(seq[end:])
    return remainder, removed


# ═══════════════════════════════════════════════════════════════════
#  COMBINING
# ═══════════════════════════════════════════════════════════════════

def merge(target: list, source: Sequence) -> list:
    """
    Append every element of source to target, IN PLACE, and return target.

    source is left unaltered.  Use merged() to keep target intact.

        seq = ["a", "b", "c"]
        merge(["d", "e"], seq) == ["d", "e", "a", "b", "c"]
    """
    if not isinstance(target, list):
        raise InvalidArgument(
            f"merge target must be a list, got {type(target).__name__}"
        )
    require_sequence(source, "source")
    target.extend(source)
    return target


def merged(target: Sequence, source: Sequence) -> list:
    """Pure counterpart of merge(): a new list of target then source."""
    require_sequence(target, "target")
    return merge(list(target), source)


def concat(*items: Any) -> list:
    """
    Concatenate items into one new list, removing one level of nesting.

    Sequence arguments contribute their elements, anything else is added
    as is.  With a single argument, that argument is unwrapped and its
    elements are concatenated instead:

        concat([1, 2], 3, [4, [5, 6]])   == [1, 2, 3, 4, [5, 6]]
        concat([[1, 2], 3, [4, [5, 6]]]) == [1, 2, 3, 4, [5, 6]]

    The unwrap is decided by the number of arguments alone.  A single
    argument that is not a sequence is therefore an InvalidArgument, and
    so is concat([5]), which unwraps to concat(5).
    """
    if len(items) == 1:
        only = items[0]
        if not is_sequence(only):
            raise InvalidArgument(
                f"concat of a single argument needs a sequence, got {only!r}"
            )
        logger.debug("concat: unwrapping single argument of %d items", len(only))
        return concat(*only)

    result: list = []
    for item in items:
        if is_sequence(item):
            result.extend(item)
        else:
            result.append(item)
    return result


def flatten(seq: Sequence) -> list:
    """
    All non-sequence values nested anywhere inside seq, depth first,
    left to right.

        flatten([[1, 2], 3, [4, [5, 6]]]) == [1, 2, 3, 4, 5, 6]
    """
    require_sequence(seq)
    result: list = []
    for item in seq:
        if is_sequence(item):
            result.extend(flatten(item))
        else:
            result.append(item)
    return result
