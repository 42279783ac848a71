"""
structops
=========

Small, dependable operations over plain Python data.

    seq.flatten([[1, 2], 3, [4, [5, 6]]])          → [1, 2, 3, 4, 5, 6]
    seq.splice(["a", "b", "c", "d"], 2, 2)         → (["a", "d"], ["b", "c"])
    table.deep_compare({"a": [1, 2]}, {"a": [1, 2]})  → True
    table.invert({"color": "blue"})                → {"blue": "color"}

Modules:
  • sequence   - map, reduce, filter, slice, splice, merge, concat, flatten, ...
  • table      - deep_compare, deepcopy, size, invert, insert_with, pairs_by_keys, ...
  • strings    - starts_with, ends_with, contains, trim, split, wrap, ...
  • markup     - a tiny HTML tag builder built on sequence.flatten / sequence.map
  • util       - assert_equal, curry, file helpers, to_csv, serialize

Positions in sequence.slice and sequence.splice start at 1.  Only
sequence.merge and table.insert_with modify their arguments.
"""

from structops import markup, sequence, strings, table, util
from structops.core import (
    # Sentinel
    ABSENT,
    # Errors
    StructOpsError,
    TransformError,
    InvalidArgument,
)
from structops.table import (
    deep_compare,
    deepcopy,
    size,
    sequence_length,
    invert,
    find_with,
    pairs_by_keys,
    insert_with,
    inserted_with,
)

__version__ = "0.1.0"
__all__ = [
    "ABSENT", "StructOpsError", "TransformError", "InvalidArgument",
    "sequence", "table", "strings", "markup", "util",
    "deep_compare", "deepcopy", "size", "sequence_length", "invert",
    "find_with", "pairs_by_keys", "insert_with", "inserted_with",
]
