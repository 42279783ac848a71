"""
structops.strings - string helpers
==================================

    ends_with("option determines", "ines")                → True
    starts_with("option determines", ["all", "o"])        → True
    contains("option determines", ["all", "deter"])       → True
    split(",a,,b,c,", ",")                                → ["", "a", "", "b", "c", ""]
    split(",a,,b,c,", ",", nokeep=True)                   → ["a", "b", "c"]
    ordinal_suffix(22)                                    → "nd"

ends_with, starts_with and contains accept either one string or a
sequence of candidate strings, and are true if any candidate matches.
"""

import re
import textwrap
from typing import Any, Mapping, Optional, Sequence, Union

from .core import InvalidArgument, is_sequence

DEFAULT_SPLIT_PATTERN = r"\s+"
DEFAULT_WRAP_WIDTH = 78

Candidates = Union[str, Sequence[str]]


# ═══════════════════════════════════════════════════════════════════
#  MATCHING
# ═══════════════════════════════════════════════════════════════════

def _any_candidate(test, text: str, candidates: Any) -> bool:
    if isinstance(candidates, str):
        return test(text, candidates)
    if is_sequence(candidates):
        return any(_any_candidate(test, text, c) for c in candidates)
    return False


def ends_with(text: str, suffix: Candidates) -> bool:
    """Does text end with suffix (or with any string in a sequence of them)?"""
    return _any_candidate(str.endswith, text, suffix)


def starts_with(text: str, prefix: Candidates) -> bool:
    """Does text begin with prefix (or with any string in a sequence of them)?"""
    return _any_candidate(str.startswith, text, prefix)


def contains(text: str, substring: Candidates) -> bool:
    """Does text contain substring (or any string in a sequence of them)?"""
    return _any_candidate(lambda t, s: s in t, text, substring)


# ═══════════════════════════════════════════════════════════════════
#  TRIMMING AND SPLITTING
# ═══════════════════════════════════════════════════════════════════

def trim(text: str) -> str:
    return text.strip()


def ltrim(text: str) -> str:
    return text.lstrip()


def rtrim(text: str) -> str:
    return text.rstrip()


def split(text: str, pattern: str = DEFAULT_SPLIT_PATTERN, nokeep: bool = False) -> list[str]:
    """
    Split text on the regular expression pattern.

    An empty pattern splits text into its characters.  Empty pieces
    between adjacent matches are kept unless nokeep is true.  Splitting
    that yields only one empty piece returns [].

        split("a b c")                  == ["a", "b", "c"]
        split("a,b,c")                  == ["a,b,c"]
        split("abc", "")                == ["a", "b", "c"]
        split(",a,b,c,", ",")           == ["", "a", "b", "c", ""]
    """
    if pattern == "":
        return list(text)
    try:
        regex = re.compile(pattern)
    except re.error as exc:
        raise InvalidArgument(f"bad split pattern {pattern!r}: {exc}") from exc

    pieces: list[str] = []
    begin = 0
    for match in regex.finditer(text):
        if match.start() == match.end():
            continue
        pieces.append(text[begin:match.start()])
        begin = match.end()
    pieces.append(text[begin:])

    if nokeep:
        pieces = [p for p in pieces if p != ""]
    if pieces == [""]:
        return []
    return pieces


def wrap(
    text: str,
    width: int = DEFAULT_WRAP_WIDTH,
    indent: int = 0,
    indent1: Optional[int] = None,
) -> str:
    """
    Wrap text into a paragraph of lines at most width characters long.

    indent is the indent of every line, indent1 the indent of the first
    line (defaults to indent).  Both must be smaller than width.
    """
    if indent1 is None:
        indent1 = indent
    if not (indent1 < width and indent < width):
        raise InvalidArgument("the indents must be less than the line width")
    return textwrap.fill(
        text,
        width=width,
        initial_indent=" " * indent1,
        subsequent_indent=" " * indent,
        break_on_hyphens=False,
    )


# ═══════════════════════════════════════════════════════════════════
#  MISC
# ═══════════════════════════════════════════════════════════════════

def ordinal_suffix(number: int) -> str:
    """English suffix for an ordinal number: 1st, 2nd, 3rd, 4th, 11th, 22nd."""
    number = abs(int(number)) % 100
    digit = number % 10
    if digit == 1 and number != 11:
        return "st"
    if digit == 2 and number != 12:
        return "nd"
    if digit == 3 and number != 13:
        return "rd"
    return "th"


def map_replace(replacements: Mapping[str, str], text: str) -> str:
    """
    Replace every occurrence of each key of replacements with its value.

        map_replace({"March": "April", "now": "later"}, "now we meet in March")
            == "later we meet in April"
    """
    for old, new in replacements.items():
        text = text.replace(old, new)
    return text
