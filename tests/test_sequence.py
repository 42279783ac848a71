"""
Tests for structops.sequence.

    §1  Transforms and folds (map, reduce, filter, any, all, join, reverse)
    §2  Extremes (maximum, minimum)
    §3  slice, including the negative-position arithmetic
    §4  splice and its round trip
    §5  merge / merged
    §6  concat, including the single-argument unwrap
    §7  flatten
    §8  values iterator
    §9  Properties
"""

import logging
import os
import sys

import pytest

# Add parent to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from structops import sequence as seq
from structops.core import ABSENT, InvalidArgument, TransformError


SIX = ["a", "b", "c", "d", "e", "f"]


# ═══════════════════════════════════════════════════════════════════
#  §1  TRANSFORMS AND FOLDS
# ═══════════════════════════════════════════════════════════════════

class TestMap:

    def test_map(self):
        assert seq.map(lambda n: "* " + n, ["one", "two"]) == ["* one", "* two"]

    def test_map_empty(self):
        assert seq.map(str, []) == []

    def test_map_tuple_gives_list(self):
        assert seq.map(lambda n: n * 2, (1, 2)) == [2, 4]

    def test_map_failing_function(self):
        with pytest.raises(TransformError) as info:
            seq.map(lambda n: n + 1, [1, "x"])
        assert isinstance(info.value.__cause__, TypeError)

    def test_map_not_callable(self):
        with pytest.raises(TransformError):
            seq.map("upper", ["a"])

    def test_map_needs_sequence(self):
        with pytest.raises(InvalidArgument):
            seq.map(str, "abc")


class TestReduce:

    def test_with_init(self):
        assert seq.reduce(lambda c, n: c + n, [1, 2, 3], 0) == 6

    def test_without_init(self):
        words = ["All", "The", "Time", "Now"]
        assert seq.reduce(lambda c, n: c + n, words) == "AllTheTimeNow"

    def test_falsy_init_is_used(self):
        calls = []

        def collect(acc, item):
            calls.append((acc, item))
            return acc + item

        assert seq.reduce(collect, [1, 2], 0) == 3
        assert calls == [(0, 1), (1, 2)]

    def test_empty_without_init(self):
        assert seq.reduce(lambda c, n: c + n, []) is ABSENT

    def test_empty_with_init(self):
        assert seq.reduce(lambda c, n: c + n, [], 10) == 10

    def test_single_without_init(self):
        assert seq.reduce(lambda c, n: c + n, [7]) == 7


class TestFilterAnyAll:

    def test_filter(self):
        assert seq.filter(lambda n: n < 5, [12, 7, 4]) == [4]

    def test_filter_keeps_order(self):
        assert seq.filter(lambda n: n % 2, [5, 2, 3, 8, 1]) == [5, 3, 1]

    def test_any(self):
        assert seq.any(lambda n: n < 5, [4, 8, 20, 88]) is True
        assert seq.any(lambda n: n < 5, [8, 20]) is False

    def test_all(self):
        assert seq.all(lambda n: n < 5, [1, 2, 4]) is True
        assert seq.all(lambda n: n < 5, [1, 9, 4]) is False

    def test_empty(self):
        assert seq.any(bool, []) is False
        assert seq.all(bool, []) is True

    def test_short_circuit(self):
        seen = []

        def pred(n):
            seen.append(n)
            return n > 1

        assert seq.any(pred, [1, 2, 3, 4]) is True
        assert seen == [1, 2]

        seen.clear()
        assert seq.all(pred, [2, 1, 3]) is False
        assert seen == [2, 1]


class TestJoinReverse:

    def test_join(self):
        assert seq.join(SIX) == "abcdef"
        assert seq.join(SIX, " ") == "a b c d e f"
        assert seq.join(SIX, ",") == "a,b,c,d,e,f"

    def test_join_empty(self):
        assert seq.join([], ",") == ""

    def test_join_numbers(self):
        assert seq.join([1, 2.5, "x"], "-") == "1-2.5-x"

    @pytest.mark.parametrize("bad", [None, True, ["nested"], {"k": 1}])
    def test_join_rejects_non_text(self, bad):
        with pytest.raises(InvalidArgument):
            seq.join(["a", bad])

    def test_reverse(self):
        assert seq.reverse(["a", "b", "c"]) == ["c", "b", "a"]
        assert seq.reverse([]) == []

    def test_reverse_leaves_input(self):
        source = [1, 2, 3]
        seq.reverse(source)
        assert source == [1, 2, 3]


# ═══════════════════════════════════════════════════════════════════
#  §2  EXTREMES
# ═══════════════════════════════════════════════════════════════════

class TestExtremes:

    def test_maximum(self):
        assert seq.maximum([4, 5, 99, 13]) == 99

    def test_minimum(self):
        assert seq.minimum([5, 4, 99, 13]) == 4

    def test_empty(self):
        assert seq.maximum([]) is ABSENT
        assert seq.minimum([]) is ABSENT

    def test_zero_counts(self):
        assert seq.minimum([3, 0, 7]) == 0

    def test_skips_none_and_false(self):
        assert seq.maximum([None, 3, False, 8, None]) == 8
        assert seq.minimum([None, 3, False, 8]) == 3

    def test_only_skipped(self):
        assert seq.maximum([None, False]) is ABSENT

    def test_skips_non_comparable(self, caplog):
        caplog.set_level(logging.DEBUG, logger="structops.sequence")
        assert seq.maximum([4, "x", 9]) == 9
        assert "not comparable" in caplog.text


# ═══════════════════════════════════════════════════════════════════
#  §3  SLICE
# ═══════════════════════════════════════════════════════════════════

class TestSlice:

    @pytest.mark.parametrize("first,last,expected", [
        (1, 3, ["a", "b", "c"]),
        (1, 1, ["a"]),
        (6, 6, ["f"]),
        (6, None, ["f"]),
        (5, None, ["e", "f"]),
        (2, 5, ["b", "c", "d", "e"]),
        (4, 2, []),
    ])
    def test_positions(self, first, last, expected):
        assert seq.slice(SIX, first, last) == expected

    def test_clamps(self):
        assert seq.slice(SIX, 0, 2) == ["a", "b"]
        assert seq.slice(SIX, 5, 100) == ["e", "f"]
        assert seq.slice(SIX, 7) == []

    def test_negative_positions_use_length_plus_one_minus(self):
        # -1 becomes 6 + 1 - (-1) = 8, which is past the end.
        assert seq.slice(SIX, -1) == []
        # last -1 also becomes 8 and clamps to 6.
        assert seq.slice(SIX, 2, -1) == ["b", "c", "d", "e", "f"]

    def test_empty(self):
        assert seq.slice([], 1) == []
        assert seq.slice([], 1, 3) == []

    def test_returns_new_list(self):
        source = list(SIX)
        part = seq.slice(source, 1)
        part.append("z")
        assert source == SIX

    @pytest.mark.parametrize("first,last", [("1", None), (1.0, None), (1, "3"), (True, None)])
    def test_non_integer_bounds(self, first, last):
        with pytest.raises(InvalidArgument):
            seq.slice(SIX, first, last)


# ═══════════════════════════════════════════════════════════════════
#  §4  SPLICE
# ═══════════════════════════════════════════════════════════════════

class TestSplice:

    def test_to_end(self):
        assert seq.splice(SIX, 3) == (["a", "b"], ["c", "d", "e", "f"])

    def test_count(self):
        assert seq.splice(SIX, 3, 2) == (["a", "b", "e", "f"], ["c", "d"])

    def test_replace(self):
        assert seq.splice(SIX, 3, 2, ["one", "two"]) == (
            ["a", "b", "one", "two", "e", "f"], ["c", "d"])

    def test_insert_only(self):
        assert seq.splice(SIX, 3, 0, ["one", "two"]) == (
            ["a", "b", "one", "two", "c", "d", "e", "f"], [])

    def test_replace_to_end(self):
        assert seq.splice(SIX, 3, None, ["one", "two"]) == (
            ["a", "b", "one", "two"], ["c", "d", "e", "f"])

    def test_input_untouched(self):
        source = list(SIX)
        seq.splice(source, 2, 3, ["x"])
        assert source == SIX

    def test_clamping(self):
        assert seq.splice(SIX, 0, 1) == (["b", "c", "d", "e", "f"], ["a"])
        assert seq.splice(SIX, 10, 2, ["z"]) == (SIX + ["z"], [])
        assert seq.splice(SIX, 5, 10) == (["a", "b", "c", "d"], ["e", "f"])

    def test_negative_count_removes_nothing(self):
        assert seq.splice(SIX, 3, -2) == (SIX, [])

    def test_empty(self):
        assert seq.splice([], 1) == ([], [])
        assert seq.splice([], 1, 2, ["x"]) == (["x"], [])

    def test_non_numeric_count(self):
        with pytest.raises(InvalidArgument, match="delete_count"):
            seq.splice(SIX, 1, "2")

    def test_bad_insert_values(self):
        with pytest.raises(InvalidArgument):
            seq.splice(SIX, 1, 1, "xy")

    @pytest.mark.parametrize("start,count", [(1, 0), (1, 3), (3, 2), (6, 1), (4, None), (7, 0)])
    def test_round_trip(self, start, count):
        remainder, removed = seq.splice(SIX, start, count)
        restored, nothing = seq.splice(remainder, start, 0, removed)
        assert restored == SIX
        assert nothing == []


# ═══════════════════════════════════════════════════════════════════
#  §5  MERGE
# ═══════════════════════════════════════════════════════════════════

class TestMerge:

    def test_merge(self):
        source = ["a", "b", "c"]
        assert seq.merge(["d", "e"], source) == ["d", "e", "a", "b", "c"]
        assert seq.merge([], source) == ["a", "b", "c"]
        assert seq.merge(list(source), []) == ["a", "b", "c"]
        assert seq.merge(["foo"], seq.slice(source, 3)) == ["foo", "c"]

    def test_merge_is_in_place(self):
        target = [1]
        result = seq.merge(target, (2, 3))
        assert result is target
        assert target == [1, 2, 3]

    def test_merge_source_untouched(self):
        source = [2, 3]
        seq.merge([1], source)
        assert source == [2, 3]

    def test_merge_needs_list_target(self):
        with pytest.raises(InvalidArgument, match="merge target"):
            seq.merge((1,), [2])

    def test_merge_bad_source_mutates_nothing(self):
        target = [1]
        with pytest.raises(InvalidArgument):
            seq.merge(target, "23")
        assert target == [1]

    def test_merged_is_pure(self):
        target = [1]
        result = seq.merged(target, [2])
        assert result == [1, 2]
        assert target == [1]
        assert result is not target


# ═══════════════════════════════════════════════════════════════════
#  §6  CONCAT
# ═══════════════════════════════════════════════════════════════════

class TestConcat:

    def test_one_level(self):
        assert seq.concat([1, 2], 3, [4, [5, 6]]) == [1, 2, 3, 4, [5, 6]]

    def test_single_argument_unwraps(self):
        assert seq.concat([[1, 2], 3, [4, [5, 6]]]) == [1, 2, 3, 4, [5, 6]]

    def test_variadic_and_wrapped_agree(self):
        a, b, c = ["x"], "y", ["z", ["w"]]
        assert seq.concat(a, b, c) == seq.concat([a, b, c])

    def test_no_arguments(self):
        assert seq.concat() == []

    def test_tuples_are_sequences(self):
        assert seq.concat((1, 2), [3]) == [1, 2, 3]

    def test_strings_are_not_spread(self):
        assert seq.concat("ab", ["c"]) == ["ab", "c"]

    def test_unwrap_is_decided_by_count(self):
        # One argument is always unwrapped, even when that leaves a
        # single non-sequence to unwrap again.
        with pytest.raises(InvalidArgument):
            seq.concat(5)
        with pytest.raises(InvalidArgument):
            seq.concat([5])
        with pytest.raises(InvalidArgument):
            seq.concat([[5]])

    def test_nested_single_unwraps_twice(self):
        # concat([[1, 2]]) → concat([1, 2]) → concat(1, 2)
        assert seq.concat([[1, 2]]) == [1, 2]

    def test_unwrap_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="structops.sequence")
        seq.concat([[1], 2])
        assert "unwrapping single argument" in caplog.text


# ═══════════════════════════════════════════════════════════════════
#  §7  FLATTEN
# ═══════════════════════════════════════════════════════════════════

class TestFlatten:

    def test_flatten(self):
        assert seq.flatten([[1, 2], 3, [4, [5, 6]]]) == [1, 2, 3, 4, 5, 6]

    def test_deep(self):
        assert seq.flatten([[[[["deep"]]]], "shallow"]) == ["deep", "shallow"]

    def test_empty_lists_vanish(self):
        assert seq.flatten([[], [[]], 1]) == [1]

    def test_mappings_and_strings_are_leaves(self):
        leaf = {"k": [1, 2]}
        assert seq.flatten(["ab", [leaf]]) == ["ab", leaf]

    def test_input_untouched(self):
        source = [[1], [2, [3]]]
        seq.flatten(source)
        assert source == [[1], [2, [3]]]


# ═══════════════════════════════════════════════════════════════════
#  §8  VALUES
# ═══════════════════════════════════════════════════════════════════

class TestValues:

    def test_call_style(self):
        it = seq.values(["x", "y"])
        assert it() == "x"
        assert it() == "y"
        assert it() is ABSENT
        assert it() is ABSENT

    def test_iterator_style(self):
        assert list(seq.values([1, 2, 3])) == [1, 2, 3]

    def test_not_restartable(self):
        it = seq.values([1, 2])
        assert list(it) == [1, 2]
        assert list(it) == []
        with pytest.raises(StopIteration):
            next(it)

    def test_shared_cursor(self):
        it = seq.values([1, 2, 3])
        assert it() == 1
        assert next(it) == 2
        assert list(it) == [3]

    def test_empty(self):
        assert seq.values([])() is ABSENT

    def test_lazy(self):
        source = [1]
        it = seq.values(source)
        source.append(2)
        assert list(it) == [1, 2]


# ═══════════════════════════════════════════════════════════════════
#  §9  PROPERTIES
# ═══════════════════════════════════════════════════════════════════

SAMPLES = [
    [],
    [1],
    SIX,
    [[1, 2], 3, [4, [5, 6]]],
    [None, "x", [[]], ("t", ["u"])],
]


class TestProperties:

    @pytest.mark.parametrize("sample", SAMPLES)
    def test_reverse_twice(self, sample):
        assert seq.reverse(seq.reverse(sample)) == list(sample)

    @pytest.mark.parametrize("sample", SAMPLES)
    def test_flatten_idempotent(self, sample):
        once = seq.flatten(sample)
        assert seq.flatten(once) == once

    @pytest.mark.parametrize("sample", SAMPLES)
    def test_map_preserves_length(self, sample):
        assert len(seq.map(repr, sample)) == len(sample)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
