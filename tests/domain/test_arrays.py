"""Tests for list helpers."""

import math
from types import SimpleNamespace

import pytest

from fnkit import InvalidArgumentError
from fnkit.domain import arrays


class TestSlicing:
    """Taking and dropping parts of a list."""

    def test_extremes(self):
        assert arrays.array_max([10, 1, 5]) == 10
        assert arrays.array_min([10, 1, 5]) == 1

    def test_chunk(self):
        assert arrays.chunk([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]

    def test_chunk_rejects_non_positive_size(self):
        with pytest.raises(InvalidArgumentError):
            arrays.chunk([1], 0)

    def test_head_last_initial(self):
        assert arrays.head([1, 2, 3]) == 1
        assert arrays.head([]) is None
        assert arrays.last([1, 2, 3]) == 3
        assert arrays.initial([1, 2, 3]) == [1, 2]

    def test_tail(self):
        assert arrays.tail([1, 2, 3]) == [2, 3]
        assert arrays.tail([1]) == [1]

    def test_take_and_take_right(self):
        assert arrays.take([1, 2, 3], 5) == [1, 2, 3]
        assert arrays.take([1, 2, 3], 0) == []
        assert arrays.take_right([1, 2, 3], 2) == [2, 3]
        assert arrays.take_right([1, 2, 3]) == [3]

    def test_drop_right(self):
        assert arrays.drop_right([1, 2, 3]) == [1, 2]
        assert arrays.drop_right([1, 2, 3], 2) == [1]
        assert arrays.drop_right([1, 2, 3], 42) == []

    def test_drop_elements(self):
        assert arrays.drop_elements([1, 2, 3, 4], lambda n: n >= 3) == [3, 4]
        assert arrays.drop_elements([1, 2], lambda n: n > 5) == []

    def test_every_nth(self):
        assert arrays.every_nth([1, 2, 3, 4, 5, 6], 2) == [1, 3, 5]

    def test_nth_element(self):
        assert arrays.nth_element(["a", "b", "c"], 1) == "b"
        assert arrays.nth_element(["a", "b", "b"], -3) == "a"
        assert arrays.nth_element(["a"], 3) is None


class TestFlattening:
    """Nested lists."""

    def test_flatten_one_level(self):
        assert arrays.flatten([1, [2], [3, [4]]]) == [1, 2, 3, [4]]

    def test_flatten_depth(self):
        assert arrays.flatten_depth([1, [2], [[[3], 4], 5]], 2) == [1, 2, [3], 4, 5]

    def test_deep_flatten(self):
        assert arrays.deep_flatten([1, [2], [[3], 4], 5]) == [1, 2, 3, 4, 5]

    def test_deep_flatten_deeply_nested(self):
        nested = [0]
        for i in range(1, 5000):
            nested = [nested, i]

        assert arrays.deep_flatten(nested) == list(range(5000))


class TestSetOperations:
    """Membership-based helpers."""

    def test_compact(self):
        assert arrays.compact([0, 1, False, 2, "", 3, "a", None, []]) == [1, 2, 3, "a"]

    def test_count_occurrences(self):
        assert arrays.count_occurrences([1, 1, 2, 1, 2, 3], 1) == 3

    def test_difference_and_intersection(self):
        assert arrays.difference([1, 2, 3], [1, 2, 4]) == [3]
        assert arrays.intersection([1, 2, 3], [4, 3, 2]) == [2, 3]

    def test_difference_with(self):
        result = arrays.difference_with(
            [1, 1.2, 1.5, 3], [1.9, 3], lambda a, b: round(a) == round(b)
        )
        assert result == [1, 1.2]

    def test_distinct_values(self):
        assert arrays.distinct_values_of_array([1, 2, 2, 3, 4, 4, 5]) == [1, 2, 3, 4, 5]

    def test_filter_non_unique(self):
        assert arrays.filter_non_unique([1, 2, 2, 3, 4, 4, 5]) == [1, 3, 5]

    def test_similarity(self):
        assert arrays.similarity([1, 2, 3], [1, 2, 4]) == [1, 2]

    def test_symmetric_difference(self):
        assert arrays.symmetric_difference([1, 2, 3], [1, 2, 4]) == [3, 4]

    def test_union(self):
        assert arrays.union([1, 2, 3], [4, 3, 2]) == [1, 2, 3, 4]

    def test_without(self):
        assert arrays.without([2, 1, 2, 3], 1, 2) == [3]


class TestGrouping:
    """Grouping, mapping and zipping."""

    def test_group_by_function(self):
        assert arrays.group_by([6.1, 4.2, 6.3], math.floor) == {6: [6.1, 6.3], 4: [4.2]}

    def test_group_by_key_name(self):
        rows = [{"kind": "a", "n": 1}, {"kind": "b", "n": 2}, {"kind": "a", "n": 3}]

        grouped = arrays.group_by(rows, "kind")
        assert [row["n"] for row in grouped["a"]] == [1, 3]

    def test_group_by_attribute_name(self):
        items = [SimpleNamespace(size=1), SimpleNamespace(size=2), SimpleNamespace(size=1)]

        assert len(arrays.group_by(items, "size")[1]) == 2

    def test_map_object(self):
        assert arrays.map_object([1, 2, 3], lambda a: a * a) == {1: 1, 2: 4, 3: 9}

    def test_pick(self):
        assert arrays.pick({"a": 1, "b": "2", "c": 3}, ["a", "c", "z"]) == {"a": 1, "c": 3}

    def test_zip_longest_lists(self):
        assert arrays.zip_longest_lists(["a", "b"], [1, 2], [True, False]) == [
            ["a", 1, True],
            ["b", 2, False],
        ]
        assert arrays.zip_longest_lists(["a"], [1, 2], [True, False]) == [
            ["a", 1, True],
            [None, 2, False],
        ]
        assert arrays.zip_longest_lists() == []

    def test_initializers(self):
        assert arrays.initialize_array_with_range(5) == [0, 1, 2, 3, 4, 5]
        assert arrays.initialize_array_with_range(7, 3) == [3, 4, 5, 6, 7]
        assert arrays.initialize_array_with_values(3, 2) == [2, 2, 2]


class TestInPlaceRemoval:
    """Helpers that mutate their input."""

    def test_pull_values(self):
        items = ["a", "b", "c", "a", "b", "c"]

        assert arrays.pull(items, "a", "c") is None
        assert items == ["b", "b"]

    def test_pull_value_list(self):
        items = ["a", "b", "c", "a", "b", "c"]

        arrays.pull(items, ["a", "c"])
        assert items == ["b", "b"]

    def test_pull_at_index(self):
        items = ["a", "b", "c", "d"]

        assert arrays.pull_at_index(items, [1, 3]) == ["b", "d"]
        assert items == ["a", "c"]

    def test_pull_at_value(self):
        items = ["a", "b", "c", "d"]

        assert arrays.pull_at_value(items, ["b", "d"]) == ["b", "d"]
        assert items == ["a", "c"]

    def test_remove(self):
        items = [1, 2, 3, 4]

        assert arrays.remove(items, lambda n: n % 2 == 0) == [2, 4]
        assert items == [1, 3]


class TestRandomness:
    """sample and shuffle."""

    def test_sample(self):
        assert arrays.sample([3, 7, 9, 11]) in [3, 7, 9, 11]
        assert arrays.sample([]) is None

    def test_shuffle_returns_permutation_copy(self):
        original = [1, 2, 3, 4, 5]

        shuffled = arrays.shuffle(original)

        assert sorted(shuffled) == original
        assert original == [1, 2, 3, 4, 5]
