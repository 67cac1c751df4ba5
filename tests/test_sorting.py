import pytest
from hypothesis import given
from hypothesis import strategies as st

from game_algorithms.sorting import (
    bubble_sort,
    insertion_sort,
    main,
    merge_sort,
    quick_sort,
    selection_sort,
    sorted_copy,
)

int_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60)


def _quick(values):
    items = list(values)
    quick_sort(items)
    return items


def _merge(values):
    items = list(values)
    merge_sort(items)
    return items


@pytest.mark.parametrize(
    "data",
    [
        [1, 5, 3, 4, 2],
        [3, 1, 2, 9, 4],
        [9, 2, 5, 4],
        [1, 5, 9, 1, 2, 4, 6, 8, 7, 0],
        [3, 5, 9, 1, 2, 4, 6, 8, 7, 0],
        [1, 5, 9, 3, 2, 4, 6, 8, 7, 0],
        [3, 2, 5, 1, 4, 0],
    ],
)
def test_source_examples(data):
    expected = sorted(data)
    assert sorted_copy(data) == expected
    assert bubble_sort(data) == expected
    assert selection_sort(data) == expected
    assert insertion_sort(data) == expected
    quick_items = list(data)
    quick_sort(quick_items)
    assert quick_items == expected
    merge_items = list(data)
    merge_sort(merge_items)
    assert merge_items == expected


@pytest.mark.parametrize("data", [[], [7]])
def test_empty_and_single(data):
    assert sorted_copy(data) == data
    assert bubble_sort(data) == data
    assert selection_sort(data) == data
    assert insertion_sort(data) == data
    quick_items = list(data)
    quick_sort(quick_items)
    assert quick_items == data
    merge_items = list(data)
    merge_sort(merge_items)
    assert merge_items == data


@given(data=int_lists)
def test_matches_builtin(data):
    expected = sorted(data)
    assert sorted_copy(data) == expected
    assert bubble_sort(data) == expected
    assert selection_sort(data) == expected
    assert insertion_sort(data) == expected
    quick_items = list(data)
    quick_sort(quick_items)
    assert quick_items == expected
    merge_items = list(data)
    merge_sort(merge_items)
    assert merge_items == expected


@pytest.mark.parametrize("sort", [bubble_sort, selection_sort, insertion_sort, sorted_copy])
def test_input_not_modified(sort):
    data = [4, 3, 2, 1]
    result = sort(data)
    assert data == [4, 3, 2, 1]
    assert result == [1, 2, 3, 4]


@pytest.mark.parametrize("data", [list(range(1500)), list(range(1500))[::-1]])
def test_sorted_and_reversed_inputs(data):
    ascending = list(range(1500))
    assert sorted_copy(data) == ascending
    assert bubble_sort(data) == ascending
    assert selection_sort(data) == ascending
    assert insertion_sort(data) == ascending
    quick_items = list(data)
    quick_sort(quick_items)
    assert quick_items == ascending
    merge_items = list(data)
    merge_sort(merge_items)
    assert merge_items == ascending


def test_helpers_sort_copies():
    data = [3, 1, 2]
    assert _quick(data) == [1, 2, 3]
    assert _merge(data) == [1, 2, 3]
    assert data == [3, 1, 2]


def test_quick_sort_in_place_returns_none():
    data = [1, 5, 9, 3, 2, 4, 6, 8, 7, 0]
    assert quick_sort(data, 0, 9) is None
    assert data == list(range(10))


def test_quick_sort_subrange_leaves_rest():
    data = [9, 8, 7, 6, 5, 4, 3]
    quick_sort(data, 2, 5)
    assert data[:2] == [9, 8]
    assert data[2:6] == [4, 5, 6, 7]
    assert data[6:] == [3]


def test_merge_sort_subrange_leaves_rest():
    data = [3, 2, 5, 1, 4, 0]
    merge_sort(data, 1, 4)
    assert data == [3, 1, 2, 4, 5, 0]


@given(data=int_lists, bounds=st.tuples(st.integers(0, 59), st.integers(0, 59)))
def test_merge_sort_subrange_property(data, bounds):
    if not data:
        data = [0]
    low, high = sorted(b % len(data) for b in bounds)
    items = list(data)
    merge_sort(items, low, high)
    assert items[low:high + 1] == sorted(data[low:high + 1])
    assert items[:low] == data[:low]
    assert items[high + 1:] == data[high + 1:]


def test_merge_sort_is_stable():
    class Keyed:
        def __init__(self, key, tag):
            self.key, self.tag = key, tag

        def __le__(self, other):
            return self.key <= other.key

        def __lt__(self, other):
            return self.key < other.key

    items = [Keyed(2, "a"), Keyed(1, "b"), Keyed(2, "c"), Keyed(1, "d")]
    merge_sort(items)
    assert [i.tag for i in items] == ["b", "d", "a", "c"]


@pytest.mark.parametrize("sort", [quick_sort, merge_sort])
def test_out_of_range_raises(sort):
    with pytest.raises(IndexError):
        sort([3, 1, 2], 0, 5)
    with pytest.raises(IndexError):
        sort([3, 1, 2], -1, 2)


def test_main_sorts_arguments(capsys):
    assert main(["--algorithm", "bubble", "3", "1", "2"]) == 0
    assert capsys.readouterr().out.strip() == "1 2 3"


def test_main_demo_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "0 1 2 3 4 5" in out
    assert "0 1 2 3 4 5 6 7 8 9" in out