from pytest import mark, raises

from sortedlinked.engine.bounds import (
    check_insert_index,
    check_replace_index,
    fits_between,
    fits_in_place,
)
from sortedlinked.engine.insertion import insertion_index, is_ordered
from sortedlinked.errors import ErrorKind, IndexOutOfRange
from sortedlinked.ordering import case_insensitive_nulls_last, natural_order
from sortedlinked.storage import ArrayStorage, LinkedStorage


@mark.parametrize(
    "values, value, expected",
    [
        ([], 5, 0),
        ([1, 3, 5], 0, 0),
        ([1, 3, 5], 4, 2),
        ([1, 3, 5], 9, 3),
        ([1, 3, 3, 3, 5], 3, 4),
    ],
)
def test_insertion_index_lands_after_equal_run(values, value, expected):
    assert insertion_index(LinkedStorage(values), natural_order, value) == expected


def test_insertion_index_uses_policy_equality():
    st = ArrayStorage(["a", "b", "c"])
    assert insertion_index(st, case_insensitive_nulls_last, "B") == 2


def test_is_ordered():
    assert is_ordered(ArrayStorage([]), natural_order)
    assert is_ordered(ArrayStorage([1, 1, 2]), natural_order)
    assert not is_ordered(ArrayStorage([2, 1]), natural_order)


def test_insert_index_range_includes_size():
    check_insert_index(0, 0)
    check_insert_index(3, 3)
    with raises(IndexOutOfRange) as exc:
        check_insert_index(4, 3)
    assert exc.value.kind is ErrorKind.INDEX_OUT_OF_RANGE
    assert str(exc.value) == "Index: 4, Size: 3"
    with raises(IndexError):
        check_insert_index(-1, 3)


def test_replace_index_range_excludes_size():
    check_replace_index(2, 3)
    with raises(IndexOutOfRange):
        check_replace_index(3, 3)
    with raises(IndexOutOfRange):
        check_replace_index(0, 0)


@mark.parametrize(
    "index, low, high, ok",
    [
        (0, "a", "a", True),
        (0, "b", "b", False),
        (1, "a", "b", True),
        (1, "a", "c", False),
        (3, "c", "z", True),
        (3, "b", "z", False),
    ],
)
def test_fits_between(index, low, high, ok):
    assert fits_between(LinkedStorage(["a", "b", "c"]), natural_order, index, low, high) is ok


@mark.parametrize(
    "index, value, ok",
    [
        (1, "c", True),
        (1, "e", False),
        (0, "A", True),
        (2, "b", True),
        (2, "a", False),
    ],
)
def test_fits_in_place_skips_the_replaced_slot(index, value, ok):
    st = LinkedStorage(["a", "b", "d"])
    assert fits_in_place(st, case_insensitive_nulls_last, index, value) is ok


def test_single_slot_replacement_has_no_neighbours():
    assert fits_in_place(ArrayStorage([5]), natural_order, 0, -100)
