from pytest import mark, raises

from sortedlinked import (
    OrderViolation,
    SortedLinkedList,
    UnsupportedOperation,
    case_insensitive,
    case_insensitive_nulls_last,
    from_sorted,
    natural,
)


def test_default_order_puts_capitals_first():
    sl = SortedLinkedList()
    for value in ["b", "a", "c", "B"]:
        sl.add(value)
    assert sl.to_list() == ["B", "a", "b", "c"]


def test_case_insensitive_appends_to_equal_run():
    sl = SortedLinkedList(cmp=case_insensitive_nulls_last)
    for value in ["b", "a", "c", "B"]:
        sl.add(value)
    assert sl.to_list() == ["a", "b", "B", "c"]


@mark.parametrize(
    "values, expected",
    [
        (["a", "c", "b"], ["a", "b", "c"]),
        ([2, 1, 0], [0, 1, 2]),
        ([6, -5, -1, None], [None, -5, -1, 6]),
    ],
)
def test_add(values, expected):
    sl = SortedLinkedList()
    for value in values:
        sl.add(value)
    assert sl.to_list() == expected


@mark.parametrize(
    "seed, index, value, expected",
    [
        (["a", "b", "c"], 0, "a", ["a", "a", "b", "c"]),
        (["a", "b", "c"], 1, "a", ["a", "a", "b", "c"]),
        (["a", "a", "b", "c"], 1, "a", ["a", "a", "a", "b", "c"]),
        (["a", "b", "c"], 3, "c", ["a", "b", "c", "c"]),
    ],
)
def test_insert_at_valid_position(seed, index, value, expected):
    sl = SortedLinkedList(seed)
    sl.insert(index, value)
    assert sl.to_list() == expected


@mark.parametrize(
    "seed, index, value",
    [
        (["a", "b", "c"], 0, "b"),
        (["a", "b", "c"], 1, "c"),
        (["a", "a", "b", "c"], 3, "a"),
    ],
)
def test_insert_at_wrong_position(seed, index, value):
    sl = SortedLinkedList(seed)
    with raises(OrderViolation):
        sl.insert(index, value)
    assert sl.to_list() == sorted(seed)


@mark.parametrize(
    "seed, index, value, expected",
    [
        (["a", "b", "d"], 1, "c", ["a", "c", "d"]),
        (["a", "B", "c"], 1, "b", ["a", "b", "c"]),
        (["a", "a", "a"], 1, "A", ["a", "A", "a"]),
    ],
)
def test_replace_at_valid_position(seed, index, value, expected):
    sl = SortedLinkedList(seed, case_insensitive_nulls_last)
    previous = sl[index]
    assert sl.replace(index, value) == previous
    assert sl.to_list() == expected


@mark.parametrize(
    "seed, index, value",
    [
        (["a", "b", "d"], 1, "e"),
        (["a", "B", "c"], 0, "c"),
        (["a", "b", "b"], 2, "A"),
    ],
)
def test_replace_at_wrong_position(seed, index, value):
    sl = SortedLinkedList(seed, case_insensitive_nulls_last)
    with raises(OrderViolation):
        sl.replace(index, value)
    assert sl.to_list() == seed


def test_replace_returns_previous_occupant():
    sl = case_insensitive(["a", "b", "d"])
    assert sl.replace(1, "c") == "b"
    assert sl.to_list() == ["a", "c", "d"]


def test_reversed_view_follows_owner():
    sl = SortedLinkedList(["aaa", "bbb", "ccc"])
    rv = sl.reversed_view()
    sl.add("ddd")
    assert rv[0] == "ddd"
    assert rv[-1] == "aaa"
    with raises(UnsupportedOperation):
        rv.add("eee")


def test_batch_versus_one_by_one():
    one_by_one = SortedLinkedList([1, 5, 9])
    one_by_one.update([4, 8, 0])
    assert one_by_one.to_list() == [0, 1, 4, 5, 8, 9]

    batch = SortedLinkedList([1, 5, 9])
    with raises(OrderViolation):
        batch.insert_all(1, [4, 8, 0])
    batch.insert_all(1, [4, 2, 3])
    assert batch.to_list() == [1, 2, 3, 4, 5, 9]


def test_factories():
    assert natural([None, 2, 1]).to_list() == [None, 1, 2]
    assert natural([None, 2, 1], nulls="last").to_list() == [1, 2, None]
    with raises(ValueError):
        natural(nulls="middle")
    assert case_insensitive(["b", None, "A"]).to_list() == ["A", "b", None]
    assert from_sorted([1, 2, 2, 3]).to_list() == [1, 2, 2, 3]
    assert from_sorted([]).to_list() == []


def test_from_sorted_rejects_unordered_input():
    with raises(OrderViolation) as exc:
        from_sorted([3, 1, 2])
    assert exc.value.operand == "collection"
    with raises(OrderViolation):
        from_sorted(["b", "a"], case_insensitive_nulls_last)
    assert from_sorted(["a", "B", None], case_insensitive_nulls_last).to_list() == ["a", "B", None]


def test_can_be_iterated_into_a_list():
    assert [v for v in SortedLinkedList(["b", "a"])] == ["a", "b"]
