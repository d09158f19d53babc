import pytest

from tinkerkit.growable import GrowableList


def test_empty():
    v = GrowableList()
    assert len(v) == 0
    assert v.capacity == 0
    assert list(v) == []


def test_first_push_allocates_one():
    v = GrowableList()
    v.push("a")
    assert v.capacity == 1
    assert v[0] == "a"


def test_push_keeps_order():
    v = GrowableList()
    for i in range(10):
        v.push(i)
    assert list(v) == list(range(10))
    assert len(v) == 10


@pytest.mark.parametrize("count", [1, 2, 3, 7, 10, 33])
def test_capacity_is_power_of_two_bound(count):
    v = GrowableList()
    for i in range(count):
        v.push(i)
    cap = v.capacity
    assert cap & (cap - 1) == 0
    assert count <= cap < 2 * count


def test_custom_multiplier():
    v = GrowableList(growth_multiplier=3)
    caps = []
    for i in range(10):
        v.push(i)
        caps.append(v.capacity)
    assert sorted(set(caps)) == [1, 3, 9, 27]


def test_bad_multiplier():
    with pytest.raises(ValueError):
        GrowableList(growth_multiplier=1)


def test_repr_lists_contents():
    v = GrowableList()
    v.push(0)
    v.push(1)
    text = repr(v)
    assert "'[0, 1]'" in text
    assert "len=2" in text
    assert "vec=''" in repr(GrowableList())