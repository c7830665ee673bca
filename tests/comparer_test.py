import pytest

from heapqueue.datastructures import Comparer, DefaultComparer, FunctionComparer, KeyComparer, ReverseComparer
from heapqueue.datastructures.comparer import as_comparer


def test_default_is_shared_instance():
    assert isinstance(Comparer.default(), DefaultComparer)
    assert Comparer.default() is Comparer.default()


@pytest.mark.parametrize("x, y, expected", [
    (1, 2, -1),
    (2, 1, 1),
    (1, 1, 0),
    ("a", "b", -1),
    (None, 0, -1),
    (0, None, 1),
    (None, None, 0),
    (None, "", -1),
])
def test_default_natural_order(x, y, expected):
    assert Comparer.default().compare(x, y) == expected


def test_default_rejects_incomparable_values():
    with pytest.raises(TypeError):
        Comparer.default().compare(1, "1")


def test_comparers_are_callable():
    assert Comparer.default()(3, 4) == -1


def test_create_wraps_function():
    c = Comparer.create(lambda a, b: b - a)
    assert isinstance(c, FunctionComparer)
    assert c.compare(1, 2) == 1
    assert c.compare(2, 1) == -1
    assert c.compare(5, 5) == 0


def test_create_rejects_non_callable():
    with pytest.raises(TypeError):
        Comparer.create(42)


def test_reverse():
    c = Comparer.reverse()
    assert isinstance(c, ReverseComparer)
    assert c.base is Comparer.default()
    assert c.compare(1, 2) == 1
    assert c.compare(None, 1) == 1

    by_len = Comparer.from_key(len)
    assert Comparer.reverse(by_len).compare("aa", "b") == -1


def test_from_key():
    c = Comparer.from_key(lambda r: r["priority"])
    assert isinstance(c, KeyComparer)
    assert c.compare({"priority": 1}, {"priority": 2}) == -1
    assert c.compare({"priority": 2}, {"priority": 2}) == 0


def test_as_comparer():
    assert as_comparer(None) is Comparer.default()
    rev = Comparer.reverse()
    assert as_comparer(rev) is rev
    wrapped = as_comparer(lambda a, b: 0)
    assert isinstance(wrapped, FunctionComparer)


def test_base_compare_is_abstract():
    with pytest.raises(NotImplementedError):
        Comparer().compare(1, 2)
