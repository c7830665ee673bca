import pytest

from heapqueue.datastructures.buffer import clear_slots, copy_slots, make_array


def test_make_array_slots_start_as_none():
    buf = make_array(3)
    assert len(buf) == 3
    assert [buf[i] for i in range(3)] == [None, None, None]


def test_make_array_zero_length():
    assert len(make_array(0)) == 0


def test_make_array_negative_rejected():
    with pytest.raises(ValueError):
        make_array(-1)


def test_copy_and_clear_slots():
    src = make_array(4)
    for i, v in enumerate(["a", "b", "c"]):
        src[i] = v
    dst = make_array(5)
    copy_slots(src, dst, 3, dst_index=1)
    assert [dst[i] for i in range(5)] == [None, "a", "b", "c", None]

    clear_slots(dst, 1, 3)
    assert [dst[i] for i in range(5)] == [None, None, None, "c", None]
