import pytest

from renfa.intset import BITS_PER_WORD, IntSet


def test_added_values_are_members():
    s = IntSet(2)
    for n in (0, 5, 63, 64, 100):
        s.add(n)
    assert all(n in s for n in (0, 5, 63, 64, 100))
    assert 1 not in s
    assert 99 not in s


def test_len_counts_distinct_members():
    s = IntSet(1)
    s.add(3)
    s.add(3)
    s.add(7)
    assert len(s) == 2


def test_empty_set_has_zero_length():
    assert len(IntSet(4)) == 0


def test_capacity_matches_word_count():
    assert IntSet(3).capacity == 3 * BITS_PER_WORD


def test_last_slot_is_usable():
    s = IntSet(1)
    s.add(BITS_PER_WORD - 1)
    assert BITS_PER_WORD - 1 in s


def test_add_past_capacity_raises():
    s = IntSet(1)
    with pytest.raises(IndexError):
        s.add(BITS_PER_WORD)


def test_negative_value_raises():
    s = IntSet(1)
    with pytest.raises(IndexError):
        s.add(-1)
    with pytest.raises(IndexError):
        _ = -1 in s


def test_zero_size_rejected():
    with pytest.raises(ValueError):
        IntSet(0)