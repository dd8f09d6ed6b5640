import pytest

from renfa.machine import EPSILON, Machine, Transition


def test_add_transition_records_it():
    m = Machine(3)
    m.add_transition(0, 2, "q")
    m.add_transition(2, 1, EPSILON)
    assert m.transitions == (Transition(0, 2, "q"), Transition(2, 1, None))


def test_new_machine_is_empty():
    m = Machine(5)
    assert m.transitions == ()
    assert m.nstates == 5


def test_set_finish():
    m = Machine(4)
    m.set_finish(3)
    assert m.finish == 3


@pytest.mark.parametrize("src,dst", [(-1, 0), (0, -1), (2, 0), (0, 2)])
def test_out_of_range_states_rejected(src, dst):
    m = Machine(2)
    with pytest.raises(ValueError):
        m.add_transition(src, dst, "a")
    assert m.transitions == ()


def test_capacity_limited_to_state_count():
    m = Machine(1)
    m.add_transition(0, 0, "a")
    with pytest.raises(IndexError):
        m.add_transition(0, 0, "b")
    assert m.transitions == (Transition(0, 0, "a"),)


def test_negative_state_count_rejected():
    with pytest.raises(ValueError):
        Machine(-1)


def test_transition_is_immutable():
    t = Transition(0, 1, "z")
    with pytest.raises(AttributeError):
        t.symbol = "y"
    assert t == Transition(0, 1, "z")
    assert t.symbol == "z"


def test_recorded_transition_keeps_its_fields():
    m = Machine(2)
    m.add_transition(1, 0, "k")
    (t,) = m.transitions
    assert (t.from_state, t.to_state, t.symbol) == (1, 0, "k")