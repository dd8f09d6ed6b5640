"""State machine built from a compiled regular expression."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

EPSILON = None


@dataclass(frozen=True)
class Transition:
    """A labelled edge between two states; ``symbol`` is None for epsilon."""

    from_state: int
    to_state: int
    symbol: Optional[str]


class Machine:
    """A state machine with room for ``nstates`` transitions."""

    def __init__(self, nstates):
        if nstates < 0:
            raise ValueError("number of states must not be negative")
        self.nstates = nstates
        self.finish = 0
        self._transitions: list[Transition] = []

    @property
    def transitions(self) -> tuple:
        return tuple(self._transitions)

    def _check_state(self, state: int, role: str) -> None:
        if not 0 <= state < self.nstates:
            raise ValueError(
                f"{role} state {state} outside range 0..{self.nstates - 1}"
            )

    def add_transition(self, from_state, to_state, symbol) -> None:
        """Append a transition."""
        self._check_state(from_state, "source")
        self._check_state(to_state, "destination")
        if len(self._transitions) >= self.nstates:
            raise IndexError("machine has no room for another transition")
        self._transitions.append(Transition(from_state, to_state, symbol))

    def set_finish(self, state) -> None:
        """Set the finishing state."""
        self.finish = state

    def __repr__(self) -> str:
        return (
            f"Machine(nstates={self.nstates}, finish={self.finish}, "
            f"transitions={self._transitions!r})"
        )