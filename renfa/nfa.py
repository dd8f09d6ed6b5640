"""Nodes of a nondeterministic finite automaton and a JSON-like dumper."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, Optional


class NfaType(IntEnum):
    """Kind of an NFA node."""

    EPSILON = 1
    CHAR = 2


_NAMES = {
    NfaType.EPSILON: "NFA_EPSILON",
    NfaType.CHAR: "NFA_CHAR",
}


@dataclass(eq=False)
class Nfa:
    """An NFA node with up to two outgoing edges."""

    state: int
    type: NfaType
    c: str = "\0"
    edges: list = field(default_factory=lambda: [None, None])

    def __post_init__(self) -> None:
        self.type = NfaType(self.type)
        if len(self.edges) != 2:
            raise ValueError("an nfa node has exactly two edge slots")

    def edge(self, which) -> Optional["Nfa"]:
        """Return edge 0 or 1."""
        if which not in (0, 1):
            raise ValueError(f"edge index must be 0 or 1, not {which!r}")
        return self.edges[which]

    def nodes(self) -> Iterator["Nfa"]:
        """Yield every node reachable from this one, each exactly once."""
        seen = set()
        pending = [self]
        while pending:
            node = pending.pop()
            if node is None or node in seen:
                continue
            seen.add(node)
            yield node
            pending.append(node.edges[1])
            pending.append(node.edges[0])


def epsilon_node(state) -> Nfa:
    """Create an epsilon node."""
    return Nfa(state, NfaType.EPSILON)


def char_node(state, end, c) -> Nfa:
    """Create a character node whose first edge leads to ``end``."""
    return Nfa(state, NfaType.CHAR, c=c, edges=[end, None])


def dump(start) -> str:
    """Render the automaton reachable from ``start`` through its first edges."""
    lines = ["{"]
    seen = set()

    def walk(node: Optional[Nfa], space: int) -> None:
        if node is None or node in seen:
            return
        seen.add(node)
        if not isinstance(node.type, NfaType):
            raise ValueError(f"bad nfa type: {node.type!r}")
        pad = " " * space
        lines.append(f'{pad}"n_type": "{_NAMES[node.type]}",')
        lines.append(f'{pad}"n_state": "{node.state}",')
        if node.type is NfaType.CHAR:
            lines.append(f'{pad}"n_c": "{node.c}",')
        lines.append(f'{pad}"n_edge[0]": {{')
        walk(node.edges[0], space + 2)
        lines.append(f"{pad}}},")

    walk(start, 2)
    lines.append("}")
    return "\n".join(lines) + "\n"