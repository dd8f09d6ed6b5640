"""Compiler from a regular expression of literal characters to a state machine."""

from __future__ import annotations

import argparse
import sys

from .machine import EPSILON, Machine
from .nfa import Nfa, NfaType, char_node, epsilon_node


class RegexCompiler:
    """Builds an NFA for a pattern and flattens it into a Machine."""

    def __init__(self, pattern):
        if not pattern:
            raise ValueError("pattern must not be empty")
        self.pattern = pattern
        self._reset()

    def _reset(self) -> None:
        self._pos = 0
        self._state = 0
        self._stack: list[Nfa] = []

    def nstates(self) -> int:
        """Next available state number after the last compilation."""
        return self._state

    def compile(self) -> Machine:
        """Compile the pattern into a Machine."""
        self._reset()
        self._compile_sequence()

        machine = Machine(len(self._stack))
        machine.set_finish(self._stack[-1].state)

        while self._stack:
            node = self._stack.pop()
            for edge in node.edges:
                if edge is None:
                    continue
                symbol = EPSILON if edge.type is NfaType.EPSILON else node.c
                machine.add_transition(node.state, edge.state, symbol)
        return machine

    def _compile_sequence(self) -> tuple[Nfa, Nfa]:
        start, end = self._compile_factor()
        cur = start
        while self._pos < len(self.pattern):
            start2, end2 = self._compile_factor()
            # The newest node is dropped from the stack and its state reused.
            self._stack.pop()
            self._state -= 1
            cur.edges[0] = start2
            end = end2
            cur = start2
        return start, end

    def _compile_factor(self) -> tuple[Nfa, Nfa]:
        end = epsilon_node(self._state)
        self._state += 1
        self._stack.append(end)

        start = char_node(self._state, end, self.pattern[self._pos])
        self._stack.append(start)
        self._state += 1

        self._pos += 1
        return start, end


def main(argv=None) -> int:
    """Compile a pattern; exit status 1 if it cannot be compiled."""
    parser = argparse.ArgumentParser(prog="renfa")
    parser.add_argument("pattern", nargs="?", default="abc")
    args = parser.parse_args(argv)
    try:
        RegexCompiler(args.pattern).compile()
    except (ValueError, IndexError) as exc:
        print(f"renfa: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())