# renfa

`renfa` builds a non-deterministic finite automaton for a pattern and
flattens it into a table of state transitions.

Patterns are concatenations of literal characters: each character in the
pattern becomes a node that moves to the next on that character.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Command line

```
renfa [PATTERN]
```

compiles `PATTERN` (default `abc`) into a machine. Nothing is printed on
success; if the pattern cannot be compiled (for example an empty
pattern) a message goes to standard error and the exit status is 1.

## Library

```python
from renfa.compiler import RegexCompiler

compiler = RegexCompiler("abc")
machine = compiler.compile()
print(machine.finish, machine.transitions)
print(compiler.nstates())
```

`RegexCompiler(pattern)` raises `ValueError` for an empty pattern.
`compile()` returns a `renfa.machine.Machine`; `nstates()` gives the next
free state number after the last compilation.

### `renfa.machine`

- `Machine(nstates)` holds room for `nstates` transitions and a finishing
  state (`finish`, set with `set_finish(state)`).
- `add_transition(from_state, to_state, symbol)` appends a `Transition`;
  both states must lie in `0..nstates-1`, otherwise `ValueError`, and
  adding beyond `nstates` transitions raises `IndexError`.
- `transitions` is a tuple of frozen `Transition(from_state, to_state,
  symbol)` records. Epsilon transitions have `symbol` set to `None`
  (`renfa.machine.EPSILON`).

### `renfa.nfa`

- `NfaType` is `EPSILON` or `CHAR`; `Nfa` is a node with a `state`, a
  `type`, a character `c` and two edge slots.
- `epsilon_node(state)` makes an epsilon node; `char_node(state, end, c)`
  makes a node whose first edge leads to `end` on character `c`.
- `Nfa.edge(which)` returns edge 0 or 1 (other indices raise
  `ValueError`); `Nfa.nodes()` yields every reachable node once, cycles
  included.
- `dump(start)` returns the graph reachable through first edges as
  nested, JSON-like text.

### `renfa.intset`

`IntSet(size)` is a fixed-capacity bit set of integers in
`range(size * 64)`, supporting `add`, `in` and `len`; values outside that
range raise `IndexError`.

## What it does not do

There is no alternation, repetition, grouping or escaping: every
character of a pattern is taken literally. The package builds machines
but does not run them against input text, so it cannot match strings.