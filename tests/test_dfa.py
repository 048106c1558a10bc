import pytest

from automata.dfa import DFA
from automata.errors import MalformedAutomatonError

parity_transitions = [
    ('even', '0', 'even'),
    ('even', '1', 'odd'),
    ('odd', '0', 'odd'),
    ('odd', '1', 'even'),
]

# accepts binary strings with an odd number of 1s
parity = DFA(["even", "odd"], "even", ["odd"], ["0", "1"], parity_transitions)

def test_transition_of_and_is_final():
    assert parity.transition_of("even", "1") == "odd"
    assert parity.transition_of("odd", "1") == "even"
    assert parity.transition_of("odd", "0") == "odd"
    assert parity.is_final("odd")
    assert not parity.is_final("even")

def test_accepts():
    assert parity.accepts("1")
    assert parity.accepts("0100")
    assert not parity.accepts("")
    assert not parity.accepts("11")
    assert parity.accepts(["1", "1", "1"])

def test_unknown_state_or_symbol_is_rejected():
    with pytest.raises(MalformedAutomatonError):
        parity.transition_of("three", "0")
    with pytest.raises(MalformedAutomatonError):
        parity.transition_of("even", "2")
    with pytest.raises(MalformedAutomatonError):
        parity.accepts("012")
    with pytest.raises(MalformedAutomatonError):
        parity.is_final("three")

def test_missing_transition_fails_at_construction():
    with pytest.raises(MalformedAutomatonError) as e:
        DFA(["even", "odd"], "even", ["odd"], ["0", "1"], parity_transitions[:-1])
    assert "(odd, 1)" in str(e.value)
    assert "not total" in str(e.value)

def test_nondeterministic_transition_fails_at_construction():
    with pytest.raises(MalformedAutomatonError) as e:
        DFA(["even", "odd"], "even", ["odd"], ["0", "1"], parity_transitions + [('odd', '1', 'odd')])
    assert "not deterministic" in str(e.value)

def test_undeclared_references_fail_at_construction():
    with pytest.raises(MalformedAutomatonError):
        DFA(["even", "odd"], "start", ["odd"], ["0", "1"], parity_transitions)
    with pytest.raises(MalformedAutomatonError):
        DFA(["even", "odd"], "even", ["three"], ["0", "1"], parity_transitions)
    with pytest.raises(MalformedAutomatonError):
        DFA(["even", "odd"], "even", ["odd"], ["0", "1"], parity_transitions + [('odd', '2', 'odd')])
    with pytest.raises(MalformedAutomatonError):
        DFA(["even", "odd"], "even", ["odd"], ["0", "1"], parity_transitions + [('odd', '0', 'three')])

def test_duplicate_transitions_are_tolerated():
    dfa = DFA(["even", "odd"], "even", ["odd"], ["0", "1"], parity_transitions + parity_transitions[:2])
    assert dfa == parity

def test_equality_ignores_insertion_order():
    shuffled = DFA(["odd", "even"], "even", {"odd"}, ["1", "0"], list(reversed(parity_transitions)))
    assert shuffled == parity
    assert hash(shuffled) == hash(parity)
    assert str(shuffled) == str(parity)
    assert shuffled.states == ["even", "odd"]
    assert shuffled.alphabet == ["0", "1"]

def test_equality_sees_different_acceptance():
    flipped = DFA(["even", "odd"], "even", ["even"], ["0", "1"], parity_transitions)
    assert flipped != parity

def test_arena_indices_follow_sorted_labels():
    assert parity.state_index == {"even": 0, "odd": 1}
    assert parity.symbol_index == {"0": 0, "1": 1}
    assert parity.delta == ((0, 1), (1, 0))
    assert parity.final == (False, True)
    assert parity.start == 0

def test_sorted_transitions_and_str():
    assert parity.sorted_transitions() == parity_transitions
    assert str(parity).splitlines() == [
        "The deterministic finite automata:",
        "Number of states: 2",
        "States: ['even', 'odd']",
        "Alphabet: ['0', '1']",
        "Start State: even",
        "Final States: ['odd']",
        "Transitions:",
        "even --0--> even",
        "even --1--> odd",
        "odd --0--> odd",
        "odd --1--> even",
    ]

def test_remove_unreachable(contains_a):
    extra = DFA(["p0", "p1", "p2"], "p0", ["p1", "p2"], ["a", "b"],
                contains_a.sorted_transitions() + [('p2', 'a', 'p1'), ('p2', 'b', 'p2')])
    assert extra.reachable_states() == ["p0", "p1"]
    assert extra.remove_unreachable() == contains_a

def test_reachable_from():
    assert parity.reachable_from("odd") == {"even", "odd"}

def test_is_isomorphic(contains_a):
    renamed = DFA(["y", "x"], "y", ["x"], ["a", "b"],
                  [('y', 'a', 'x'), ('y', 'b', 'y'), ('x', 'a', 'x'), ('x', 'b', 'x')])
    assert renamed != contains_a
    assert renamed.is_isomorphic(contains_a)
    assert contains_a.is_isomorphic(renamed)
    assert not parity.is_isomorphic(contains_a)

    swapped = DFA(["y", "x"], "y", ["y"], ["a", "b"],
                  [('y', 'a', 'x'), ('y', 'b', 'y'), ('x', 'a', 'x'), ('x', 'b', 'x')])
    assert not swapped.is_isomorphic(contains_a)

def test_dfa_string_round_trip(tmp_path):
    from utils import read_dfa_file

    path = tmp_path / "parity.dfa"
    parity.to_dfa_file(str(path))
    assert read_dfa_file(str(path)) == parity

def test_to_dot():
    dot = parity.to_dot().to_string()
    assert "doublecircle" in dot
    assert "green" in dot
    assert "even" in dot and "odd" in dot

def test_to_dot_merges_parallel_edges():
    loop = DFA(["q0"], "q0", ["q0"], ["a", "b"], [('q0', 'a', 'q0'), ('q0', 'b', 'q0')])
    dot = loop.to_dot()
    assert len(dot.get_edges()) == 1
    assert "a,b" in dot.to_string()
