import itertools
import random

import pytest

from automata.dfa import DFA
from automata.errors import MalformedAutomatonError
from algorithms.minimization import minimize, equivalence_classes, distinguishable_pairs
from algorithms.equivalence import are_equivalent
from utils import generate_random_dfa

# c0 -a-> c1 -a-> c2 -a-> c3 (final, loops): accepts a^n for n >= 3, already minimal,
# and the pair {c0, c1} is only marked in the second round
chain_transitions = [
    ('c0', 'a', 'c1'),
    ('c1', 'a', 'c2'),
    ('c2', 'a', 'c3'),
    ('c3', 'a', 'c3'),
]
chain = DFA(["c0", "c1", "c2", "c3"], "c0", ["c3"], ["a"], chain_transitions)

def words(alphabet, max_length):
    for length in range(max_length + 1):
        for word in itertools.product(alphabet, repeat=length):
            yield word

def test_all_final_self_loops_collapse_to_one_state():
    loops = DFA(["q0", "q1"], "q0", ["q0", "q1"], ["a", "b"],
                [('q0', 'a', 'q0'), ('q0', 'b', 'q0'), ('q1', 'a', 'q1'), ('q1', 'b', 'q1')])
    minimal = minimize(loops)
    assert minimal.states == ["q0"]
    assert minimal.acceptance_states == ["q0"]
    assert minimal.sorted_transitions() == [('q0', 'a', 'q0'), ('q0', 'b', 'q0')]

def test_quotient_of_redundant_dfa(contains_a_redundant):
    minimal = minimize(contains_a_redundant)
    assert minimal.states == ["s0", "s2"]
    assert minimal.initial_state == "s0"
    assert minimal.acceptance_states == ["s2"]
    assert minimal.sorted_transitions() == [
        ('s0', 'a', 's2'),
        ('s0', 'b', 's0'),
        ('s2', 'a', 's2'),
        ('s2', 'b', 's2'),
    ]

def test_equivalence_classes(ends_with_ab):
    assert equivalence_classes(ends_with_ab) == [["q0", "q3"], ["q1", "q4"], ["q2"]]

def test_distinguishable_pairs(ends_with_ab):
    marked = distinguishable_pairs(ends_with_ab)
    assert len(marked) == 8
    assert (0, 3) not in marked
    assert (4, 1) not in marked
    assert (2, 0) in marked and (0, 2) in marked

def test_minimize_ends_with_ab(ends_with_ab):
    minimal = minimize(ends_with_ab)
    expected = DFA(["q0", "q1", "q2"], "q0", ["q2"], ["a", "b"], [
        ('q0', 'a', 'q1'),
        ('q0', 'b', 'q0'),
        ('q1', 'a', 'q1'),
        ('q1', 'b', 'q2'),
        ('q2', 'a', 'q1'),
        ('q2', 'b', 'q0'),
    ])
    assert minimal == expected

def test_start_state_maps_to_its_representative(ends_with_ab):
    started_late = DFA(ends_with_ab.states, "q3", ends_with_ab.acceptance_states,
                       ends_with_ab.alphabet, ends_with_ab.sorted_transitions())
    assert minimize(started_late).initial_state == "q0"

def test_minimal_dfa_is_unchanged():
    assert minimize(chain) == chain
    assert len(minimize(chain).states) == 4

def test_idempotence(ends_with_ab, contains_a_redundant):
    for dfa in [ends_with_ab, contains_a_redundant, chain]:
        once = minimize(dfa)
        twice = minimize(once)
        assert twice == once
        assert twice.is_isomorphic(once)

def test_max_rounds_caps_the_fixpoint():
    with pytest.raises(MalformedAutomatonError):
        minimize(chain, max_rounds=2)
    assert minimize(chain, max_rounds=3) == chain

def test_no_final_states():
    dead = DFA(["d0", "d1"], "d0", [], ["a"], [('d0', 'a', 'd1'), ('d1', 'a', 'd0')])
    minimal = minimize(dead)
    assert minimal.states == ["d0"]
    assert minimal.acceptance_states == []

def test_empty_alphabet():
    lone = DFA(["x", "y"], "x", ["x", "y"], [], [])
    assert minimize(lone).states == ["x"]

def test_unreachable_states_kept_unless_pruned(contains_a):
    extra = DFA(["p0", "p1", "p9"], "p0", ["p1"], ["a", "b"],
                contains_a.sorted_transitions() + [('p9', 'a', 'p9'), ('p9', 'b', 'p9')])
    # p9 is a non-final sink, distinguishable from p1 but equivalent to nothing reachable
    assert minimize(extra).states == ["p0", "p1", "p9"]
    assert minimize(extra, remove_unreachable=True) == contains_a

def test_language_preserved_on_random_dfas():
    random.seed(7)
    for _ in range(25):
        dfa = generate_random_dfa(num_states=6, num_acceptance_states=2)
        minimal = minimize(dfa)
        assert len(minimal.states) <= len(dfa.states)
        for word in words(dfa.alphabet, 6):
            assert dfa.accepts(word) == minimal.accepts(word)
        assert are_equivalent(dfa, minimal)
        assert minimize(minimal) == minimal

def test_no_two_states_equivalent_after_minimization():
    random.seed(11)
    for _ in range(10):
        minimal = minimize(generate_random_dfa(num_states=7, num_acceptance_states=3))
        n = len(minimal.states)
        assert len(distinguishable_pairs(minimal)) == n * (n - 1) // 2
