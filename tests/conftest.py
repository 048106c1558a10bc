"""
Shared automata for the tests
"""

import pytest

from automata.dfa import DFA


# ===== "contains at least one a" =====

@pytest.fixture
def contains_a():
    """Minimal 2-state DFA for 'contains at least one a'"""
    transitions = [
        ('p0', 'a', 'p1'),
        ('p0', 'b', 'p0'),
        ('p1', 'a', 'p1'),
        ('p1', 'b', 'p1'),
    ]
    return DFA(["p0", "p1"], "p0", ["p1"], ["a", "b"], transitions)


@pytest.fixture
def contains_a_redundant():
    """4-state DFA for the same language, s0~s1 and s2~s3"""
    transitions = [
        ('s0', 'a', 's2'),
        ('s0', 'b', 's1'),
        ('s1', 'a', 's3'),
        ('s1', 'b', 's0'),
        ('s2', 'a', 's3'),
        ('s2', 'b', 's2'),
        ('s3', 'a', 's2'),
        ('s3', 'b', 's3'),
    ]
    return DFA(["s0", "s1", "s2", "s3"], "s0", ["s2", "s3"], ["a", "b"], transitions)


# ===== "ends with ab" =====

@pytest.fixture
def ends_with_ab():
    """5-state DFA for 'ends with ab', q3 duplicates q0 and q4 duplicates q1"""
    transitions = [
        ('q0', 'a', 'q1'),
        ('q0', 'b', 'q3'),
        ('q1', 'a', 'q4'),
        ('q1', 'b', 'q2'),
        ('q2', 'a', 'q1'),
        ('q2', 'b', 'q0'),
        ('q3', 'a', 'q4'),
        ('q3', 'b', 'q0'),
        ('q4', 'a', 'q1'),
        ('q4', 'b', 'q2'),
    ]
    return DFA(["q0", "q1", "q2", "q3", "q4"], "q0", ["q2"], ["a", "b"], transitions)


@pytest.fixture
def ends_with_ab_text():
    return """5
q0 q1 q2 q3 q4
a b
q0
q2
q0 a q1
q0 b q3
q1 a q4
q1 b q2
q2 a q1
q2 b q0
q3 a q4
q3 b q0
q4 a q1
q4 b q2
"""
