#!/usr/bin/env python3
# Language equivalence of DFAs via on-the-fly construction of their product

from automata.dfa import DFA
from automata.errors import AlphabetMismatchError

from z3 import *
from collections import deque
from typing import Union, List
import logging

logger = logging.getLogger(__name__)

def _same_alphabet(dfa_a : DFA, dfa_b : DFA, strict : bool) -> bool:
    """ False (or AlphabetMismatchError when strict) if the automata are over different alphabets """
    if dfa_a.alphabet == dfa_b.alphabet : return True
    if strict : raise AlphabetMismatchError(dfa_a.alphabet, dfa_b.alphabet)
    logger.debug("alphabets differ: %s vs %s", dfa_a.alphabet, dfa_b.alphabet)
    return False

def are_equivalent(dfa_a : DFA, dfa_b : DFA, strict : bool = False) -> bool:
    """
    decides whether two complete DFAs accept the same language.

    explores the product states (p, q) reachable from (start_a, start_b) by
    reading the same symbol in both automata. the automata are equivalent iff
    no reachable pair has one final and one non-final state. states that are
    unreachable from the start never enter the search.

    automata over different alphabets are reported as not equivalent, or
    raise AlphabetMismatchError when strict is set
    """
    if not _same_alphabet(dfa_a, dfa_b, strict) : return False

    symbols = range(len(dfa_a.alphabet))
    visited = set()
    frontier = deque([(dfa_a.start, dfa_b.start)])

    while frontier:
        (p, q) = frontier.popleft()

        if dfa_a.final[p] != dfa_b.final[q]:
            logger.debug("finality differs at (%s, %s)", dfa_a.states[p], dfa_b.states[q])
            return False

        # already checked and expanded
        if (p, q) in visited : continue
        visited.add((p, q))

        for j in symbols:
            frontier.append((dfa_a.delta[p][j], dfa_b.delta[q][j]))

    logger.debug("equivalent, %d product states explored", len(visited))
    return True

def distinguishing_word(dfa_a : DFA, dfa_b : DFA) -> Union[List[str], None]:
    """
    either returns a shortest word accepted by exactly one of the automata, or
    returns None, which indicates the automata are equivalent.

    breadth first over the product, remembering for each pair the pair and
    symbol it was first reached from, then walking back from the first
    mismatching pair. always raises AlphabetMismatchError on different alphabets
    """
    _same_alphabet(dfa_a, dfa_b, strict=True)

    initial_state = (dfa_a.start, dfa_b.start)
    previous = {initial_state: None}
    queue = deque([initial_state])

    while queue:
        current_state = queue.popleft()
        (p, q) = current_state

        if dfa_a.final[p] != dfa_b.final[q]:
            word = []
            while previous[current_state] is not None:
                current_state, j = previous[current_state]
                word.append(dfa_a.alphabet[j])
            return word[::-1]

        for j in range(len(dfa_a.alphabet)):
            new_state = (dfa_a.delta[p][j], dfa_b.delta[q][j])
            if new_state not in previous:
                previous[new_state] = (current_state, j)
                queue.append(new_state)

    return None

def _z3_step(dfa : DFA, state, char, next_state):
    """ constraint: next_state == T(state, char) """
    return And([Implies(And(state == p, char == j), next_state == dfa.delta[p][j])
                for p in range(len(dfa.states))
                for j in range(len(dfa.alphabet))])

def _z3_is_final(dfa : DFA, state):
    finals = [state == p for p in range(len(dfa.states)) if dfa.final[p]]
    if finals == [] : return BoolVal(False)
    return Or(finals)

def z3_distinguishing_word(dfa_a : DFA, dfa_b : DFA) -> Union[List[str], None]:
    """
    the same question as distinguishing_word, answered by z3 instead of a search.

    the run of both automata on a symbolic word of k symbols is unrolled into
    integer constraints, and the solver is asked for the smallest length at
    which finality differs. a shortest counterexample visits each product pair
    at most once, so k = |A| * |B| - 1 loses nothing
    """
    _same_alphabet(dfa_a, dfa_b, strict=True)

    k = len(dfa_a.states) * len(dfa_b.states) - 1 if dfa_a.alphabet else 0
    states_a = [Int("a" + str(i)) for i in range(k + 1)]
    states_b = [Int("b" + str(i)) for i in range(k + 1)]
    chars = [Int("c" + str(i)) for i in range(k)]
    length = Int("length")

    solver = Optimize()
    solver.add(states_a[0] == dfa_a.start, states_b[0] == dfa_b.start)
    for i in range(k):
        solver.add(chars[i] >= 0, chars[i] < len(dfa_a.alphabet))
        solver.add(_z3_step(dfa_a, states_a[i], chars[i], states_a[i + 1]))
        solver.add(_z3_step(dfa_b, states_b[i], chars[i], states_b[i + 1]))

    mismatch = [Xor(_z3_is_final(dfa_a, states_a[i]), _z3_is_final(dfa_b, states_b[i])) for i in range(k + 1)]
    solver.add(length >= 0, length <= k)
    solver.add(Or([And(length == i, mismatch[i]) for i in range(k + 1)]))
    solver.minimize(length)

    if solver.check() == sat:
        m = solver.model()
        n = m.eval(length, model_completion=True).as_long()
        return [dfa_a.alphabet[m.eval(chars[i], model_completion=True).as_long()] for i in range(n)]

    return None

def z3_are_equivalent(dfa_a : DFA, dfa_b : DFA, strict : bool = False) -> bool:
    """ are_equivalent, decided by z3_distinguishing_word """
    if not _same_alphabet(dfa_a, dfa_b, strict) : return False
    return z3_distinguishing_word(dfa_a, dfa_b) is None
