#!/usr/bin/env python3
# DFA minimization by table filling (Moore's algorithm)

from automata.dfa import DFA
from automata.errors import MalformedAutomatonError
from algorithms.pairs import PairSet, all_pairs

from typing import List
import logging

logger = logging.getLogger(__name__)

def distinguishable_pairs(dfa : DFA, max_rounds : int = None) -> PairSet:
    """
    marks every pair of state indices {p, q} that some word tells apart.

    base marking: {p, q} is marked iff exactly one of p, q is final.
    propagation: an unmarked {p, q} gets marked once, for some symbol a, the
    pair {T(p,a), T(q,a)} is a marked pair of two different states. rounds
    repeat until one marks nothing. the marked set only grows and holds at
    most n choose 2 pairs, so this always terminates; max_rounds only lowers
    that bound, and running out of rounds raises MalformedAutomatonError
    """
    n = len(dfa.states)
    marked = PairSet()

    for (p, q) in all_pairs(n):
        if dfa.final[p] != dfa.final[q] : marked.add(p, q)

    logger.debug("base marking: %d of %d pairs distinguishable", len(marked), n * (n - 1) // 2)

    rounds = 0
    changed = True
    while changed:
        if max_rounds is not None and rounds >= max_rounds:
            raise MalformedAutomatonError(f"no fixpoint after {max_rounds} refinement rounds")

        rounds += 1
        changed = False
        newly_marked = 0
        for (p, q) in all_pairs(n):
            if (p, q) in marked : continue

            for j in range(len(dfa.alphabet)):
                p2, q2 = dfa.delta[p][j], dfa.delta[q][j]
                # the same successor never separates p and q
                if p2 != q2 and (p2, q2) in marked:
                    marked.add(p, q)
                    newly_marked += 1
                    changed = True
                    break

        logger.debug("round %d: marked %d new pairs", rounds, newly_marked)

    return marked

def representatives(dfa : DFA, marked : PairSet) -> List[int]:
    """
    maps every state index to the index of its class representative, i.e. the
    smallest index that is not distinguishable from it. indices follow the
    sorted state labels, so the representative is the lexicographically
    smallest member of the class
    """
    n = len(dfa.states)
    representative = list(range(n))
    for i in range(n):
        if representative[i] != i : continue
        for j in range(i + 1, n):
            if (i, j) not in marked : representative[j] = i

    return representative

def equivalence_classes(dfa : DFA, max_rounds : int = None) -> List[List[str]]:
    """ the classes of language-equivalent states, ordered by representative, members sorted """
    representative = representatives(dfa, distinguishable_pairs(dfa, max_rounds))
    classes = {}
    for i, r in enumerate(representative):
        classes.setdefault(r, []).append(dfa.states[i])
    return [classes[r] for r in sorted(classes)]

def minimize(dfa : DFA, max_rounds : int = None, remove_unreachable : bool = False) -> DFA:
    """
    returns the quotient of dfa by language equivalence, which accepts the same
    language and has no two equivalent states. each class is replaced by its
    smallest state label. states unreachable from the initial state are kept
    (as their own classes) unless remove_unreachable is set, in which case the
    result is the unique minimal DFA of the language up to renaming
    """
    if remove_unreachable : dfa = dfa.remove_unreachable()

    representative = representatives(dfa, distinguishable_pairs(dfa, max_rounds))
    reps = sorted(set(representative))

    states = [dfa.states[r] for r in reps]
    # step 1 never leaves final and non-final states in one class
    acceptance_states = [dfa.states[r] for r in reps if dfa.final[r]]
    initial_state = dfa.states[representative[dfa.start]]

    transitions = []
    for r in reps:
        for j, char in enumerate(dfa.alphabet):
            transitions.append((dfa.states[r], char, dfa.states[representative[dfa.delta[r][j]]]))

    for i, r in enumerate(representative):
        if i != r : logger.debug("merging %s into %s", dfa.states[i], dfa.states[r])

    logger.info("minimized DFA from %d to %d states", len(dfa.states), len(states))

    return DFA(states, initial_state, acceptance_states, dfa.alphabet, transitions)
