#!/usr/bin/env python3
from __future__ import annotations

from automata.finite_automata import Finite_Automata
from automata.errors import MalformedAutomatonError
from collections import deque
from typing import Tuple, List, Dict, Iterable

"""
follows from the formal definition of a complete DFA
which is a 5-tuple, (Q, Sigma, T, q0, F)
where T : Q x Sigma -> Q is a total function

states and symbols are also numbered in their sorted order, and the
transition function is stored as a table of those numbers:
    delta[state_index][symbol_index] = target_index
the algorithms work over this table, so they never have to deal with a
missing transition
"""
class DFA(Finite_Automata):
    def __init__(
        self,
        states : Iterable[str],
        initial_state : str,
        acceptance_states : Iterable[str],
        alphabet : Iterable[str],
        transitions : Iterable[Tuple[str, str, str]] = ()):

        Finite_Automata.__init__(self, states, initial_state, acceptance_states, alphabet, transitions)

        self.construct_transition_function_hashmap()
        self.construct_transition_table()
        self.construct_reachability_hashmap()

    def construct_transition_table(self) -> None:
        """ numbers states and symbols, and checks T is total and deterministic while filling delta """
        self.state_index = {state: i for i, state in enumerate(self.states)}
        self.symbol_index = {char: i for i, char in enumerate(self.alphabet)}

        missing, table = [], []
        for state in self.states:
            row = []
            for char in self.alphabet:
                targets = self.transition_function(state, char)
                if len(targets) > 1:
                    raise MalformedAutomatonError(
                        f"transition function is not deterministic: {state} --{char}--> {targets}")
                if not targets:
                    missing.append((state, char))
                    row.append(None)
                else:
                    row.append(self.state_index[targets[0]])
            table.append(tuple(row))

        if missing:
            listing = ", ".join(f"({state}, {char})" for (state, char) in missing)
            raise MalformedAutomatonError(f"transition function is not total, missing: {listing}")

        self.delta = tuple(table)
        acceptance = set(self.acceptance_states)
        self.final = tuple(state in acceptance for state in self.states)
        self.start = self.state_index[self.initial_state]

    def transition_of(self, state : str, char : str) -> str:
        """ the single state T(state, char) """
        if state not in self.state_index:
            raise MalformedAutomatonError(f"transition_of: state {state!r} not in DFA")
        if char not in self.symbol_index:
            raise MalformedAutomatonError(f"transition_of: symbol {char!r} not in alphabet")
        return self.states[self.delta[self.state_index[state]][self.symbol_index[char]]]

    def is_final(self, state : str) -> bool:
        if state not in self.state_index:
            raise MalformedAutomatonError(f"is_final: state {state!r} not in DFA")
        return self.final[self.state_index[state]]

    def accepts(self, word : Iterable[str]) -> bool:
        """ runs the DFA on word (any iterable of symbols, so a str works for one-character symbols) """
        current_state = self.initial_state
        for char in word:
            current_state = self.transition_of(current_state, char)
        return self.is_final(current_state)

    def sorted_transitions(self) -> List[Tuple[str, str, str]]:
        """ every (state, symbol, target) triple, in state order then alphabet order """
        return [(state, char, self.states[self.delta[i][j]])
                for i, state in enumerate(self.states)
                for j, char in enumerate(self.alphabet)]

    def reachable_states(self) -> List[str]:
        """ states reachable from the initial state, sorted """
        return sorted(self.reachable_from(self.initial_state))

    def remove_unreachable(self) -> DFA:
        """ returns a DFA with the same language that only keeps the states reachable from the initial state """
        reachable = set(self.reachable_states())
        acceptance_states = [state for state in self.acceptance_states if state in reachable]
        transitions = [t for t in self.sorted_transitions() if t[0] in reachable]
        return DFA(reachable, self.initial_state, acceptance_states, self.alphabet, transitions)

    def is_isomorphic(self, other : DFA) -> bool:
        """
        true if other is this DFA up to renaming of states.

        the renaming is built by walking both automata in lockstep from their
        initial states, so only the reachable parts are compared; beyond that
        the two automata must have the same number of states
        """
        if self.alphabet != other.alphabet or len(self.states) != len(other.states) : return False

        mapping : Dict[int, int] = {self.start: other.start}
        used = {other.start}
        queue = deque([self.start])
        while queue:
            p = queue.popleft()
            q = mapping[p]
            if self.final[p] != other.final[q] : return False
            for j in range(len(self.alphabet)):
                p2, q2 = self.delta[p][j], other.delta[q][j]
                if p2 in mapping:
                    if mapping[p2] != q2 : return False
                elif q2 in used:
                    return False
                else:
                    mapping[p2] = q2
                    used.add(q2)
                    queue.append(p2)

        return True

    def to_dfa_string(self) -> str:
        """ the line oriented text form read back by utils.read_dfa_string """
        lines = [
            str(len(self.states)),
            " ".join(self.states),
            " ".join(self.alphabet),
            self.initial_state,
            " ".join(self.acceptance_states),
        ]
        for (sA, i, sB) in self.sorted_transitions():
            lines.append(f"{sA} {i} {sB}")
        return "\n".join(lines) + "\n"

    def to_dfa_file(self, path : str = "out.dfa") -> None:
        with open(path, 'w') as file:
            file.write(self.to_dfa_string())

    def _canonical(self):
        return (tuple(self.states), tuple(self.alphabet), self.initial_state,
                tuple(self.acceptance_states), self.delta)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DFA) : return NotImplemented
        return self._canonical() == other._canonical()

    def __hash__(self) -> int:
        return hash(self._canonical())

    def __repr__(self) -> str:
        return f"DFA(states={self.states!r}, initial_state={self.initial_state!r}, acceptance_states={self.acceptance_states!r}, alphabet={self.alphabet!r})"

    def __str__(self) -> str:
        lines = [
            "The deterministic finite automata:",
            f"Number of states: {len(self.states)}",
            f"States: {self.states}",
            f"Alphabet: {self.alphabet}",
            f"Start State: {self.initial_state}",
            f"Final States: {self.acceptance_states}",
            "Transitions:",
        ]
        for (sA, i, sB) in self.sorted_transitions():
            lines.append(f"{sA} --{i}--> {sB}")
        return "\n".join(lines)
