#!/usr/bin/env python3

from automata.errors import MalformedAutomatonError
from typing import Set, Tuple, List, Dict, Iterable
import logging

logger = logging.getLogger(__name__)

"""
a pushdown automata, (Q, Sigma, Gamma, T, q0, Z0, F)
where T : Q x Sigma x Gamma -> P(Q x Gamma*)

every move reads one input symbol, pops the top of the stack and pushes a
string of stack symbols in its place (leftmost symbol ends up on top).
the push string EMPTY_PUSH pushes nothing. there are no epsilon moves, so a
run never takes more steps than the word is long.
"""
EMPTY_PUSH = "E"

class PDA(object):
    def __init__(
        self,
        states : Iterable[str],
        initial_state : str,
        acceptance_states : Iterable[str],
        alphabet : Iterable[str],
        stack_alphabet : Iterable[str],
        initial_stack_symbol : str,
        transitions : Iterable[Tuple[str, str, str, str, str]] = ()):

        self.states = sorted(set(states))
        self.initial_state = initial_state
        self.acceptance_states = sorted(set(acceptance_states))
        self.alphabet = sorted(set(alphabet))
        self.stack_alphabet = sorted(set(stack_alphabet))
        self.initial_stack_symbol = initial_stack_symbol
        self.transitions = sorted(set(tuple(t) for t in transitions))

        if EMPTY_PUSH in self.stack_alphabet:
            raise MalformedAutomatonError(f"{EMPTY_PUSH!r} is reserved for the empty push and cannot be a stack symbol")
        if self.initial_state not in self.states:
            raise MalformedAutomatonError(f"initial state {self.initial_state!r} not in states")
        if self.initial_stack_symbol not in self.stack_alphabet:
            raise MalformedAutomatonError(f"initial stack symbol {self.initial_stack_symbol!r} not in stack alphabet")
        for state in self.acceptance_states:
            if state not in self.states:
                raise MalformedAutomatonError(f"acceptance state {state!r} not in states")

        # (state, input symbol, stack top) -> [(next state, symbols to push, top last)]
        self.moves : Dict[Tuple[str, str, str], List[Tuple[str, Tuple[str, ...]]]] = {}
        for (sA, i, top, push, sB) in self.transitions:
            if sA not in self.states or sB not in self.states:
                raise MalformedAutomatonError(f"transition {sA} --{i}--> {sB} uses an undeclared state")
            if i not in self.alphabet:
                raise MalformedAutomatonError(f"transition {sA} --{i}--> {sB} uses a symbol not in the alphabet")
            if top not in self.stack_alphabet:
                raise MalformedAutomatonError(f"transition {sA} --{i}--> {sB} uses stack symbol {top!r} not in the stack alphabet")
            pushed = () if push == EMPTY_PUSH else self.split_push(push)
            self.moves.setdefault((sA, i, top), []).append((sB, tuple(reversed(pushed))))

    def split_push(self, push : str) -> Tuple[str, ...]:
        """
        splits a push string into stack symbols, taking the longest declared
        symbol at each position, so with stack symbols Z0 and A "AZ0" is (A, Z0)
        """
        by_length = sorted((symbol for symbol in self.stack_alphabet if symbol), key=len, reverse=True)
        symbols, position = [], 0
        while position < len(push):
            for symbol in by_length:
                if push.startswith(symbol, position):
                    symbols.append(symbol)
                    position += len(symbol)
                    break
            else:
                raise MalformedAutomatonError(f"push string {push!r} uses stack symbol {push[position]!r} not in the stack alphabet")
        return tuple(symbols)

    def accepts(self, word : Iterable[str]) -> bool:
        """
        true if some run reads the whole word and ends in an acceptance state
        with only the initial stack symbol left on the stack
        """
        configurations : Set[Tuple[str, Tuple[str, ...]]] = {(self.initial_state, (self.initial_stack_symbol,))}

        for char in word:
            next_configurations = set()
            for (state, stack) in configurations:
                if not stack : continue
                for (next_state, pushed) in self.moves.get((state, char, stack[-1]), ()):
                    next_configurations.add((next_state, stack[:-1] + pushed))

            logger.debug("read %s: %s", char, sorted(next_configurations))
            if not next_configurations : return False
            configurations = next_configurations

        return any(state in self.acceptance_states and stack == (self.initial_stack_symbol,)
                   for (state, stack) in configurations)

    def __str__(self) -> str:
        lines = [
            "The pushdown automata:",
            f"Number of states: {len(self.states)}",
            f"States: {self.states}",
            f"Alphabet: {self.alphabet}",
            f"Stack alphabet: {self.stack_alphabet}",
            f"Start State: {self.initial_state}",
            f"Stack start: {self.initial_stack_symbol}",
            f"Final States: {self.acceptance_states}",
            "Transitions:",
        ]
        for (sA, i, top, push, sB) in self.transitions:
            lines.append(f"{sA} --{i}, {top}/{push}--> {sB}")
        return "\n".join(lines)
