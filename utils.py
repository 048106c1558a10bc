#!/usr/bin/env python3

from automata.dfa import DFA
from automata.pda import PDA
from automata.errors import AutomatonParseError
from typing import Set, Tuple, List, Iterator

import random

def generate_random_dfa(
    num_states : int = 10, # Number of states
    num_acceptance_states : int = 1, # Number of acceptance states
    custom_alphabet : Set[str] = {"a","b"}, # Can give a custom alphabet if desired
    num_symbols : int = None) -> DFA: # Number of symbols, used when custom_alphabet is None
    """ Generates a random complete DFA, seed the random module for reproducible automata """

    assert num_states > 0, "a DFA needs at least one state"
    assert 0 <= num_acceptance_states <= num_states, "Number of acceptance states must be between 0 and the number of states"

    states = ['q' + str(i) for i in range(num_states)]
    initial_state = random.choice(states)
    acceptance_states = random.sample(states, num_acceptance_states)

    # Create a random alphabet Sigma if alphabet not provided
    alphabet = sorted(custom_alphabet) if custom_alphabet is not None else [chr(i + 97) for i in range(num_symbols)]

    # exactly one transition per (state, symbol) keeps the DFA complete
    transitions = []
    for state in states:
        for char in alphabet:
            transitions.append((state, char, random.choice(states)))

    return DFA(states, initial_state, acceptance_states, alphabet, transitions)

def _numbered_lines(content : str) -> Iterator[Tuple[int, str]]:
    """ (line number, stripped line) for every line that is not a # comment """
    for number, line in enumerate(content.splitlines(), start=1):
        line = line.strip()
        if line.startswith("#") : continue
        yield number, line

def _read_header(lines : Iterator[Tuple[int, str]], names : List[str]) -> List[Tuple[int, List[str]]]:
    """ the next len(names) lines, split into tokens. header lines are positional, so blank ones count """
    header = []
    for name in names:
        try:
            number, line = next(lines)
        except StopIteration:
            raise AutomatonParseError(f"missing {name} line") from None
        header.append((number, line.split()))
    return header

def _single_token(number : int, tokens : List[str], name : str) -> str:
    if len(tokens) != 1:
        raise AutomatonParseError(f"expected exactly one {name}, got {len(tokens)}", number)
    return tokens[0]

def _unique_tokens(number : int, tokens : List[str], name : str) -> None:
    seen = set()
    for token in tokens:
        if token in seen:
            raise AutomatonParseError(f"{name} {token!r} listed more than once", number)
        seen.add(token)

def read_dfa_string(content : str) -> DFA:
    """
    parses the line oriented DFA format:

        <number of states>
        <state> <state> ...
        <symbol> <symbol> ...
        <start state>
        <final state> ...
        <from> <symbol> <to>      (one line per transition)
    """
    lines = _numbered_lines(content)
    header = _read_header(lines, ["number of states", "states", "alphabet", "start state", "final states"])
    (count_line, count), (states_line, states), (alphabet_line, alphabet), (start_line, start), (_, acceptance_states) = header

    try:
        nr_of_states = int(_single_token(count_line, count, "number of states"))
    except ValueError:
        raise AutomatonParseError(f"number of states is not an integer: {count[0]!r}", count_line) from None

    if nr_of_states != len(states):
        raise AutomatonParseError(f"declared {nr_of_states} states but listed {len(states)}", count_line)

    _unique_tokens(states_line, states, "state")
    _unique_tokens(alphabet_line, alphabet, "symbol")

    initial_state = _single_token(start_line, start, "start state")

    transitions = []
    for number, line in lines:
        if not line : continue
        parts = line.split()
        if len(parts) != 3:
            raise AutomatonParseError(f"transition needs <from> <symbol> <to>, got {line!r}", number)
        transitions.append(tuple(parts))

    return DFA(states, initial_state, acceptance_states, alphabet, transitions)

def read_dfa_file(filename : str) -> DFA:
    """ reads a DFA file, see read_dfa_string for the format """
    with open(filename, 'r') as file:
        return read_dfa_string(file.read())

def read_pda_string(content : str) -> PDA:
    """
    parses the line oriented PDA format:

        <state> <state> ...
        <symbol> <symbol> ...
        <stack symbol> <stack symbol> ...
        <start state>
        <initial stack symbol>
        <final state> ...
        <from> <symbol> <stack top> <push> <to>     (one line per transition, push E pushes nothing)
    """
    lines = _numbered_lines(content)
    header = _read_header(lines, ["states", "alphabet", "stack alphabet", "start state", "initial stack symbol", "final states"])
    (_, states), (_, alphabet), (_, stack_alphabet), (start_line, start), (stack_line, stack_start), (_, acceptance_states) = header

    initial_state = _single_token(start_line, start, "start state")
    initial_stack_symbol = _single_token(stack_line, stack_start, "initial stack symbol")

    transitions = []
    for number, line in lines:
        if not line : continue
        parts = line.split()
        if len(parts) != 5:
            raise AutomatonParseError(f"transition needs <from> <symbol> <stack top> <push> <to>, got {line!r}", number)
        transitions.append(tuple(parts))

    return PDA(states, initial_state, acceptance_states, alphabet, stack_alphabet, initial_stack_symbol, transitions)

def read_pda_file(filename : str) -> PDA:
    """ reads a PDA file, see read_pda_string for the format """
    with open(filename, 'r') as file:
        return read_pda_string(file.read())
