#!/usr/bin/env python3

"""
error types shared by the automata models and the algorithms over them
"""
class AutomatonError(Exception):
    """ base class for every error raised by this library """

class MalformedAutomatonError(AutomatonError):
    """
    the automaton description breaks the complete-DFA contract: a missing or
    duplicated transition, or a reference to an undeclared state or symbol
    """

class AlphabetMismatchError(AutomatonError):
    """ two automata were compared over different alphabets """
    def __init__(self, alphabet_a, alphabet_b):
        self.alphabet_a = sorted(alphabet_a)
        self.alphabet_b = sorted(alphabet_b)
        AutomatonError.__init__(self, f"alphabets differ: {self.alphabet_a} vs {self.alphabet_b}")

class AutomatonParseError(AutomatonError):
    """ the text form of an automaton could not be parsed """
    def __init__(self, message : str, line : int = None):
        self.line = line
        if line is not None : message = f"line {line}: {message}"
        AutomatonError.__init__(self, message)
