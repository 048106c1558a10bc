#!/usr/bin/env python3

from pydot import Dot, Edge, Node
from collections import deque
from typing import Set, Tuple, List, Dict, Iterable

from automata.errors import MalformedAutomatonError

"""
PARENT CLASS FOR DFA

follows from the classical definition of a finite automata
which is a 5-tuple, (Q, Sigma, T, q0, F)
where T : Q x Sigma -> P(Q) (where P(Q) is the powerset of Q)

states, alphabet and acceptance states are kept sorted, so every listing
produced from this class comes out in the same order no matter how the
automata was put together
"""
class Finite_Automata(object):
    def __init__(
        self,
        states : Iterable[str],
        initial_state : str, # this is really just a state label, not necessarily a state object
        acceptance_states : Iterable[str],
        alphabet : Iterable[str],
        transitions : Iterable[Tuple[str, str, str]] = ()):

        self.states = sorted(set(states))
        self.initial_state = initial_state
        self.alphabet = sorted(set(alphabet))
        self.acceptance_states = sorted(set(acceptance_states))
        self.transitions = sorted(set(tuple(t) for t in transitions))

        declared_states, declared_alphabet = set(self.states), set(self.alphabet)

        if self.initial_state not in declared_states:
            raise MalformedAutomatonError(f"initial state {self.initial_state!r} not in states")

        for state in self.acceptance_states:
            if state not in declared_states:
                raise MalformedAutomatonError(f"acceptance state {state!r} not in states")

        for (sA, i, sB) in self.transitions:
            if sA not in declared_states or sB not in declared_states:
                raise MalformedAutomatonError(f"transition {sA} --{i}--> {sB} uses an undeclared state")
            if i not in declared_alphabet:
                raise MalformedAutomatonError(f"transition {sA} --{i}--> {sB} uses a symbol not in the alphabet")

    def construct_transition_function_hashmap(self) -> None:
        """ constructs a hashmap with all the transition relations, e.g. T : State -> Alphabet x State """
        self.transition_function_hashmap = {}

        for state in self.states:
            self.transition_function_hashmap[state] = {}
            for char in self.alphabet:
                self.transition_function_hashmap[state][char] = set()

        for (sA, i, sB) in self.transitions:
            self.transition_function_hashmap[sA][i].add(sB)

    def construct_reachability_hashmap(self) -> None:
        """
        constructs a hashmap with all reachability relations,
        e.g. what states are immediately reachable from the current state
        """
        self.reachability_hashmap = {}

        for state in self.states:
            self.reachability_hashmap[state] = set()

        for (sA, i, sB) in self.transitions:
            self.reachability_hashmap[sA].add((sB, i))

    def transition_function(self, state : str, char : str) -> List[str]:
        """ finite automata transition relation, e.g. state, char -> sorted list of states """
        if not hasattr(self, "transition_function_hashmap") : self.construct_transition_function_hashmap()
        if state not in self.transition_function_hashmap:
            raise MalformedAutomatonError(f"transition_function: state {state!r} not in automata")
        if char not in self.transition_function_hashmap[state]:
            raise MalformedAutomatonError(f"transition_function: symbol {char!r} not in alphabet")
        return sorted(self.transition_function_hashmap[state][char])

    def to_dot(self) -> Dot:
        """ builds a pydot graph of this finite automata, parallel edges share one label """
        graph = Dot(graph_type='digraph', rankdir='LR')
        nodes = {}

        for state in self.states:
            shape = 'doublecircle' if state in self.acceptance_states else 'circle'
            if state == self.initial_state:
                nodes[state] = Node(state, shape=shape, color='green')
            else:
                nodes[state] = Node(state, shape=shape)

            graph.add_node(nodes[state])

        labels : Dict[Tuple[str, str], List[str]] = {}
        for (sA, i, sB) in self.transitions:
            labels.setdefault((sA, sB), []).append(i)

        for (sA, sB), chars in sorted(labels.items()):
            graph.add_edge(Edge(nodes[sA], nodes[sB], label=",".join(chars)))

        return graph

    def show_diagram(self, path : str = "automata.png") -> None:
        """ creates a diagram of this finite automata (needs the graphviz binaries) """
        self.to_dot().write_png(path)

    def reachable_from(self, state : str) -> Set[str]:
        """ returns a set of all reachable states from the selected state """
        if state not in self.states:
            raise MalformedAutomatonError(f"reachable_from: state {state!r} not in automata")
        if not hasattr(self, "reachability_hashmap") : self.construct_reachability_hashmap()

        queue = deque([state])
        visited = {state}
        while queue:
            current_state = queue.popleft()
            for (next_state, char) in self.reachability_hashmap[current_state]:
                if next_state not in visited:
                    visited.add(next_state)
                    queue.append(next_state)

        return visited
