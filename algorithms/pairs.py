#!/usr/bin/env python3
# Unordered state pairs, always stored smaller index first

from typing import Iterator, Tuple
import itertools

def canonical_pair(p : int, q : int) -> Tuple[int, int]:
    """ {p, q} as the tuple (min, max) """
    return (p, q) if p <= q else (q, p)

def all_pairs(n : int) -> Iterator[Tuple[int, int]]:
    """ every unordered pair of distinct indices in range(n), in canonical form and order """
    return itertools.combinations(range(n), 2)

class PairSet(object):
    """
    a set of unordered pairs. (p, q) and (q, p) are the same member, whichever
    order they are added or looked up in
    """
    def __init__(self, pairs=()):
        self._pairs = set()
        for (p, q) in pairs : self.add(p, q)

    def add(self, p : int, q : int) -> bool:
        """ adds {p, q}, returning True if it was not already a member """
        pair = canonical_pair(p, q)
        if pair in self._pairs : return False
        self._pairs.add(pair)
        return True

    def __contains__(self, pair) -> bool:
        p, q = pair
        return canonical_pair(p, q) in self._pairs

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return iter(sorted(self._pairs))

    def __eq__(self, other) -> bool:
        if not isinstance(other, PairSet) : return NotImplemented
        return self._pairs == other._pairs

    def __repr__(self) -> str:
        return f"PairSet({sorted(self._pairs)!r})"
