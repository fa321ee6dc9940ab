# src/bkspell/retrieval/bk_tree.py
"""
BK-tree over dictionary words.

Each child is keyed by its distance to the parent, as computed once at
insertion. Search walks the tree breadth-first and only descends into
children whose branch key lies within [d - r, d + r] of the query's
distance d to the current node.
"""
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from ..utils.distance import DistanceFunc, sift3_distance


@dataclass
class Candidate:
    word: str
    distance: float
    frequency: float


@dataclass
class BKNode:
    word: str
    frequency: float = 1.0
    children: Dict[float, "BKNode"] = field(default_factory=dict)


class BKTree:
    def __init__(self, distance_func: DistanceFunc = sift3_distance):
        self.distance_func = distance_func
        self.root: Optional[BKNode] = None
        self._size = 0

    @classmethod
    def build(cls, entries: Iterable[Tuple[str, float]], distance_func: DistanceFunc = sift3_distance) -> "BKTree":
        tree = cls(distance_func)
        for word, frequency in entries:
            tree.insert(word, frequency)
        return tree

    def __len__(self) -> int:
        return self._size

    def insert(self, word: str, frequency: float = 1.0) -> bool:
        """
        Add a word. Returns False when the word lands at distance 0 from a
        node on its path and is dropped as a duplicate.
        """
        if self.root is None:
            self.root = BKNode(word, frequency)
            self._size = 1
            return True

        node = self.root
        while True:
            d = self.distance_func(node.word, word)
            if d == 0:
                return False
            child = node.children.get(d)
            if child is None:
                node.children[d] = BKNode(word, frequency)
                self._size += 1
                return True
            node = child

    def search(self, query: str, max_distance: float) -> List[Candidate]:
        results: List[Candidate] = []
        if self.root is None:
            return results

        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            d = self.distance_func(node.word, query)
            if d <= max_distance:
                results.append(Candidate(node.word, d, node.frequency))

            low, high = d - max_distance, d + max_distance
            for key, child in node.children.items():
                if low <= key <= high:
                    queue.append(child)
        return results
