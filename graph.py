# graph.py
# Precedence graph built from adjacent word comparisons.

from typing import Dict, Iterable, List, Optional, Set, Tuple

from letters import collect_letters
from utils import vlog


def first_difference(word: str, next_word: str) -> Optional[Tuple[str, str]]:
    """
    Return the (before, after) letters at the first position where the two
    words differ, or None if one word is a prefix of the other.
    Letters past the first difference carry no ordering information.
    """
    for a, b in zip(word, next_word):
        if a != b:
            return a, b
    return None


class PrecedenceGraph:
    """
    Directed "comes-before" graph over the letters of one word list:
      - in_degree[letter]  -> number of distinct edges pointing into letter
      - adjacency[letter]  -> letters it directly precedes, in discovery order
      - edges              -> set of distinct (before, after) pairs
    One instance belongs to a single inference call.
    """

    __slots__ = ("in_degree", "adjacency", "edges")

    def __init__(self, letters: Iterable[str] = ()):
        self.in_degree: Dict[str, int] = {}
        self.adjacency: Dict[str, List[str]] = {}
        self.edges: Set[Tuple[str, str]] = set()
        for ch in letters:
            self.add_letter(ch)

    # ---------- Public API ----------
    @classmethod
    def from_words(cls, words: List[str]) -> "PrecedenceGraph":
        """
        Build the graph from already normalized words assumed to be sorted
        under the unknown alphabet. At most one edge per adjacent pair.
        """
        graph = cls()
        graph.in_degree = collect_letters(words)
        vlog(f"in_degree initialized: {graph.in_degree}")

        for word, next_word in zip(words, words[1:]):
            diff = first_difference(word, next_word)
            if diff is not None:
                graph.add_edge(*diff)

        vlog(f"graph constructed: {graph.adjacency}")
        vlog(f"in_degree constructed: {graph.in_degree}")
        return graph

    def add_letter(self, ch: str) -> None:
        self.in_degree.setdefault(ch, 0)

    def add_edge(self, before: str, after: str) -> bool:
        """
        Record that ``before`` precedes ``after``. Returns False if the edge
        was already known, in which case nothing changes.
        """
        if (before, after) in self.edges:
            return False
        self.add_letter(before)
        self.add_letter(after)
        self.edges.add((before, after))
        self.adjacency.setdefault(before, []).append(after)
        self.in_degree[after] += 1
        return True

    def successors(self, ch: str) -> List[str]:
        return self.adjacency.get(ch, [])

    @property
    def letters(self) -> List[str]:
        return list(self.in_degree)

    def __len__(self) -> int:
        return len(self.in_degree)

    def __contains__(self, ch) -> bool:
        return ch in self.in_degree
