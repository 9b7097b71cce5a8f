"""
Knuth-Liang pattern trie.

Each node of the trie is itself a ``Patterns`` instance: the root stands for
the empty prefix, and following ``descendants`` one character at a time
spells out a pattern. A node carries a tally only when some inserted pattern
ends exactly there.

Scoring slides over every starting offset of the boundary-wrapped word and
folds each matching pattern's tally into a shared array of gap scores,
keeping the highest value seen at each gap.
"""

import logging
from typing import Dict, Iterator, List, Optional, Sequence

from klpatterns.base import KLPair, Scorer
from klpatterns.settings import BOUNDARY

logger = logging.getLogger(__name__)


class Patterns(Scorer):
    """A character trie associating patterns with their hyphenation tallies."""

    __slots__ = ("tally", "descendants")

    def __init__(self) -> None:
        self.tally: Optional[List[int]] = None
        self.descendants: Dict[str, "Patterns"] = {}

    def insert(self, pattern: str, tally: Sequence[int]) -> Optional[List[int]]:
        """
        Insert a Knuth-Liang pattern into the trie.

        Pattern text is stored as given; it is expected to be canonical
        (lowercase, score digits already stripped by the loader). The empty
        pattern is accepted and sets the tally of the root itself.

        Args:
            pattern: Letters of the pattern.
            tally: One score per gap of the pattern, ``len(pattern) + 1`` long.

        Returns:
            The tally previously stored for ``pattern``, or None.
        """
        node = self
        for c in pattern:
            child = node.descendants.get(c)
            if child is None:
                child = node.descendants[c] = Patterns()
            node = child

        old = node.tally
        node.tally = list(tally)
        if old is not None:
            logger.debug(f"Replaced tally for pattern {pattern!r}: {old} -> {node.tally}")
        return old

    def score(self, word: str) -> List[int]:
        """
        Assign a score to each potential hyphenation point of ``word``.

        All patterns matching a substring of the boundary-wrapped word are
        compounded; for each gap the highest competing value is kept.

        Args:
            word: The word to score, in any case.

        Returns:
            ``max(0, len(word) - 1)`` scores, one per gap between two
            adjacent letters. Odd scores mark allowed break points.

        Example:
            >>> p = Patterns()
            >>> p.insert("ab", [0, 1, 0])
            >>> p.score("Ab")
            [1]
        """
        if any(c.isupper() for c in word):
            word = word.lower()

        chars = BOUNDARY + word + BOUNDARY
        match_length = len(chars)
        if match_length <= 3:
            return []

        hyphenable_length = match_length - 2
        points = [0] * (hyphenable_length - 1)

        for i in range(match_length):
            node = self
            for c in chars[i:]:
                node = node.descendants.get(c)
                if node is None:
                    break
                if node.tally is None:
                    continue
                for j, p in enumerate(node.tally):
                    k = i + j
                    if 1 < k <= hyphenable_length and p > points[k - 2]:
                        points[k - 2] = p

        return points

    def is_empty(self) -> bool:
        # A tally set on the root by the empty pattern does not count.
        return not self.descendants

    def pairs(self, prefix: str = "") -> Iterator[KLPair]:
        """Yield every stored (pattern, tally) pair, depth first in character order."""
        if self.tally is not None:
            yield prefix, self.tally
        for c in sorted(self.descendants):
            yield from self.descendants[c].pairs(prefix + c)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Patterns):
            return NotImplemented
        return self.tally == other.tally and self.descendants == other.descendants

    __hash__ = None

    def __repr__(self) -> str:
        return f"Patterns(patterns={sum(1 for _ in self.pairs())})"
