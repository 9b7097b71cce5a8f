"""
Hyphenation exceptions: explicit gap scores for whole words.

An exception overrides the pattern trie wholesale for one word. Words are
case-folded both when stored and when looked up, so exception lists may be
fed in any case.
"""

import logging
from typing import Dict, Iterator, List, Optional, Sequence

from klpatterns.base import KLPair, Scorer

logger = logging.getLogger(__name__)


class Exceptions(Scorer):
    """A map from lowercase word to the score of each of its gaps."""

    __slots__ = ("mapping",)

    def __init__(self) -> None:
        self.mapping: Dict[str, List[int]] = {}

    def insert(self, word: str, scores: Sequence[int]) -> Optional[List[int]]:
        """
        Insert a Knuth-Liang exception pair.

        Args:
            word: The whole word.
            scores: One score per gap between letters, ``len(word) - 1`` long.

        Returns:
            The scores previously stored for ``word``, or None.
        """
        key = word.lower()
        old = self.mapping.get(key)
        self.mapping[key] = list(scores)
        if old is not None:
            logger.debug(f"Replaced exception {key!r}: {old} -> {self.mapping[key]}")
        return old

    def score(self, word: str) -> Optional[List[int]]:
        """Retrieve the stored scores for ``word``, or None if it is not an exception."""
        return self.mapping.get(word.lower())

    def is_empty(self) -> bool:
        return not self.mapping

    def pairs(self) -> Iterator[KLPair]:
        yield from self.mapping.items()

    def __len__(self) -> int:
        return len(self.mapping)

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and word.lower() in self.mapping

    def __eq__(self, other) -> bool:
        if not isinstance(other, Exceptions):
            return NotImplemented
        return self.mapping == other.mapping

    __hash__ = None

    def __repr__(self) -> str:
        return f"Exceptions(words={len(self.mapping)})"
