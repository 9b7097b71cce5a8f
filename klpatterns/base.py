"""
Shared capability interface for the two lookup structures.

Both the pattern trie and the exception map are built by a sequence of
inserts and then queried read-only with ``score``.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

# A Knuth-Liang pair: the letters of a pattern (or exception word) and the
# score of each gap it covers.
KLPair = Tuple[str, List[int]]


class Scorer(ABC):
    """Something that can be loaded with KL pairs and asked to score a word."""

    __slots__ = ()

    @abstractmethod
    def insert(self, text: str, scores: Sequence[int]) -> Optional[List[int]]:
        """Store ``scores`` under ``text``, returning what it replaced, if anything."""

    @abstractmethod
    def score(self, word: str):
        """Score each potential hyphenation point of ``word``."""

    @abstractmethod
    def is_empty(self) -> bool:
        ...

    def extend(self, pairs: Iterable[Tuple[str, Sequence[int]]]) -> int:
        """
        Insert every pair in order.

        Args:
            pairs: Iterable of (text, scores) tuples, already parsed.

        Returns:
            Number of inserts that replaced an existing entry.
        """
        count = 0
        replaced = 0
        for text, scores in pairs:
            count += 1
            if self.insert(text, scores) is not None:
                replaced += 1

        logger.info(
            f"Loaded {count} entries into {type(self).__name__} ({replaced} replaced)"
        )
        return replaced
