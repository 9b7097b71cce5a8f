"""
Exception-first lookup over a pattern trie and an exception map.
"""

from dataclasses import dataclass, field
from typing import List

from klpatterns.exceptions import Exceptions
from klpatterns.patterns import Patterns


@dataclass
class Dictionary:
    """
    The two hyphenation lookup structures for one language.

    Exceptions are consulted first; a word with no exception is scored
    against the pattern trie.
    """
    patterns: Patterns = field(default_factory=Patterns)
    exceptions: Exceptions = field(default_factory=Exceptions)

    def score(self, word: str) -> List[int]:
        """
        Score each gap of ``word``.

        Args:
            word: The word to score, in any case.

        Returns:
            The exception's scores if ``word`` has one, otherwise the
            compounded pattern scores.
        """
        scores = self.exceptions.score(word)
        if scores is not None:
            return scores
        return self.patterns.score(word)

    def is_empty(self) -> bool:
        return self.patterns.is_empty() and self.exceptions.is_empty()
