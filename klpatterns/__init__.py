"""
klpatterns: Knuth-Liang hyphenation pattern and exception stores.

Score the potential hyphenation points of a word from a trie of
already-parsed patterns, with whole-word exceptions taking precedence.
"""

import logging
from typing import Iterable, Sequence, Tuple

from klpatterns.base import KLPair, Scorer
from klpatterns.dictionary import Dictionary
from klpatterns.exceptions import Exceptions
from klpatterns.patterns import Patterns
from klpatterns.settings import DEBUG

__version__ = "0.1.0"

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())
if DEBUG:
    logger.setLevel(logging.DEBUG)


def build(
    patterns: Iterable[Tuple[str, Sequence[int]]] = (),
    exceptions: Iterable[Tuple[str, Sequence[int]]] = (),
) -> Dictionary:
    """
    Bulk-load a Dictionary from parsed pattern and exception pairs.

    Args:
        patterns: (pattern letters, tally) pairs, e.g. ``("hy", [0, 2, 0])``
            for the TeX pattern ``hy2``.
        exceptions: (word, gap scores) pairs, e.g. ``("table", [0, 1, 0, 0])``
            for ``ta-ble``.

    Returns:
        A Dictionary ready for scoring.

    Example:
        >>> import klpatterns
        >>> d = klpatterns.build(patterns=[("ab", [0, 1, 0])])
        >>> d.score("AB")
        [1]
    """
    dictionary = Dictionary()
    dictionary.patterns.extend(patterns)
    dictionary.exceptions.extend(exceptions)
    return dictionary


__all__ = [
    "Dictionary",
    "Exceptions",
    "KLPair",
    "Patterns",
    "Scorer",
    "build",
]
