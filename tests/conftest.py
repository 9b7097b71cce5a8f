"""
Shared fixtures for klpatterns tests.
"""

import pytest

from klpatterns import Dictionary, Exceptions, Patterns


# Liang's patterns covering "hyphenation" (hy-phen-ation), already split
# into letters and tallies: hy3ph he2n hena4 hen5at 1na n2at 1tio 2io o2n
HYPHENATION_PATTERNS = [
    ("hyph", [0, 0, 3, 0, 0]),
    ("hen", [0, 0, 2, 0]),
    ("hena", [0, 0, 0, 0, 4]),
    ("henat", [0, 0, 0, 5, 0, 0]),
    ("na", [1, 0, 0]),
    ("nat", [0, 2, 0, 0]),
    ("tio", [1, 0, 0, 0]),
    ("io", [2, 0, 0]),
    ("on", [0, 2, 0]),
]

# ta-ble, pro-ject
EXCEPTIONS = [
    ("table", [0, 1, 0, 0]),
    ("project", [0, 1, 0, 0, 0, 0]),
]


@pytest.fixture
def patterns():
    """Pattern trie loaded with the hyphenation patterns."""
    p = Patterns()
    p.extend(HYPHENATION_PATTERNS)
    return p


@pytest.fixture
def exceptions():
    """Exception map loaded with a couple of words."""
    e = Exceptions()
    e.extend(EXCEPTIONS)
    return e


@pytest.fixture
def dictionary(patterns, exceptions):
    """Dictionary holding both loaded stores."""
    return Dictionary(patterns=patterns, exceptions=exceptions)
