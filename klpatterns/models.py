"""
Pydantic models mirroring the structure of the hyphenation stores.

These models expose the exact shape of a ``Patterns`` trie (per-node
optional tally plus a character -> child mapping) and of an ``Exceptions``
map, so that an external encoder can dump a built store and a decoder can
rebuild an equivalent one. Choosing a file format is left to the caller:

    from klpatterns.models import DictionarySnapshot

    data = DictionarySnapshot.from_dictionary(dictionary).model_dump_json()
    ...
    dictionary = DictionarySnapshot.model_validate_json(data).to_dictionary()
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from klpatterns.dictionary import Dictionary
from klpatterns.exceptions import Exceptions
from klpatterns.patterns import Patterns


def _check_scores(scores: List[int]) -> List[int]:
    if any(s < 0 for s in scores):
        raise ValueError(f"scores must be non-negative, got {scores}")
    return scores


class PatternNode(BaseModel):
    """
    One node of a pattern trie.

    The root node stands for the empty prefix. A tally is present only on
    nodes where an inserted pattern ends.
    """
    tally: Optional[List[int]] = Field(
        None, description="Score of each gap of the pattern ending here"
    )
    descendants: Dict[str, "PatternNode"] = Field(
        default_factory=dict, description="Child node for each next character"
    )

    @field_validator("tally")
    @classmethod
    def tally_non_negative(cls, v: Optional[List[int]]) -> Optional[List[int]]:
        if v is None:
            return v
        return _check_scores(v)

    @field_validator("descendants")
    @classmethod
    def single_character_keys(cls, v: Dict[str, "PatternNode"]) -> Dict[str, "PatternNode"]:
        for key in v:
            if len(key) != 1:
                raise ValueError(f"trie keys must be single characters, got {key!r}")
        return v

    @classmethod
    def from_patterns(cls, patterns: Patterns) -> "PatternNode":
        """Capture a ``Patterns`` trie, recursively."""
        return cls(
            tally=list(patterns.tally) if patterns.tally is not None else None,
            descendants={
                c: cls.from_patterns(child) for c, child in patterns.descendants.items()
            },
        )

    def to_patterns(self) -> Patterns:
        """Rebuild an equivalent ``Patterns`` trie."""
        node = Patterns()
        if self.tally is not None:
            node.tally = list(self.tally)
        node.descendants = {c: child.to_patterns() for c, child in self.descendants.items()}
        return node


PatternNode.model_rebuild()


class ExceptionTable(BaseModel):
    """The flat word -> scores mapping of an ``Exceptions`` store."""
    words: Dict[str, List[int]] = Field(
        default_factory=dict, description="Lowercase word to the score of each gap"
    )

    @field_validator("words")
    @classmethod
    def scores_non_negative(cls, v: Dict[str, List[int]]) -> Dict[str, List[int]]:
        for scores in v.values():
            _check_scores(scores)
        return v

    @classmethod
    def from_exceptions(cls, exceptions: Exceptions) -> "ExceptionTable":
        return cls(words={w: list(s) for w, s in exceptions.pairs()})

    def to_exceptions(self) -> Exceptions:
        """Rebuild an ``Exceptions`` store; keys are case-folded on the way in."""
        exceptions = Exceptions()
        for word, scores in self.words.items():
            exceptions.insert(word, scores)
        return exceptions


class DictionarySnapshot(BaseModel):
    """Both stores of a ``Dictionary``."""
    patterns: PatternNode = Field(default_factory=PatternNode, description="Pattern trie root")
    exceptions: ExceptionTable = Field(default_factory=ExceptionTable, description="Exception words")

    @classmethod
    def from_dictionary(cls, dictionary: Dictionary) -> "DictionarySnapshot":
        return cls(
            patterns=PatternNode.from_patterns(dictionary.patterns),
            exceptions=ExceptionTable.from_exceptions(dictionary.exceptions),
        )

    def to_dictionary(self) -> Dictionary:
        return Dictionary(
            patterns=self.patterns.to_patterns(),
            exceptions=self.exceptions.to_exceptions(),
        )
