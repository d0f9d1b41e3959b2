from __future__ import annotations

from dataclasses import dataclass

# The Penn Treebank tag for a singular proper noun.
PROPER_NOUN_TAG = "NNP"

# Penn Treebank punctuation and symbol tags. Any other tag marks a word.
PUNCTUATION_TAGS = frozenset(
    {
        ".",
        ",",
        ":",
        "``",
        "''",
        "-LRB-",
        "-RRB-",
        "(",
        ")",
        "#",
        "$",
        "HYPH",
        "NFP",
        "SYM",
    }
)


@dataclass(frozen=True)
class Token:
    """A class to represent a tagged token."""

    # The surface form, as it appeared in the text.
    contents: str
    # The part of speech tag assigned by the tagger.
    part_of_speech: str
    # How certain the tagger was about the tag.
    confidence: float

    def is_word(self) -> bool:
        """Whether the token is a word, as opposed to punctuation or a symbol."""
        return self.part_of_speech not in PUNCTUATION_TAGS

    def __str__(self) -> str:
        return f"{self.contents}({self.part_of_speech}:{self.confidence:.1f})"
