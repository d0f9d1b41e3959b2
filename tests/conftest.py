from __future__ import annotations

import pytest

from tagstats.datamodels import Token


@pytest.fixture
def royal_tokens() -> list[Token]:
    """A short tagged text with three proper nouns, one verb and punctuation."""
    return [
        Token("Alice", "NNP", 0.9),
        Token("met", "VVD", 0.8),
        Token("the", "DT", 1.0),
        Token("Queen", "NNP", 0.4),
        Token("and", "CC", 1.0),
        Token("the", "DT", 1.0),
        Token("King", "NNP", 0.7),
        Token(".", ".", 1.0),
        Token("The", "DT", 0.6),
        Token("King", "NNP", 0.4),
        Token("smiled", "VVD", 0.9),
        Token(".", ".", 1.0),
    ]
