from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from tagstats.datamodels import Token
from tagstats.statistics import (
    DEFAULT_SIZE,
    count_words,
    least_confident_token,
    pos_frequencies,
    proper_nouns,
    vocabulary,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextSummary:
    """All statistics of a single text."""

    n_tokens: int
    n_words: int
    vocabulary: list[str]
    proper_nouns: list[str]
    pos_frequencies: dict[str, int]
    # None if the text has no tokens.
    least_confident: Token | None
    mean_confidence: float | None


def summarize(tokens: Sequence[Token], size: int = DEFAULT_SIZE) -> TextSummary:
    """
    Compute all statistics for a text at once.

    :param tokens: The tokens in the text.
    :param size: The number of vocabulary items and proper nouns to keep.
    :return: A summary of the text.
    """
    mean_confidence = None
    if tokens:
        mean_confidence = float(np.mean([token.confidence for token in tokens]))

    summary = TextSummary(
        n_tokens=len(tokens),
        n_words=count_words(tokens),
        vocabulary=vocabulary(tokens, size),
        proper_nouns=proper_nouns(tokens, size),
        pos_frequencies=pos_frequencies(tokens),
        least_confident=least_confident_token(tokens),
        mean_confidence=mean_confidence,
    )
    logger.debug(
        f"Summarized {summary.n_tokens} tokens: {summary.n_words} words, {len(summary.pos_frequencies)} distinct tags."
    )

    return summary
