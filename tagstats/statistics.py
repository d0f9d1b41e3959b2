from __future__ import annotations

from collections import Counter
from typing import Hashable, Iterable, Mapping, Sequence, TypeVar

import numpy as np

from tagstats.datamodels import PROPER_NOUN_TAG, Token

T = TypeVar("T", bound=Hashable)

DEFAULT_SIZE = 10


def count_words(tokens: Iterable[Token]) -> int:
    """Return the number of tokens that are words."""
    return sum(1 for token in tokens if token.is_word())


def vocabulary(tokens: Iterable[Token], size: int = DEFAULT_SIZE) -> list[str]:
    """
    Return the most frequent words in the text.

    Words are lowercased before counting, so "Alice" and "alice" are the same item.
    Punctuation is ignored.

    :param tokens: The tokens in the text.
    :param size: The number of words to return.
    :return: The lowercased words, most frequent first.
    """
    counts = Counter(token.contents.lower() for token in tokens if token.is_word())
    return top_n(size, counts)


def proper_nouns(tokens: Iterable[Token], size: int = DEFAULT_SIZE) -> list[str]:
    """
    Find the most frequent proper nouns in the text.

    Unlike :func:`vocabulary`, the case of the proper nouns is preserved.

    :param tokens: The tokens in the text.
    :param size: The number of proper nouns to return.
    :return: The proper nouns, most frequent first.
    """
    counts = Counter(token.contents for token in tokens if token.part_of_speech == PROPER_NOUN_TAG)
    return top_n(size, counts)


def top_n(size: int, frequencies: Mapping[T, int]) -> list[T]:
    """
    Take a mapping of items to their frequency and return the most frequent items.

    Items with equal frequencies keep the order in which they appear in the mapping.
    For a Counter built from a stream of items, this is the order in which they were first seen.

    :param size: The number of items to return.
    :param frequencies: A mapping from item to its frequency.
    :return: At most `size` items, most frequent first.
    :raises ValueError: If size is negative.
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    # sorted is stable, also with reverse=True, so ties keep their mapping order.
    ranked = sorted(frequencies.items(), key=lambda item: item[1], reverse=True)
    return [item for item, _ in ranked[:size]]


def least_confident_token(tokens: Sequence[Token]) -> Token | None:
    """
    Find the token with the lowest confidence, or None if there are no tokens.

    If several tokens share the lowest confidence, the first one is returned.
    """
    if not tokens:
        return None
    confidences = np.fromiter((token.confidence for token in tokens), dtype=np.float64, count=len(tokens))
    # argmin returns the first occurrence of the minimum.
    return tokens[int(np.argmin(confidences))]


def pos_frequencies(tokens: Iterable[Token]) -> dict[str, int]:
    """
    Find the frequencies of each part of speech tag in the text.

    :param tokens: The tokens in the text.
    :return: A mapping from part of speech tag to its frequency.
    """
    return dict(Counter(token.part_of_speech for token in tokens))
