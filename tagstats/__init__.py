from tagstats.datamodels import PROPER_NOUN_TAG, PUNCTUATION_TAGS, Token
from tagstats.statistics import (
    count_words,
    least_confident_token,
    pos_frequencies,
    proper_nouns,
    top_n,
    vocabulary,
)
from tagstats.summary import TextSummary, summarize

__all__ = [
    "Token",
    "PROPER_NOUN_TAG",
    "PUNCTUATION_TAGS",
    "count_words",
    "vocabulary",
    "proper_nouns",
    "top_n",
    "least_confident_token",
    "pos_frequencies",
    "TextSummary",
    "summarize",
]
