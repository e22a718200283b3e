from __future__ import annotations

from typing import List

from .config import ScoringThresholds
from .lexicon import DEFAULT_LEXICON, Lexicon
from .matching import match_all, shift_hits
from .models import SentenceReport, SentenceSegment
from .tokenization import tokenize_words

SENTENCE_OK = "OK"
SENTENCE_WARN = "WARN"
SENTENCE_OVERLOAD = "OVERLOAD"

DOCUMENT_FLUFF_FREE = "FLUFF-FREE"
DOCUMENT_MARGINAL = "MARGINAL PADDING"
DOCUMENT_OVERLOAD = "FLUFF OVERLOAD"

DEFAULT_THRESHOLDS = ScoringThresholds()


def hit_ratio(hit_count: int, word_count: int) -> float:
    """Hits per hundred words; zero when there are no words."""
    if word_count <= 0:
        return 0.0
    return hit_count * 100 / word_count


def _tier(ratio: float, thresholds: ScoringThresholds) -> int:
    # Both boundaries belong to the middle tier.
    if ratio < thresholds.ok_below:
        return 0
    if ratio > thresholds.overload_above:
        return 2
    return 1


def sentence_verdict(
    ratio: float, thresholds: ScoringThresholds = DEFAULT_THRESHOLDS
) -> str:
    return (SENTENCE_OK, SENTENCE_WARN, SENTENCE_OVERLOAD)[_tier(ratio, thresholds)]


def document_verdict(
    ratio: float, thresholds: ScoringThresholds = DEFAULT_THRESHOLDS
) -> str:
    return (DOCUMENT_FLUFF_FREE, DOCUMENT_MARGINAL, DOCUMENT_OVERLOAD)[
        _tier(ratio, thresholds)
    ]


def document_ratio(total_hits: int, word_count: int) -> float:
    """Document hit ratio rounded to two decimals, as displayed and judged."""
    return round(hit_ratio(total_hits, word_count), 2)


def score_sentence(
    segment: SentenceSegment,
    lexicon: Lexicon = DEFAULT_LEXICON,
    thresholds: ScoringThresholds = DEFAULT_THRESHOLDS,
) -> SentenceReport:
    """Match, count and judge one sentence. Hit spans become document-relative."""
    tokens = tokenize_words(segment.text)
    hits = shift_hits(match_all(segment.text, lexicon, tokens=tokens), segment.start)
    words = len(tokens)
    ratio = hit_ratio(len(hits), words)
    return SentenceReport(
        text=segment.text,
        start=segment.start,
        end=segment.end,
        word_count=words,
        hits=hits,
        ratio=ratio,
        verdict=sentence_verdict(ratio, thresholds),
    )


def score_sentences(
    segments: List[SentenceSegment],
    lexicon: Lexicon = DEFAULT_LEXICON,
    thresholds: ScoringThresholds = DEFAULT_THRESHOLDS,
) -> List[SentenceReport]:
    return [score_sentence(segment, lexicon, thresholds) for segment in segments]
