from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class HitKind(str, Enum):
    """Category of a fluff hit."""

    HEDGE = "hedge"
    VAGUE = "vague"
    WEASEL = "weasel"
    ADVERB = "adverb"
    NOMINAL = "nominal"
    PASSIVE = "passive"


@dataclass(frozen=True, slots=True)
class Token:
    """Represents a token and its inclusive-exclusive character offsets."""

    text: str
    start_char: int
    end_char: int


@dataclass(frozen=True, slots=True, order=True)
class Span:
    """Half-open character interval ``[start, end)``."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Span start {self.start} exceeds end {self.end}")

    def shifted(self, offset: int) -> Span:
        return Span(self.start + offset, self.end + offset)

    def to_list(self) -> list[int]:
        return [self.start, self.end]


@dataclass(frozen=True, slots=True)
class Hit:
    """A single detected piece of fluff in the text that was scanned."""

    kind: HitKind
    span: Span
    text: str

    def __post_init__(self) -> None:
        if self.span.start == self.span.end:
            raise ValueError("Hits cannot have a zero-length span")

    def shifted(self, offset: int) -> Hit:
        return Hit(kind=self.kind, span=self.span.shifted(offset), text=self.text)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "span": self.span.to_list(), "text": self.text}


@dataclass(frozen=True, slots=True)
class SentenceSegment:
    """Trimmed sentence with document-relative offsets (``doc[start:end] == text``)."""

    text: str
    start: int
    end: int


@dataclass(slots=True)
class SentenceReport:
    """Per-sentence analysis. Hit spans are document-relative."""

    text: str
    start: int
    end: int
    word_count: int
    hits: List[Hit]
    ratio: float
    verdict: str
    rewritten: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "text": self.text,
            "start": self.start,
            "end": self.end,
            "wordCount": self.word_count,
            "hits": [hit.to_dict() for hit in self.hits],
            "ratio": self.ratio,
            "verdict": self.verdict,
        }
        if self.rewritten is not None:
            payload["rewritten"] = self.rewritten
        return payload


@dataclass(slots=True)
class HitCounts:
    """Raw hit counts per category, before span merging."""

    hedges_single: int = 0
    hedges_phrases: int = 0
    vague_phrases: int = 0
    passive_est: int = 0
    weasel_words: int = 0
    adverbs_ly: int = 0
    nominalizations: int = 0

    @property
    def total_hits(self) -> int:
        return (
            self.hedges_single
            + self.hedges_phrases
            + self.vague_phrases
            + self.passive_est
            + self.weasel_words
            + self.adverbs_ly
            + self.nominalizations
        )

    def to_dict(self) -> Dict[str, int]:
        return {
            "hedgesSingle": self.hedges_single,
            "hedgesPhrases": self.hedges_phrases,
            "vaguePhrases": self.vague_phrases,
            "passiveEst": self.passive_est,
            "weaselWords": self.weasel_words,
            "adverbsLy": self.adverbs_ly,
            "nominalizations": self.nominalizations,
            "totalHits": self.total_hits,
        }


@dataclass(slots=True)
class HitSamples:
    """Distinct matched words per single-word category, in order of appearance."""

    hedge_words: List[str] = field(default_factory=list)
    weasel_words: List[str] = field(default_factory=list)
    adverbs_ly: List[str] = field(default_factory=list)
    nominalizations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "hedgesWords": list(self.hedge_words),
            "weaselWords": list(self.weasel_words),
            "adverbsLy": list(self.adverbs_ly),
            "nominalizations": list(self.nominalizations),
        }


@dataclass(frozen=True, slots=True)
class AnnotatedSegment:
    """Slice of the analyzed text, flagged when it falls inside a merged span."""

    text: str
    start: int
    end: int
    highlighted: bool


@dataclass(slots=True)
class Report:
    """Aggregate result of a single ``analyze`` call."""

    text: str
    word_count: int
    total_hits: int
    hit_ratio_percent: float
    verdict: str
    sentences: List[SentenceReport]
    hits: List[Hit]
    merged_spans: List[Span]
    counts: HitCounts
    samples: HitSamples
    annotated_html: str
    annotated_text: str
    cuts: List[str]

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-serializable payload consumed by presentation layers."""
        return {
            "wordCount": self.word_count,
            "totalHits": self.total_hits,
            "hitRatioPercent": self.hit_ratio_percent,
            "verdict": self.verdict,
            "sentences": [sentence.to_dict() for sentence in self.sentences],
            "mergedSpans": [span.to_list() for span in self.merged_spans],
            "counts": self.counts.to_dict(),
            "samples": self.samples.to_dict(),
            "annotatedHTML": self.annotated_html,
            "annotatedText": self.annotated_text,
            "cuts": list(self.cuts),
        }
