from __future__ import annotations

import re
from typing import List

from .models import SentenceSegment, Token

TOKEN_PATTERN = re.compile(r"\w+(?:'\w+)*", re.UNICODE)
SENTENCE_END_CHARS = frozenset(".!?")


def tokenize_words(text: str) -> List[Token]:
    """Tokenize text into word tokens with character offsets."""
    tokens: List[Token] = []
    for match in TOKEN_PATTERN.finditer(text):
        tokens.append(
            Token(text=match.group(), start_char=match.start(), end_char=match.end())
        )
    return tokens


def count_words(text: str) -> int:
    return sum(1 for _ in TOKEN_PATTERN.finditer(text))


def split_sentences(text: str) -> List[SentenceSegment]:
    """
    Split text on ``.``, ``!`` and ``?``; the terminator stays with its sentence.
    Offsets bound the trimmed sentence within the untrimmed source text.
    """
    segments: List[SentenceSegment] = []
    start = 0
    for idx, ch in enumerate(text):
        if ch in SENTENCE_END_CHARS:
            _append_trimmed(segments, text, start, idx + 1)
            start = idx + 1
    _append_trimmed(segments, text, start, len(text))

    if not segments and text:
        return [SentenceSegment(text=text, start=0, end=len(text))]
    return segments


def _append_trimmed(
    segments: List[SentenceSegment], text: str, start: int, end: int
) -> None:
    chunk = text[start:end]
    stripped = chunk.strip()
    if not stripped:
        return
    lead = len(chunk) - len(chunk.lstrip())
    seg_start = start + lead
    seg_end = seg_start + len(stripped)
    segments.append(SentenceSegment(text=stripped, start=seg_start, end=seg_end))


def is_single_token(value: str) -> bool:
    """True when ``value`` is exactly one word token."""
    return TOKEN_PATTERN.fullmatch(value) is not None
