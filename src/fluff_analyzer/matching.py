"""
Category matchers.

Every matcher reports spans in the coordinate space of the text it was given.
Callers that scan sentences must shift hits by the sentence offset before
combining them with hits from other sentences.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Iterable, List, Sequence, Tuple

from .lexicon import (
    ADVERB_SUFFIX,
    DEFAULT_LEXICON,
    PASSIVE_PATTERN,
    Lexicon,
    nominal_pattern,
    phrase_pattern,
)
from .models import Hit, HitKind, Span, Token
from .tokenization import is_single_token, tokenize_words


class Category(str, Enum):
    HEDGE_WORDS = "hedge_words"
    HEDGE_PHRASES = "hedge_phrases"
    VAGUE_PHRASES = "vague_phrases"
    WEASEL_WORDS = "weasel_words"
    ADVERBS = "adverbs"
    NOMINALIZATIONS = "nominalizations"
    PASSIVE = "passive"


CATEGORY_KINDS = {
    Category.HEDGE_WORDS: HitKind.HEDGE,
    Category.HEDGE_PHRASES: HitKind.HEDGE,
    Category.VAGUE_PHRASES: HitKind.VAGUE,
    Category.WEASEL_WORDS: HitKind.WEASEL,
    Category.ADVERBS: HitKind.ADVERB,
    Category.NOMINALIZATIONS: HitKind.NOMINAL,
    Category.PASSIVE: HitKind.PASSIVE,
}

_PhrasePatterns = Tuple[Tuple[str, "re.Pattern[str]"], ...]

# Categories scanned with regexes over the raw text instead of the token stream.
_REGEX_ONLY = frozenset(
    {Category.HEDGE_PHRASES, Category.VAGUE_PHRASES, Category.PASSIVE}
)


@dataclass(frozen=True)
class _WordCategory:
    """Entries that are a single token, plus entries like "world-class" that span several."""

    words: frozenset[str]
    patterns: _PhrasePatterns


@dataclass(frozen=True)
class _CompiledLexicon:
    hedge_words: _WordCategory
    weasel_words: _WordCategory
    hedge_phrases: _PhrasePatterns
    vague_phrases: _PhrasePatterns
    adverb_exclusions: frozenset[str]
    nominal: "re.Pattern[str] | None"


def _word_category(entries: Iterable[str]) -> _WordCategory:
    words = set()
    patterns = []
    for entry in entries:
        low = entry.lower()
        if is_single_token(low):
            words.add(low)
        else:
            patterns.append((low, phrase_pattern(low)))
    return _WordCategory(words=frozenset(words), patterns=tuple(patterns))


def _phrase_patterns(phrases: Iterable[str]) -> _PhrasePatterns:
    return tuple((p.lower(), phrase_pattern(p)) for p in phrases if p.strip())


@lru_cache(maxsize=32)
def compile_lexicon(lexicon: Lexicon) -> _CompiledLexicon:
    """Compile (once per lexicon) the sets and patterns the matchers scan with."""
    return _CompiledLexicon(
        hedge_words=_word_category(lexicon.hedge_words),
        weasel_words=_word_category(lexicon.weasel_words),
        hedge_phrases=_phrase_patterns(lexicon.hedge_phrases),
        vague_phrases=_phrase_patterns(lexicon.vague_phrases),
        adverb_exclusions=frozenset(w.lower() for w in lexicon.adverb_exclusions),
        nominal=nominal_pattern(lexicon.nominal_suffixes),
    )


def match(
    text: str,
    category: Category | str,
    lexicon: Lexicon = DEFAULT_LEXICON,
    tokens: Sequence[Token] | None = None,
) -> List[Hit]:
    """Return every hit of ``category`` in ``text``, ordered by start offset."""
    category = Category(category)
    compiled = compile_lexicon(lexicon)
    kind = CATEGORY_KINDS[category]
    if tokens is None and category not in _REGEX_ONLY:
        tokens = tokenize_words(text)

    if category is Category.HEDGE_WORDS:
        hits = _word_hits(text, tokens or (), compiled.hedge_words, kind)
    elif category is Category.WEASEL_WORDS:
        hits = _word_hits(text, tokens or (), compiled.weasel_words, kind)
    elif category is Category.HEDGE_PHRASES:
        hits = _phrase_hits(text, compiled.hedge_phrases, kind)
    elif category is Category.VAGUE_PHRASES:
        hits = _phrase_hits(text, compiled.vague_phrases, kind)
    elif category is Category.ADVERBS:
        hits = _adverb_hits(tokens or (), compiled.adverb_exclusions)
    elif category is Category.NOMINALIZATIONS:
        hits = _nominal_hits(tokens or (), compiled.nominal)
    else:
        hits = _passive_hits(text)
    hits.sort(key=lambda hit: (hit.span.start, hit.span.end))
    return hits


def match_all(
    text: str,
    lexicon: Lexicon = DEFAULT_LEXICON,
    tokens: Sequence[Token] | None = None,
) -> List[Hit]:
    """Run every category over ``text`` sharing a single tokenization pass."""
    if tokens is None:
        tokens = tokenize_words(text)
    hits: List[Hit] = []
    for category in Category:
        hits.extend(match(text, category, lexicon, tokens=tokens))
    return hits


def shift_hits(hits: Iterable[Hit], offset: int) -> List[Hit]:
    """Translate hits found in a substring into the coordinate space of its parent."""
    if offset == 0:
        return list(hits)
    return [hit.shifted(offset) for hit in hits]


def _token_hit(token: Token, kind: HitKind) -> Hit:
    return Hit(kind=kind, span=Span(token.start_char, token.end_char), text=token.text)


def _word_hits(
    text: str, tokens: Sequence[Token], category: _WordCategory, kind: HitKind
) -> List[Hit]:
    hits = [
        _token_hit(token, kind)
        for token in tokens
        if token.text.lower() in category.words
    ]
    hits.extend(_phrase_hits(text, category.patterns, kind))
    return hits


def _phrase_hits(text: str, patterns: _PhrasePatterns, kind: HitKind) -> List[Hit]:
    hits: List[Hit] = []
    for _, pattern in patterns:
        for m in pattern.finditer(text):
            if m.end() > m.start():
                hits.append(Hit(kind=kind, span=Span(m.start(), m.end()), text=m.group()))
    return hits


def _adverb_hits(tokens: Sequence[Token], exclusions: frozenset[str]) -> List[Hit]:
    hits: List[Hit] = []
    for token in tokens:
        low = token.text.lower()
        if low.endswith(ADVERB_SUFFIX) and low not in exclusions:
            hits.append(_token_hit(token, HitKind.ADVERB))
    return hits


def _nominal_hits(
    tokens: Sequence[Token], pattern: "re.Pattern[str] | None"
) -> List[Hit]:
    if pattern is None:
        return []
    return [
        _token_hit(token, HitKind.NOMINAL)
        for token in tokens
        if pattern.search(token.text)
    ]


def _passive_hits(text: str) -> List[Hit]:
    return [
        Hit(kind=HitKind.PASSIVE, span=Span(m.start(), m.end()), text=m.group())
        for m in PASSIVE_PATTERN.finditer(text)
    ]
