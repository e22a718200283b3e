"""
Categorized word lists and structural detectors for English fluff.

The module-level tuples are the process-wide defaults. ``Lexicon`` bundles them
into a frozen, hashable value so alternate word lists can be injected and
compiled patterns can be cached per lexicon.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping, Tuple

HEDGES: Tuple[str, ...] = (
    "very", "really", "just", "actually", "basically", "literally", "totally",
    "absolutely", "completely", "essentially", "kinda", "maybe", "perhaps",
    "quite", "somewhat", "pretty", "sort of", "kind of", "you know", "um", "uh",
    "i think", "i believe", "in my opinion",
)

VAGUE_PHRASES: Tuple[str, ...] = (
    "in order to", "due to the fact that", "at this point in time", "at this time",
    "in terms of", "a number of", "the fact that", "as a matter of fact",
    "for all intents and purposes",
)

# Longer phrases precede their substrings so they are replaced first.
REPLACEMENTS: Tuple[Tuple[str, str], ...] = (
    ("in order to", "to"),
    ("due to the fact that", "because"),
    ("at this point in time", "now"),
    ("at this time", "now"),
    ("as a matter of fact", ""),
    ("for all intents and purposes", ""),
    ("the fact that", ""),
)

WEASEL_WORDS: Tuple[str, ...] = (
    "important", "innovative", "world-class", "cutting-edge", "best-in-class",
    "robust", "leverage", "synergy", "impactful", "optimize", "scalable",
    "state-of-the-art", "revolutionary", "holistic", "paradigm", "transformative",
    "mission-critical",
)

ADVERB_EXCLUSIONS: Tuple[str, ...] = (
    "only", "family", "reply", "apply", "supply", "comply", "friendly", "early",
    "silly", "belly", "holy",
)

# Hedges that earn an explicit "consider deleting" suggestion.
WEAK_ADVERBS: Tuple[str, ...] = (
    "very", "really", "just", "actually", "basically", "literally", "totally",
    "absolutely", "completely", "essentially",
)

NOMINAL_SUFFIXES: Tuple[str, ...] = ("tion", "sion", "ment", "ance", "ence", "ity")
PASSIVE_AUXILIARIES: Tuple[str, ...] = ("is", "are", "was", "were", "be", "been", "being")
PASSIVE_CONTRACTIONS: Tuple[str, ...] = ("s", "re", "m")
PARTICIPLE_ENDINGS: Tuple[str, ...] = ("ed", "en")
ADVERB_SUFFIX = "ly"

# Upper bound on tokens between the auxiliary and the participle.
PASSIVE_MAX_GAP = 2


@dataclass(frozen=True, slots=True)
class Lexicon:
    """Immutable bundle of word lists used by the matcher and the rewriter."""

    hedges: Tuple[str, ...] = HEDGES
    vague_phrases: Tuple[str, ...] = VAGUE_PHRASES
    weasel_words: Tuple[str, ...] = WEASEL_WORDS
    replacements: Tuple[Tuple[str, str], ...] = REPLACEMENTS
    adverb_exclusions: Tuple[str, ...] = ADVERB_EXCLUSIONS
    weak_adverbs: Tuple[str, ...] = WEAK_ADVERBS
    nominal_suffixes: Tuple[str, ...] = NOMINAL_SUFFIXES

    @property
    def hedge_words(self) -> Tuple[str, ...]:
        return tuple(h for h in self.hedges if " " not in h)

    @property
    def hedge_phrases(self) -> Tuple[str, ...]:
        return tuple(h for h in self.hedges if " " in h)

    @property
    def replacement_map(self) -> dict[str, str]:
        return dict(self.replacements)

    def to_dict(self) -> dict[str, object]:
        return {
            "hedges": list(self.hedges),
            "vague_phrases": list(self.vague_phrases),
            "weasel_words": list(self.weasel_words),
            "replacements": {phrase: repl for phrase, repl in self.replacements},
            "adverb_exclusions": list(self.adverb_exclusions),
            "weak_adverbs": list(self.weak_adverbs),
            "nominal_suffixes": list(self.nominal_suffixes),
        }


DEFAULT_LEXICON = Lexicon()

_LIST_FIELDS = (
    "hedges",
    "vague_phrases",
    "weasel_words",
    "adverb_exclusions",
    "weak_adverbs",
    "nominal_suffixes",
)


def lexicon_from_dict(data: Mapping[str, object] | None) -> Lexicon:
    """Build a Lexicon, replacing only the categories present in ``data``."""
    if data is None:
        return DEFAULT_LEXICON
    kwargs: dict[str, object] = {}
    for name in _LIST_FIELDS:
        if name not in data:
            continue
        value = data[name]
        if isinstance(value, str) or not isinstance(value, (list, tuple)):
            raise ValueError(f"Lexicon entry '{name}' must be a list of strings.")
        kwargs[name] = tuple(str(item).lower() for item in value)
    if "replacements" in data:
        value = data["replacements"]
        if not isinstance(value, Mapping):
            raise ValueError("Lexicon entry 'replacements' must be a mapping.")
        kwargs["replacements"] = tuple(
            (str(phrase).lower(), "" if repl is None else str(repl))
            for phrase, repl in value.items()
        )
    return Lexicon(**kwargs)  # type: ignore[arg-type]


def phrase_pattern(phrase: str) -> re.Pattern[str]:
    """Case-insensitive, word-bounded pattern allowing any whitespace between words."""
    words = phrase.split()
    body = r"\s+".join(re.escape(word) for word in words)
    return re.compile(rf"\b{body}\b", re.IGNORECASE)


def words_pattern(words: Tuple[str, ...]) -> re.Pattern[str] | None:
    """Single alternation over escaped words, longest first."""
    if not words:
        return None
    ordered = sorted(words, key=len, reverse=True)
    alternation = "|".join(re.escape(word) for word in ordered)
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


def nominal_pattern(suffixes: Tuple[str, ...]) -> re.Pattern[str] | None:
    if not suffixes:
        return None
    alternation = "|".join(re.escape(suffix) for suffix in suffixes)
    return re.compile(rf"(?:{alternation})$", re.IGNORECASE)


_AUXILIARY = r"\b(?:{})\b".format("|".join(PASSIVE_AUXILIARIES))
_CONTRACTION = r"'(?:{})\b".format("|".join(PASSIVE_CONTRACTIONS))
_GAP = r"(?:\w+(?:'\w+)*\s+){{0,{}}}".format(PASSIVE_MAX_GAP)
_PARTICIPLE = r"\w+(?:{})\b".format("|".join(PARTICIPLE_ENDINGS))

# Estimate only: any be-auxiliary, up to two tokens, then a word ending in ed/en.
PASSIVE_PATTERN = re.compile(
    rf"(?:{_AUXILIARY}|{_CONTRACTION})\s+{_GAP}{_PARTICIPLE}",
    re.IGNORECASE,
)
