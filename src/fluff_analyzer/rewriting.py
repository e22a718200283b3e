from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Tuple

from .lexicon import DEFAULT_LEXICON, Lexicon, phrase_pattern, words_pattern

logger = logging.getLogger(__name__)

MULTI_SPACE_RE = re.compile(r"\s{2,}")
SPACE_BEFORE_PUNCT_RE = re.compile(r"\s+([,.!?;:])")


@dataclass(frozen=True)
class _RewritePlan:
    replacements: Tuple[Tuple["re.Pattern[str]", str], ...]
    hedge_words: "re.Pattern[str] | None"
    hedge_phrases: Tuple["re.Pattern[str]", ...]


@lru_cache(maxsize=32)
def _plan_for(lexicon: Lexicon) -> _RewritePlan:
    replaced = {phrase for phrase, _ in lexicon.replacements}
    return _RewritePlan(
        replacements=tuple(
            (phrase_pattern(phrase), repl) for phrase, repl in lexicon.replacements
        ),
        hedge_words=words_pattern(lexicon.hedge_words),
        hedge_phrases=tuple(
            phrase_pattern(phrase)
            for phrase in lexicon.hedge_phrases
            if phrase not in replaced
        ),
    )


def tidy_whitespace(text: str) -> str:
    """Collapse whitespace runs, drop spaces before punctuation, trim."""
    out = MULTI_SPACE_RE.sub(" ", text)
    out = SPACE_BEFORE_PUNCT_RE.sub(r"\1", out)
    return out.strip()


def rewrite(text: str, lexicon: Lexicon | None = None) -> str:
    """
    Return a "safe cuts" preview of ``text``.

    Vague phrases are swapped for their short forms, then single-word and
    multi-word hedges are deleted, then whitespace is tidied. The transform is
    lossy and purely lexical; the result is not guaranteed to be good English.
    """
    plan = _plan_for(lexicon or DEFAULT_LEXICON)
    out = text
    for pattern, replacement in plan.replacements:
        # Callable form keeps replacement text literal (no backreferences).
        out = pattern.sub(lambda _match: replacement, out)
    if plan.hedge_words is not None:
        out = plan.hedge_words.sub("", out)
    for pattern in plan.hedge_phrases:
        out = pattern.sub("", out)
    out = tidy_whitespace(out)
    logger.debug("Rewrote text %d -> %d chars", len(text), len(out))
    return out


class Rewriter(ABC):
    """Abstract interface for producing a rewritten preview of a sentence."""

    @abstractmethod
    def rewrite(self, text: str) -> str:
        """Return rewritten text."""
        raise NotImplementedError


class SafeCutsRewriter(Rewriter):
    """Lexicon-driven filler removal."""

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON) -> None:
        self._lexicon = lexicon

    def rewrite(self, text: str) -> str:
        return rewrite(text, self._lexicon)


class CallableRewriter(Rewriter):
    """Adapt an arbitrary callable into the Rewriter interface."""

    def __init__(self, func: Callable[[str], str]) -> None:
        self._func = func

    def rewrite(self, text: str) -> str:
        return self._func(text)
