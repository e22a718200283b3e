"""
fluff_analyzer package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .annotation import annotate_html, annotate_markers, annotate_segments
from .config import (
    FluffAnalyzerConfig,
    ScoringThresholds,
    config_from_dict,
    config_from_yaml,
    load_config,
)
from .lexicon import DEFAULT_LEXICON, Lexicon, lexicon_from_dict
from .matching import Category, match, match_all
from .models import Hit, HitKind, Report, SentenceReport, SentenceSegment, Span
from .pipeline import analyze
from .rewriting import rewrite
from .spans import merge_spans
from .tokenization import split_sentences, tokenize_words

__all__ = [
    "analyze",
    "rewrite",
    "annotate_html",
    "annotate_markers",
    "annotate_segments",
    "merge_spans",
    "match",
    "match_all",
    "Category",
    "split_sentences",
    "tokenize_words",
    "FluffAnalyzerConfig",
    "ScoringThresholds",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "Lexicon",
    "DEFAULT_LEXICON",
    "lexicon_from_dict",
    "Hit",
    "HitKind",
    "Report",
    "SentenceReport",
    "SentenceSegment",
    "Span",
]

__version__ = "0.1.0"
