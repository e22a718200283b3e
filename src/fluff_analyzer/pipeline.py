from __future__ import annotations

import logging
import re
from typing import Iterable, List

from .annotation import annotate_html, annotate_markers
from .config import FluffAnalyzerConfig
from .lexicon import Lexicon
from .models import Hit, HitCounts, HitKind, HitSamples, Report, SentenceReport
from .rewriting import Rewriter, SafeCutsRewriter
from .scoring import document_ratio, document_verdict, score_sentences
from .spans import merge_hit_spans
from .textutils import dedupe, normalize_whitespace
from .tokenization import count_words, is_single_token, split_sentences

logger = logging.getLogger(__name__)

_SPACES_RE = re.compile(r"\s+")


def analyze(
    text: str,
    config: FluffAnalyzerConfig | None = None,
    rewriter: Rewriter | None = None,
) -> Report:
    """
    Detect fluff in ``text`` and build a Report.

    Total over every string: empty or punctuation-free input yields a
    well-formed zero report. All spans in the report index into
    ``Report.text``, which equals the input unless whitespace normalization is
    enabled in ``config``.
    """
    cfg = config or FluffAnalyzerConfig()
    lexicon = cfg.lexicon
    source = normalize_whitespace(text) if cfg.normalize_whitespace else text

    sentences = score_sentences(split_sentences(source), lexicon, cfg.thresholds)
    if cfg.sentence_rewrites:
        preview = rewriter or SafeCutsRewriter(lexicon)
        for sentence in sentences:
            sentence.rewritten = preview.rewrite(sentence.text)

    hits = _document_hits(sentences)
    word_count = count_words(source)
    ratio = document_ratio(len(hits), word_count)
    verdict = document_verdict(ratio, cfg.thresholds)
    merged = merge_hit_spans(hits, merge_touching=cfg.merge_touching)

    report = Report(
        text=source,
        word_count=word_count,
        total_hits=len(hits),
        hit_ratio_percent=ratio,
        verdict=verdict,
        sentences=sentences,
        hits=hits,
        merged_spans=merged,
        counts=count_hits(hits),
        samples=sample_hits(hits, cfg.sample_limit),
        annotated_html=annotate_html(
            source, merged, tag=cfg.highlight_tag, css_class=cfg.highlight_class
        ),
        annotated_text=annotate_markers(source, merged),
        cuts=suggest_cuts(hits, lexicon, cfg.max_suggestions),
    )
    logger.debug(
        "Analyzed %d words in %d sentences: %d hits (%.2f%%) -> %s",
        word_count,
        len(sentences),
        len(hits),
        ratio,
        verdict,
    )
    return report


def _document_hits(sentences: Iterable[SentenceReport]) -> List[Hit]:
    hits: List[Hit] = []
    for sentence in sentences:
        hits.extend(sentence.hits)
    return hits


def count_hits(hits: Iterable[Hit]) -> HitCounts:
    """Tally raw hits per category (multi-word hedges counted apart from single words)."""
    counts = HitCounts()
    for hit in hits:
        if hit.kind is HitKind.HEDGE:
            if is_single_token(hit.text):
                counts.hedges_single += 1
            else:
                counts.hedges_phrases += 1
        elif hit.kind is HitKind.VAGUE:
            counts.vague_phrases += 1
        elif hit.kind is HitKind.WEASEL:
            counts.weasel_words += 1
        elif hit.kind is HitKind.ADVERB:
            counts.adverbs_ly += 1
        elif hit.kind is HitKind.NOMINAL:
            counts.nominalizations += 1
        elif hit.kind is HitKind.PASSIVE:
            counts.passive_est += 1
    return counts


def sample_hits(hits: Iterable[Hit], limit: int) -> HitSamples:
    """Distinct lower-cased words per single-word category, first ``limit`` of each."""
    ordered = sorted(hits, key=lambda hit: hit.span.start)

    def _words(kind: HitKind) -> List[str]:
        words = [
            hit.text.lower()
            for hit in ordered
            if hit.kind is kind and (kind is not HitKind.HEDGE or is_single_token(hit.text))
        ]
        return dedupe(words)[: max(0, limit)]

    return HitSamples(
        hedge_words=_words(HitKind.HEDGE),
        weasel_words=_words(HitKind.WEASEL),
        adverbs_ly=_words(HitKind.ADVERB),
        nominalizations=_words(HitKind.NOMINAL),
    )


def suggest_cuts(hits: Iterable[Hit], lexicon: Lexicon, limit: int) -> List[str]:
    """Plain-language cut suggestions: vague-phrase swaps first, then weak hedges."""
    ordered = sorted(hits, key=lambda hit: hit.span.start)
    replacements = lexicon.replacement_map
    weak = {word.lower() for word in lexicon.weak_adverbs}

    suggestions: List[str] = []
    for hit in ordered:
        if hit.kind is not HitKind.VAGUE:
            continue
        phrase = _SPACES_RE.sub(" ", hit.text.lower())
        if phrase not in replacements:
            continue
        replacement = replacements[phrase]
        if replacement:
            suggestions.append(f"Replace '{phrase}' → '{replacement}'")
        else:
            suggestions.append(f"Delete '{phrase}'")
    for hit in ordered:
        word = hit.text.lower()
        if hit.kind is HitKind.HEDGE and word in weak:
            suggestions.append(f"Consider deleting hedge: '{word}'")
    return dedupe(suggestions)[: max(0, limit)]
