"""
Renderers over merged spans.

``annotate_segments`` hands raw slices to a UI that owns its own escaping.
``annotate_html`` and ``annotate_markers`` produce inline-marked strings; the
HTML variant escapes all literal text because the source is untrusted input.
"""

from __future__ import annotations

import html
from typing import Callable, List, Sequence

from .models import AnnotatedSegment, Span


def annotate_segments(text: str, spans: Sequence[Span]) -> List[AnnotatedSegment]:
    """Split ``text`` into alternating plain and highlighted segments."""
    segments: List[AnnotatedSegment] = []
    last = 0
    for span in spans:
        if span.start > last:
            segments.append(
                AnnotatedSegment(text[last : span.start], last, span.start, False)
            )
        if span.end > span.start:
            segments.append(
                AnnotatedSegment(text[span.start : span.end], span.start, span.end, True)
            )
        last = max(last, span.end)
    if last < len(text):
        segments.append(AnnotatedSegment(text[last:], last, len(text), False))
    return segments


def _render(
    text: str,
    spans: Sequence[Span],
    literal: Callable[[str], str],
    open_marker: str,
    close_marker: str,
) -> str:
    parts: List[str] = []
    for segment in annotate_segments(text, spans):
        if segment.highlighted:
            parts.append(open_marker + literal(segment.text) + close_marker)
        else:
            parts.append(literal(segment.text))
    return "".join(parts)


def escape_html(value: str) -> str:
    """Escape ``& < > " '`` for safe inclusion in HTML."""
    return html.escape(value, quote=True)


def annotate_html(
    text: str,
    spans: Sequence[Span],
    tag: str = "mark",
    css_class: str | None = None,
) -> str:
    """Wrap each span in ``<tag>`` with every literal character escaped."""
    attrs = f' class="{escape_html(css_class)}"' if css_class else ""
    return _render(text, spans, escape_html, f"<{tag}{attrs}>", f"</{tag}>")


def annotate_markers(
    text: str,
    spans: Sequence[Span],
    open_marker: str = "«",
    close_marker: str = "»",
) -> str:
    """Wrap each span in plain-text markers (``«...»`` by default), unescaped."""
    return _render(text, spans, lambda value: value, open_marker, close_marker)
