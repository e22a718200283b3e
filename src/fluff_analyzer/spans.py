from __future__ import annotations

from typing import Iterable, List

from .models import Hit, Span


def merge_spans(spans: Iterable[Span], merge_touching: bool = False) -> List[Span]:
    """
    Collapse overlapping spans into a minimal, disjoint, ascending cover.

    A span joins the open span only when it starts strictly before the open
    span ends. Touching spans (``next.start == open.end``) stay separate unless
    ``merge_touching`` is set.
    """
    ordered = sorted(spans, key=lambda span: (span.start, span.end))
    if not ordered:
        return []

    merged: List[Span] = []
    current = ordered[0]
    for span in ordered[1:]:
        overlaps = (
            span.start <= current.end if merge_touching else span.start < current.end
        )
        if overlaps:
            current = Span(current.start, max(current.end, span.end))
        else:
            merged.append(current)
            current = span
    merged.append(current)
    return merged


def merge_hit_spans(hits: Iterable[Hit], merge_touching: bool = False) -> List[Span]:
    return merge_spans((hit.span for hit in hits), merge_touching=merge_touching)
