from __future__ import annotations

import re

WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(value: object) -> str:
    """Trim and collapse every whitespace run to a single space."""
    if not isinstance(value, str):
        value = str(value)
    return WHITESPACE_RE.sub(" ", value).strip()


def dedupe(items: list[str]) -> list[str]:
    """Drop repeated strings, keeping first occurrences in order."""
    seen: set[str] = set()
    out: list[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out
