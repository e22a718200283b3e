from __future__ import annotations

from pathlib import Path

EXAMPLE_SENTENCE = "This is very basically just really important."

SAMPLE_CORPUS = [
    EXAMPLE_SENTENCE,
    "due to the fact that it rains",
    "In order to win, we kind of need a robust plan.",
    "At this point in time, I think the report was written quickly.",
    "Perhaps the utilization of resources is somewhat inefficient.",
    "As a matter of fact , you know , the results  are  pretty good !",
    "For all intents and purposes the fact that it works is enough.",
    "It was kind of, like, totally done.",
    "Short plain words stay.",
    "",
]


def write_text_file(path: Path, text: str) -> Path:
    """Write a UTF-8 text file for CLI tests and return its path."""
    path.write_text(text, encoding="utf-8")
    return path
