import pytest

from fluff_analyzer.lexicon import Lexicon
from fluff_analyzer.rewriting import CallableRewriter, SafeCutsRewriter, rewrite, tidy_whitespace
from tests.utils import EXAMPLE_SENTENCE, SAMPLE_CORPUS


def test_rewrite_removes_hedges_from_example():
    assert rewrite(EXAMPLE_SENTENCE) == "This is important."


def test_rewrite_replaces_vague_phrase():
    result = rewrite("due to the fact that it rains")
    assert "because it rains" in result
    assert "due to the fact that" not in result.lower()


@pytest.mark.parametrize(
    "text, expected",
    [
        ("In order to win, we kind of need luck.", "to win, we need luck."),
        ("We left at this point in time.", "We left now."),
        ("For all intents and purposes the fact that it works is enough.", "it works is enough."),
        ("It was kind of, like, totally done.", "It was, like, done."),
    ],
)
def test_rewrite_examples(text, expected):
    assert rewrite(text) == expected


def test_rewrite_matches_phrases_across_whitespace_runs():
    assert rewrite("Due  to the\nfact that it rains") == "because it rains"


def test_tidy_whitespace_collapses_and_fixes_punctuation():
    assert tidy_whitespace("  Well ,  that is   it .  ") == "Well, that is it."


@pytest.mark.parametrize("text", SAMPLE_CORPUS)
def test_rewrite_reaches_fixed_point(text):
    once = rewrite(text)
    assert rewrite(once) == once


def test_rewrite_with_custom_lexicon():
    lexicon = Lexicon(hedges=("arguably",), replacements=(("with regard to", "about"),))
    assert rewrite("Arguably very good with regard to cost.", lexicon) == "very good about cost."
    assert SafeCutsRewriter(lexicon).rewrite("This is arguably fine.") == "This is fine."


def test_replacement_text_is_literal():
    lexicon = Lexicon(hedges=(), replacements=(("in order to", r"\1"),))
    assert rewrite("in order to go", lexicon) == r"\1 go"


def test_callable_rewriter_delegates():
    rewriter = CallableRewriter(str.upper)
    assert rewriter.rewrite("quiet") == "QUIET"
