import pytest

from fluff_analyzer.config import FluffAnalyzerConfig
from fluff_analyzer.models import HitKind
from fluff_analyzer.pipeline import analyze
from fluff_analyzer.rewriting import CallableRewriter
from fluff_analyzer.tokenization import tokenize_words
from tests.utils import EXAMPLE_SENTENCE, SAMPLE_CORPUS


def test_end_to_end_example():
    """Hedges and weasel words push the example into the top tier."""
    report = analyze(EXAMPLE_SENTENCE)

    hedges = {hit.text.lower() for hit in report.hits if hit.kind is HitKind.HEDGE}
    weasels = {hit.text.lower() for hit in report.hits if hit.kind is HitKind.WEASEL}
    assert hedges == {"very", "basically", "just", "really"}
    assert weasels == {"important"}
    assert report.total_hits >= 5
    assert report.word_count == 7
    assert report.hit_ratio_percent >= 70
    assert report.verdict == "FLUFF OVERLOAD"

    assert len(report.sentences) == 1
    sentence = report.sentences[0]
    assert sentence.verdict == "OVERLOAD"
    assert sentence.rewritten == "This is important."
    assert report.annotated_text == "This is «very» «basically» «just» «really» «important»."


def test_empty_input_yields_zero_report():
    report = analyze("")

    assert report.word_count == 0
    assert report.total_hits == 0
    assert report.hit_ratio_percent == 0
    assert report.verdict == "FLUFF-FREE"
    assert report.sentences == []
    assert report.merged_spans == []
    assert report.annotated_html == ""
    assert report.annotated_text == ""
    assert report.cuts == []


@pytest.mark.parametrize("text", ["   ", "!!!", "12345", "\n\n", "plain words here"])
def test_degenerate_input_never_raises(text):
    report = analyze(text)
    assert report.verdict == "FLUFF-FREE"
    assert len(report.sentences) >= 1


@pytest.mark.parametrize("text", SAMPLE_CORPUS)
def test_word_count_matches_independent_tokenization(text):
    report = analyze(text)
    assert report.word_count == len(tokenize_words(text))
    assert report.word_count == sum(sentence.word_count for sentence in report.sentences)
    assert report.total_hits == sum(len(sentence.hits) for sentence in report.sentences)


@pytest.mark.parametrize("text", SAMPLE_CORPUS)
def test_hits_and_merged_spans_index_into_report_text(text):
    report = analyze(text)
    for hit in report.hits:
        assert report.text[hit.span.start : hit.span.end] == hit.text
    for left, right in zip(report.merged_spans, report.merged_spans[1:]):
        assert left.end <= right.start


def test_counts_by_category():
    report = analyze("In order to win we kind of need a robust plan.")

    assert report.word_count == 11
    assert report.counts.vague_phrases == 1
    assert report.counts.hedges_phrases == 1
    assert report.counts.weasel_words == 1
    assert report.counts.total_hits == report.total_hits == 3
    assert report.hit_ratio_percent == 27.27
    assert report.cuts == ["Replace 'in order to' → 'to'"]


def test_cuts_are_deduplicated_and_capped():
    text = (
        "Due to the fact that it rains, very really just actually basically "
        "literally totally absolutely completely essentially. Very wet."
    )
    report = analyze(text)

    assert len(report.cuts) == 8
    assert report.cuts[0] == "Replace 'due to the fact that' → 'because'"
    assert report.cuts[1] == "Delete 'the fact that'"
    assert report.cuts[2] == "Consider deleting hedge: 'very'"
    assert len(set(report.cuts)) == len(report.cuts)


def test_samples_are_lowercased_and_distinct():
    report = analyze("Very very good. Really quickly done.")
    assert report.samples.hedge_words == ["very", "really"]
    assert report.samples.adverbs_ly == ["really", "quickly"]


def test_sentences_are_scored_independently():
    report = analyze("The plan works. This is very basically just really important.")
    assert [s.verdict for s in report.sentences] == ["OK", "OVERLOAD"]
    assert report.sentences[1].start == 16
    assert report.verdict == "FLUFF OVERLOAD"


def test_whitespace_normalization_rewrites_report_text():
    config = FluffAnalyzerConfig(normalize_whitespace=True)
    report = analyze("Very   good.\n\nReally.", config)
    assert report.text == "Very good. Really."
    assert [s.text for s in report.sentences] == ["Very good.", "Really."]


def test_html_output_escapes_untrusted_text():
    report = analyze('<script>alert("very")</script>')
    assert "<script>" not in report.annotated_html
    assert "&lt;script&gt;" in report.annotated_html
    assert "<mark>very</mark>" in report.annotated_html


def test_injected_rewriter_and_disabled_previews():
    report = analyze("Very good.", rewriter=CallableRewriter(str.upper))
    assert report.sentences[0].rewritten == "VERY GOOD."

    report = analyze("Very good.", FluffAnalyzerConfig(sentence_rewrites=False))
    assert report.sentences[0].rewritten is None


def test_report_payload_shape():
    payload = analyze(EXAMPLE_SENTENCE).to_dict()
    assert set(payload) == {
        "wordCount",
        "totalHits",
        "hitRatioPercent",
        "verdict",
        "sentences",
        "mergedSpans",
        "counts",
        "samples",
        "annotatedHTML",
        "annotatedText",
        "cuts",
    }
    assert payload["counts"]["totalHits"] == payload["totalHits"]
    assert payload["sentences"][0]["verdict"] == "OVERLOAD"
    assert payload["mergedSpans"][0] == [8, 12]
