from fluff_analyzer.tokenization import count_words, split_sentences, tokenize_words


def test_tokenize_words_returns_offsets():
    text = "Don't panic, it's fine!"
    tokens = tokenize_words(text)

    assert [token.text for token in tokens] == ["Don't", "panic", "it's", "fine"]
    assert tokens[0].start_char == 0
    assert tokens[0].end_char == 5
    for token in tokens:
        assert text[token.start_char : token.end_char] == token.text


def test_tokenize_words_splits_hyphens_and_ignores_punctuation():
    tokens = tokenize_words("world-class -- results...")
    assert [token.text for token in tokens] == ["world", "class", "results"]
    assert count_words("world-class -- results...") == 3


def test_split_sentences_trims_but_keeps_source_offsets():
    text = "Hello there.  How are you?  Fine"
    segments = split_sentences(text)

    assert [s.text for s in segments] == ["Hello there.", "How are you?", "Fine"]
    assert (segments[1].start, segments[1].end) == (14, 26)
    assert (segments[2].start, segments[2].end) == (28, 32)
    for segment in segments:
        assert text[segment.start : segment.end] == segment.text


def test_split_sentences_without_terminators_returns_whole_text():
    segments = split_sentences("no punctuation here")
    assert len(segments) == 1
    assert (segments[0].start, segments[0].end) == (0, 19)


def test_split_sentences_never_empty_for_non_empty_input():
    segments = split_sentences("   ")
    assert len(segments) == 1
    assert segments[0].text == "   "
    assert split_sentences("") == []


def test_split_sentences_keeps_terminator_with_sentence():
    segments = split_sentences("Stop! Go? Yes.")
    assert [s.text for s in segments] == ["Stop!", "Go?", "Yes."]
