import dataclasses
import time

import pytest

from rag_token_analyzer.analysis import (
    analyze_corpus,
    analyze_text,
    classify_efficiency,
    locate_token,
    place_entities,
    token_variance,
    words_per_token,
)
from rag_token_analyzer.config import AnalyzerConfig, InvalidChunkSizeError
from rag_token_analyzer.models import Document, Efficiency, Entity, TokenCounts
from rag_token_analyzer.tokenizers import GPTTokenizer
from tests.utils import make_tokens

MID_CHUNK_ENTITY_TEXT = "word " * 25 + "Jane Smith went home."


@pytest.mark.parametrize("text", ["", "   ", "\n\n\t"])
def test_empty_text_has_no_analysis(text):
    assert analyze_text(text, 100) is None


def test_two_short_paragraphs_fit_in_one_chunk():
    text = "Short first paragraph.\n\nShort second paragraph."
    result = analyze_text(text, 100)

    assert result is not None
    assert len(result.chunks) == 1
    assert len(result.paragraphs) == 2
    assert not any(p.exceeds_chunk for p in result.paragraphs)
    assert result.chunks[0].text == text


def test_token_counts_variance_and_efficiency():
    result = analyze_text("Hello, world!", 100)

    assert result is not None
    assert result.token_counts == TokenCounts(gpt=7, claude=5, gemini=5)
    assert result.variance == 29
    assert result.word_count == 2
    assert result.words_per_token == pytest.approx(2 / 7)
    assert result.efficiency is Efficiency.VERBOSE


def test_entities_map_to_the_token_where_they_start():
    text = "Our product uses the API built by Jane Smith."
    result = analyze_text(text, 10)
    tokens = GPTTokenizer().tokenize(text)

    assert result is not None
    found = {placement.text for placement in result.entities}
    assert {"API", "Jane Smith"} <= found
    for placement in result.entities:
        assert tokens[placement.token_position].start_char == placement.position
        assert placement.chunk_index == placement.token_position // 10
        assert placement.position_in_chunk == placement.token_position % 10


def test_entity_in_middle_of_chunk_is_low_attention():
    result = analyze_text(MID_CHUNK_ENTITY_TEXT, 100)

    assert result is not None
    (placement,) = result.entities
    assert placement.text == "Jane Smith"
    assert placement.token_position == 50
    assert placement.attention_score == pytest.approx(0.55)
    assert placement.is_low_attention is True


def test_place_entities_scores_by_position_in_chunk():
    tokens = make_tokens(30)
    start, middle = place_entities(
        [Entity("Bar", 0), Entity("Foo", 15)], tokens, chunk_size=10
    )

    assert (start.chunk_index, start.position_in_chunk) == (0, 0)
    assert start.attention_score == pytest.approx(0.95)
    assert start.is_low_attention is False
    assert (middle.chunk_index, middle.position_in_chunk) == (1, 5)
    assert middle.is_low_attention is True


def test_low_attention_threshold_is_configurable():
    config = AnalyzerConfig(low_attention_threshold=0.5)
    (placement,) = place_entities([Entity("Foo", 5)], make_tokens(10), 10, config)
    assert placement.is_low_attention is False


def test_locate_token_finds_first_token_at_or_after_offset():
    tokens = GPTTokenizer().tokenize("abc defgh")
    assert [t.text for t in tokens] == ["abc", " ", "defg", "h"]
    starts = [t.start_char for t in tokens]
    assert locate_token(starts, 0) == 0
    assert locate_token(starts, 4) == 2
    assert locate_token(starts, 5) == 3


def test_locate_token_clamps_offsets_past_the_end(caplog):
    starts = [t.start_char for t in GPTTokenizer().tokenize("abc defgh")]
    with caplog.at_level("WARNING"):
        assert locate_token(starts, 100) == 3
    assert "clamping" in caplog.text
    assert locate_token([], 10) == 0


def test_place_entities_scales_to_large_inputs():
    tokens = make_tokens(200_000)
    entities = [Entity("Acme", offset) for offset in range(0, 200_000, 10)]

    started = time.perf_counter()
    placements = place_entities(entities, tokens, chunk_size=100)
    elapsed = time.perf_counter() - started

    assert len(placements) == 20_000
    assert placements[-1].token_position == 199_990
    assert elapsed < 5.0


def test_large_document_analysis_finishes_quickly():
    """A few hundred KB of entity-dense text is analyzed in roughly linear time."""
    text = "We met Jane Smith at the API summit. " * 8_000

    started = time.perf_counter()
    result = analyze_text(text, 100)
    elapsed = time.perf_counter() - started

    assert result is not None
    assert len(result.entities) == 16_000
    assert elapsed < 20.0


def test_zero_token_guards():
    assert token_variance(TokenCounts(gpt=0, claude=3, gemini=1)) == 0
    assert words_per_token(5, 0) == 0.0


@pytest.mark.parametrize(
    ("ratio", "label"),
    [
        (0.80, Efficiency.OPTIMAL),
        (0.75, Efficiency.OPTIMAL),
        (0.70, Efficiency.ACCEPTABLE),
        (0.65, Efficiency.ACCEPTABLE),
        (0.40, Efficiency.VERBOSE),
        (0.0, Efficiency.VERBOSE),
    ],
)
def test_efficiency_labels(ratio, label):
    assert classify_efficiency(ratio) is label


def test_chunk_size_defaults_to_config():
    result = analyze_text("Some text here.", config=AnalyzerConfig(chunk_size=3))
    assert result is not None
    assert result.chunk_size == 3
    assert len(result.chunks) == 2


@pytest.mark.parametrize("chunk_size", [0, -1])
def test_invalid_chunk_size_is_rejected(chunk_size):
    with pytest.raises(InvalidChunkSizeError):
        analyze_text("Some text.", chunk_size)


def test_results_are_immutable():
    result = analyze_text("Some text.", 100)
    assert result is not None
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.variance = 5  # type: ignore[misc]


def test_analyze_corpus_keys_results_by_doc_id():
    documents = [
        Document(doc_id="a.txt", text="Alpha text."),
        Document(doc_id="empty.txt", text="  "),
    ]
    results = analyze_corpus(documents, 100)
    assert set(results) == {"a.txt", "empty.txt"}
    assert results["a.txt"] is not None
    assert results["empty.txt"] is None
