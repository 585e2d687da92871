from __future__ import annotations

import bisect
import logging
import math
from typing import Dict, List, Sequence

from .attention import attention_score
from .config import AnalyzerConfig, validate_chunk_size
from .entities import extract_entities
from .models import (
    AnalysisResult,
    Document,
    Efficiency,
    Entity,
    EntityPlacement,
    Token,
    TokenCounts,
)
from .paragraphs import build_paragraphs
from .tokenizers import create_tokenizer
from .windowing import create_chunks

logger = logging.getLogger(__name__)


def analyze_text(
    text: str,
    chunk_size: int | None = None,
    config: AnalyzerConfig | None = None,
) -> AnalysisResult | None:
    """
    Run the full chunking/attention analysis for a single text.

    Returns None when the text is empty or whitespace only; callers should treat
    that as "no analysis available" rather than an error.
    """
    config = config or AnalyzerConfig()
    size = validate_chunk_size(config.chunk_size if chunk_size is None else chunk_size)
    if not text.strip():
        return None

    primary = create_tokenizer("gpt")
    tokens = primary.tokenize(text)
    counts = TokenCounts(
        gpt=len(tokens),
        claude=create_tokenizer("claude").count_tokens(text),
        gemini=create_tokenizer("gemini").count_tokens(text),
    )
    paragraphs = build_paragraphs(text, size, primary)
    chunks = create_chunks(tokens, size)
    placements = place_entities(extract_entities(text), tokens, size, config)

    word_count = count_words(text)
    ratio = words_per_token(word_count, len(tokens))
    result = AnalysisResult(
        chunk_size=size,
        token_counts=counts,
        variance=token_variance(counts),
        paragraphs=tuple(paragraphs),
        chunks=tuple(chunks),
        entities=tuple(placements),
        word_count=word_count,
        words_per_token=ratio,
        efficiency=classify_efficiency(ratio, config),
    )
    logger.debug(
        "Analyzed %d chars: tokens=%s chunks=%d paragraphs=%d entities=%d",
        len(text),
        counts.as_dict(),
        len(chunks),
        len(paragraphs),
        len(placements),
    )
    return result


def analyze_document(
    doc: Document,
    chunk_size: int | None = None,
    config: AnalyzerConfig | None = None,
) -> AnalysisResult | None:
    return analyze_text(doc.text, chunk_size, config)


def analyze_corpus(
    documents: List[Document],
    chunk_size: int | None = None,
    config: AnalyzerConfig | None = None,
) -> Dict[str, AnalysisResult | None]:
    """Analyze all documents and return the per-document results."""
    results: Dict[str, AnalysisResult | None] = {}
    for document in documents:
        results[document.doc_id] = analyze_document(document, chunk_size, config)
    return results


def locate_token(token_starts: Sequence[int], char_offset: int) -> int:
    """
    Index of the first token starting at or after char_offset.

    ``token_starts`` holds the start offsets of the token sequence in order.
    Offsets past the last token start are clamped to the last token index.
    """
    if not token_starts:
        return 0
    idx = bisect.bisect_left(token_starts, char_offset)
    if idx >= len(token_starts):
        logger.warning(
            "Character offset %d is past the last token start (%d); clamping to token %d.",
            char_offset,
            token_starts[-1],
            len(token_starts) - 1,
        )
        return len(token_starts) - 1
    return idx


def place_entities(
    entities: Sequence[Entity],
    tokens: Sequence[Token],
    chunk_size: int,
    config: AnalyzerConfig | None = None,
) -> List[EntityPlacement]:
    """Map each entity to its chunk and score the attention at that position."""
    validate_chunk_size(chunk_size)
    threshold = (config or AnalyzerConfig()).low_attention_threshold
    token_starts = [token.start_char for token in tokens]
    placements: List[EntityPlacement] = []
    for entity in entities:
        token_position = locate_token(token_starts, entity.position)
        position_in_chunk = token_position % chunk_size
        score = attention_score(position_in_chunk, chunk_size)
        placements.append(
            EntityPlacement(
                entity=entity,
                token_position=token_position,
                chunk_index=token_position // chunk_size,
                position_in_chunk=position_in_chunk,
                attention_score=score,
                is_low_attention=score < threshold,
            )
        )
    return placements


def token_variance(counts: TokenCounts) -> int:
    """Spread between tokenizer counts as a whole percentage of the GPT count."""
    if counts.gpt == 0:
        return 0
    values = (counts.gpt, counts.claude, counts.gemini)
    # Half-up rounding, not banker's rounding.
    return math.floor((max(values) - min(values)) / counts.gpt * 100 + 0.5)


def count_words(text: str) -> int:
    return len(text.split())


def words_per_token(word_count: int, token_count: int) -> float:
    if token_count == 0:
        return 0.0
    return word_count / token_count


def classify_efficiency(
    ratio: float, config: AnalyzerConfig | None = None
) -> Efficiency:
    config = config or AnalyzerConfig()
    if ratio >= config.optimal_words_per_token:
        return Efficiency.OPTIMAL
    if ratio >= config.acceptable_words_per_token:
        return Efficiency.ACCEPTABLE
    return Efficiency.VERBOSE
