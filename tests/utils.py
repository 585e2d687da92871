from __future__ import annotations

from typing import Iterable, Sequence

from rag_token_analyzer.models import (
    AnalysisResult,
    Chunk,
    Efficiency,
    Entity,
    EntityPlacement,
    Paragraph,
    Token,
    TokenCounts,
)


def join_tokens(tokens: Iterable[Token]) -> str:
    return "".join(token.text for token in tokens)


def make_tokens(count: int) -> list[Token]:
    """Single-character tokens covering ``count`` characters."""
    return [Token(text=str(idx % 10), start_char=idx, end_char=idx + 1) for idx in range(count)]


def make_placement(
    text: str, chunk_index: int = 0, low_attention: bool = False
) -> EntityPlacement:
    score = 0.55 if low_attention else 0.95
    return EntityPlacement(
        entity=Entity(text=text, position=0),
        token_position=0,
        chunk_index=chunk_index,
        position_in_chunk=0,
        attention_score=score,
        is_low_attention=low_attention,
    )


def make_paragraph(index: int, token_count: int, chunk_size: int) -> Paragraph:
    return Paragraph(
        index=index,
        text=f"paragraph {index}",
        token_count=token_count,
        exceeds_chunk=token_count > chunk_size,
        chunks_required=-(-token_count // chunk_size),
    )


def make_result(
    *,
    chunk_size: int = 100,
    entities: Sequence[EntityPlacement] = (),
    paragraphs: Sequence[Paragraph] = (),
    chunk_count: int = 1,
    words_per_token: float = 0.8,
    efficiency: Efficiency = Efficiency.OPTIMAL,
) -> AnalysisResult:
    """Build an AnalysisResult by hand for hint-rule tests."""
    chunks = tuple(
        Chunk(
            chunk_id=idx,
            start_token_idx=idx * chunk_size,
            end_token_idx=idx * chunk_size + chunk_size - 1,
            text="",
            token_count=chunk_size,
        )
        for idx in range(chunk_count)
    )
    return AnalysisResult(
        chunk_size=chunk_size,
        token_counts=TokenCounts(gpt=10, claude=10, gemini=10),
        variance=0,
        paragraphs=tuple(paragraphs),
        chunks=chunks,
        entities=tuple(entities),
        word_count=8,
        words_per_token=words_per_token,
        efficiency=efficiency,
    )
