from __future__ import annotations

from typing import List, Sequence

from .config import validate_chunk_size
from .models import Chunk, Token


def create_chunks(tokens: Sequence[Token], chunk_size: int) -> List[Chunk]:
    """Partition tokens into consecutive, non-overlapping chunks of chunk_size."""
    validate_chunk_size(chunk_size)
    if not tokens:
        return []

    chunks: List[Chunk] = []
    for chunk_id, start_idx in enumerate(range(0, len(tokens), chunk_size)):
        window = tokens[start_idx : start_idx + chunk_size]
        chunks.append(
            Chunk(
                chunk_id=chunk_id,
                start_token_idx=start_idx,
                end_token_idx=start_idx + len(window) - 1,
                text="".join(token.text for token in window),
                token_count=len(window),
            )
        )
    return chunks


def hot_zone_ids(chunks: Sequence[Chunk]) -> set[int]:
    """First and last chunk ids, which sit in the primacy/recency zones."""
    if not chunks:
        return set()
    return {chunks[0].chunk_id, chunks[-1].chunk_id}
