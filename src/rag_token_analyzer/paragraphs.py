from __future__ import annotations

import math
import re
from typing import List

from .config import validate_chunk_size
from .models import Paragraph
from .tokenizers import GPTTokenizer, Tokenizer

PARAGRAPH_BREAK_RE = re.compile(r"\n{2,}")


def split_paragraphs(text: str) -> List[str]:
    """Split text on blank lines, dropping empty paragraphs."""
    if not text:
        return []
    paragraphs: List[str] = []
    for block in PARAGRAPH_BREAK_RE.split(text):
        stripped = block.strip()
        if stripped:
            paragraphs.append(stripped)
    return paragraphs


def build_paragraphs(
    text: str,
    chunk_size: int,
    tokenizer: Tokenizer | None = None,
) -> List[Paragraph]:
    """Token-count each paragraph and work out how many chunks it needs on its own."""
    validate_chunk_size(chunk_size)
    tokenizer = tokenizer or GPTTokenizer()
    records: List[Paragraph] = []
    for idx, paragraph in enumerate(split_paragraphs(text)):
        token_count = tokenizer.count_tokens(paragraph)
        records.append(
            Paragraph(
                index=idx,
                text=paragraph,
                token_count=token_count,
                exceeds_chunk=token_count > chunk_size,
                chunks_required=math.ceil(token_count / chunk_size),
            )
        )
    return records
