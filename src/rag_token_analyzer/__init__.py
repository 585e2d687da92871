"""
rag_token_analyzer package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .analysis import analyze_corpus, analyze_document, analyze_text
from .attention import attention_band, attention_score, attention_strip
from .config import (
    CHUNK_SIZE_PRESETS,
    AnalyzerConfig,
    InvalidChunkSizeError,
    config_from_dict,
    config_from_yaml,
    load_config,
)
from .entities import extract_entities
from .hints import generate_hints
from .paragraphs import split_paragraphs
from .tokenizers import create_tokenizer
from .windowing import create_chunks

__all__ = [
    "AnalyzerConfig",
    "CHUNK_SIZE_PRESETS",
    "InvalidChunkSizeError",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "create_tokenizer",
    "split_paragraphs",
    "create_chunks",
    "extract_entities",
    "attention_score",
    "attention_strip",
    "attention_band",
    "analyze_text",
    "analyze_document",
    "analyze_corpus",
    "generate_hints",
]

__version__ = "0.1.0"
