from __future__ import annotations

from .base import PatternTokenizer, Tokenizer, TokenPattern
from .claude import ClaudeTokenizer
from .gemini import GeminiTokenizer
from .gpt import GPTTokenizer

__all__ = [
    "Tokenizer",
    "TokenPattern",
    "PatternTokenizer",
    "GPTTokenizer",
    "ClaudeTokenizer",
    "GeminiTokenizer",
    "TOKENIZER_FAMILIES",
    "create_tokenizer",
]

TOKENIZER_FAMILIES: dict[str, type[Tokenizer]] = {
    "gpt": GPTTokenizer,
    "claude": ClaudeTokenizer,
    "gemini": GeminiTokenizer,
}

_ALIASES = {
    "primary": "gpt",
    "secondary": "claude",
    "tertiary": "gemini",
}


def create_tokenizer(name: str) -> Tokenizer:
    """Factory for building tokenizers by family name."""
    normalized = name.lower().strip()
    normalized = _ALIASES.get(normalized, normalized)
    tokenizer_cls = TOKENIZER_FAMILIES.get(normalized)
    if tokenizer_cls is None:
        raise ValueError(f"Unknown tokenizer '{name}'.")
    return tokenizer_cls()
