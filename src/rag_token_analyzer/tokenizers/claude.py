from __future__ import annotations

from .base import (
    DIGIT_RUN,
    PUNCTUATION,
    SPECIAL_CHAR,
    WHITESPACE_RUN,
    PatternTokenizer,
    TokenPattern,
)


class ClaudeTokenizer(PatternTokenizer):
    """Approximation of Anthropic's tokenizer: shorter capped word pieces."""

    name = "claude"
    patterns = (
        TokenPattern.compile("whitespace", WHITESPACE_RUN),
        TokenPattern.compile("capitalized", r"[A-Z][a-z]{0,5}"),
        TokenPattern.compile("lowercase", r"[a-z]{1,5}"),
        TokenPattern.compile("digits", DIGIT_RUN),
        TokenPattern.compile("punctuation", PUNCTUATION),
        TokenPattern.compile("special", SPECIAL_CHAR),
    )
