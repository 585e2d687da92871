from __future__ import annotations

from .base import DIGIT_RUN, SPECIAL_CHAR, WHITESPACE_RUN, PatternTokenizer, TokenPattern

# SentencePiece marks word starts with U+2581.
WORD_BOUNDARY_MARKER = "▁"


class GeminiTokenizer(PatternTokenizer):
    """SentencePiece-like approximation: alphabetic pieces of up to six letters."""

    name = "gemini"
    patterns = (
        TokenPattern.compile("alpha", rf"{WORD_BOUNDARY_MARKER}?[A-Za-z]{{1,6}}"),
        TokenPattern.compile("whitespace", WHITESPACE_RUN),
        TokenPattern.compile("digits", DIGIT_RUN),
        TokenPattern.compile("special", SPECIAL_CHAR),
    )
