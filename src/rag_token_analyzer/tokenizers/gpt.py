from __future__ import annotations

import re
from typing import Iterable

from .base import (
    DIGIT_RUN,
    PUNCTUATION,
    SPECIAL_CHAR,
    WHITESPACE_RUN,
    PatternTokenizer,
    TokenPattern,
)

ALPHA_RE = re.compile(r"[A-Za-z]+")
SUBWORD_LENGTH = 4


class GPTTokenizer(PatternTokenizer):
    """
    Approximation of cl100k_base style segmentation.

    Alphabetic words longer than four characters are cut into four-character
    pieces to mimic byte-pair merges on uncommon words.
    """

    name = "gpt"
    patterns = (
        TokenPattern.compile("whitespace", WHITESPACE_RUN),
        TokenPattern.compile("capitalized", r"[A-Z][a-z]+"),
        TokenPattern.compile("lowercase", r"[a-z]+"),
        TokenPattern.compile("digits", DIGIT_RUN),
        TokenPattern.compile("punctuation", PUNCTUATION),
        TokenPattern.compile("special", SPECIAL_CHAR),
    )

    def split_piece(self, piece: str) -> Iterable[str]:
        if len(piece) <= SUBWORD_LENGTH or not ALPHA_RE.fullmatch(piece):
            return (piece,)
        return [
            piece[idx : idx + SUBWORD_LENGTH]
            for idx in range(0, len(piece), SUBWORD_LENGTH)
        ]
