from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Iterable, List

from ..models import Token

# Word characters are ASCII only; whitespace is any Unicode whitespace.
WORD_CHARS = "A-Za-z0-9_"
WHITESPACE_RUN = r"\s+"
DIGIT_RUN = r"[0-9]+"
PUNCTUATION = r"[.,!?;:'\"()\[\]{}]"
SPECIAL_CHAR = rf"[^\s{WORD_CHARS}]"


@dataclass(slots=True, frozen=True)
class TokenPattern:
    """A named pattern tried at a single scan position."""

    name: str
    regex: re.Pattern[str]

    @classmethod
    def compile(cls, name: str, pattern: str) -> "TokenPattern":
        return cls(name=name, regex=re.compile(pattern))

    def try_match(self, text: str, pos: int) -> str | None:
        """Return the non-empty substring matched at ``pos`` or None."""
        match = self.regex.match(text, pos)
        if match is None or match.end() == pos:
            return None
        return match.group()


class Tokenizer(ABC):
    """Abstract tokenizer that approximates a model family's segmentation."""

    name: ClassVar[str] = ""

    @abstractmethod
    def tokenize(self, text: str) -> List[Token]:
        """Return tokens whose texts concatenate back to ``text``."""
        raise NotImplementedError

    def count_tokens(self, text: str) -> int:
        return len(self.tokenize(text))


class PatternTokenizer(Tokenizer):
    """
    Left-to-right scanner over an ordered tuple of patterns.

    At each position the first matching pattern wins; if none match, a single
    raw character is consumed so every iteration makes progress.
    """

    patterns: ClassVar[tuple[TokenPattern, ...]] = ()

    def tokenize(self, text: str) -> List[Token]:
        tokens: List[Token] = []
        pos = 0
        length = len(text)
        while pos < length:
            piece = self._match_at(text, pos)
            if piece is None:
                piece = text[pos]
            for part in self.split_piece(piece):
                tokens.append(Token(text=part, start_char=pos, end_char=pos + len(part)))
                pos += len(part)
        return tokens

    def split_piece(self, piece: str) -> Iterable[str]:
        """Hook for subword splitting of a matched piece."""
        return (piece,)

    def _match_at(self, text: str, pos: int) -> str | None:
        for pattern in self.patterns:
            matched = pattern.try_match(text, pos)
            if matched is not None:
                return matched
        return None
