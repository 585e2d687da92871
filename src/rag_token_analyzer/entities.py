from __future__ import annotations

import bisect
import re
from typing import List, Tuple

from .models import Entity

CAPITALIZED_PHRASE_RE = re.compile(r"[A-Z][a-z]+(?: [A-Z][a-z]+)*")
ACRONYM_RE = re.compile(r"\b[A-Z]{2,}\b")
# A sentence starts at the beginning of the text or after terminal punctuation
# plus whitespace; leading quotes/brackets still belong to the start.
SENTENCE_START_RE = re.compile(r"(?:\A|[.!?]\s+)[^A-Za-z0-9]*")
MIN_PHRASE_LENGTH = 3


def sentence_start_ranges(text: str) -> List[Tuple[int, int]]:
    """Return inclusive character ranges where a sentence's first word may begin."""
    return [(match.start(), match.end()) for match in SENTENCE_START_RE.finditer(text)]


def extract_capitalized_phrases(text: str) -> List[Entity]:
    """Capitalized word runs that do not open a sentence."""
    ranges = sentence_start_ranges(text)
    range_starts = [start for start, _ in ranges]
    entities: List[Entity] = []
    for match in CAPITALIZED_PHRASE_RE.finditer(text):
        phrase = match.group()
        if len(phrase) < MIN_PHRASE_LENGTH:
            continue
        if _in_ranges(match.start(), ranges, range_starts):
            continue
        entities.append(Entity(text=phrase, position=match.start()))
    return entities


def extract_acronyms(text: str) -> List[Entity]:
    return [
        Entity(text=match.group(), position=match.start())
        for match in ACRONYM_RE.finditer(text)
    ]


def extract_entities(text: str) -> List[Entity]:
    """
    Detect proper-noun and acronym candidates.

    Phrases come first, then acronyms. Repeats are kept: an entity mentioned
    three times yields three entries.
    """
    if not text:
        return []
    return extract_capitalized_phrases(text) + extract_acronyms(text)


def _in_ranges(
    offset: int, ranges: List[Tuple[int, int]], range_starts: List[int]
) -> bool:
    # Ranges come from finditer, so they are sorted and do not overlap.
    idx = bisect.bisect_right(range_starts, offset) - 1
    return idx >= 0 and offset <= ranges[idx][1]
