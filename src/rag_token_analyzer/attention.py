"""
Positional attention model.

Attention-based models weight the start (primacy) and end (recency) of a
context window more heavily than the middle. Scores follow a U-shaped curve
over the relative position ``r = position / chunk_size``:

* ``r < 0.15``: ``0.95 - 0.5 * r``
* ``r > 0.85``: ``0.70 + 1.5 * (r - 0.85)``
* otherwise: ``0.55 + 0.3 * |r - 0.5|`` (the murky middle)
"""

from __future__ import annotations

from typing import List

from .config import validate_chunk_size
from .models import AttentionBand

PRIMACY_CUTOFF = 0.15
RECENCY_CUTOFF = 0.85
MIDPOINT = 0.5
DEFAULT_STRIP_SAMPLES = 20


def attention_score(position_in_chunk: float, chunk_size: int) -> float:
    """Return the attention score for a position inside a chunk."""
    validate_chunk_size(chunk_size)
    relative = position_in_chunk / chunk_size
    if relative < PRIMACY_CUTOFF:
        return 0.95 - relative * 0.5
    if relative > RECENCY_CUTOFF:
        return 0.70 + (relative - RECENCY_CUTOFF) * 1.5
    return 0.55 + abs(relative - MIDPOINT) * 0.3


def attention_strip(
    token_count: int, samples: int = DEFAULT_STRIP_SAMPLES
) -> List[float]:
    """Sample the attention curve at ``r = i / samples`` across a chunk."""
    if samples < 1:
        raise ValueError("samples must be at least 1.")
    return [
        attention_score(idx / samples * token_count, token_count)
        for idx in range(samples)
    ]


def attention_band(score: float) -> AttentionBand:
    if score >= 0.85:
        return AttentionBand.HOT
    if score >= 0.70:
        return AttentionBand.WARM
    if score >= 0.60:
        return AttentionBand.DEGRADED
    return AttentionBand.COLD
