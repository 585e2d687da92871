from __future__ import annotations

from .config import AnalyzerConfig, validate_chunk_size
from .models import AnalysisResult, Efficiency, Hint, HintSeverity


def generate_hints(
    result: AnalysisResult | None,
    chunk_size: int | None = None,
    config: AnalyzerConfig | None = None,
) -> list[Hint]:
    """
    Evaluate the optimization rules against an analysis.

    Rules fire in a fixed order. An empty list means no issues were detected.
    ``chunk_size`` must match the size the analysis was run with; paragraph and
    chunk figures are not recomputed here.
    """
    if result is None:
        return []
    config = config or AnalyzerConfig()
    size = validate_chunk_size(result.chunk_size if chunk_size is None else chunk_size)
    if size != result.chunk_size:
        raise ValueError(
            f"Chunk size {size} does not match the analysis chunk size "
            f"{result.chunk_size}; re-run the analysis at the new size."
        )
    hints: list[Hint] = []

    first_chunk = [e for e in result.entities if e.chunk_index == 0]
    later = [e for e in result.entities if e.chunk_index > 0]
    if len(later) > len(first_chunk):
        hints.append(
            Hint(
                severity=HintSeverity.WARNING,
                message=(
                    f"{len(later)} entities appear after chunk 1. "
                    "Front-load key terms for higher citation probability."
                ),
                rule="buried_entities",
            )
        )

    low_attention = [e for e in result.entities if e.is_low_attention]
    if low_attention:
        examples = ", ".join(e.text for e in low_attention[: config.example_entity_limit])
        hints.append(
            Hint(
                severity=HintSeverity.CRITICAL,
                message=(
                    f"{len(low_attention)} entities in low-attention zones "
                    f"(middle of chunks). Consider repositioning: {examples}"
                ),
                rule="low_attention_entities",
            )
        )

    long_paragraphs = [p for p in result.paragraphs if p.exceeds_chunk]
    if long_paragraphs:
        hints.append(
            Hint(
                severity=HintSeverity.WARNING,
                message=(
                    f"{len(long_paragraphs)} paragraph(s) exceed {size} tokens "
                    "and will split across multiple chunks."
                ),
                rule="long_paragraphs",
            )
        )

    if result.efficiency is Efficiency.VERBOSE:
        hints.append(
            Hint(
                severity=HintSeverity.OPTIMIZE,
                message=(
                    f"Token efficiency {result.words_per_token:.3f} words/token is "
                    f"below optimal ({config.optimal_words_per_token:.2f}+). "
                    "Reduce filler words."
                ),
                rule="token_efficiency",
            )
        )

    chunk_count = len(result.chunks)
    if chunk_count > config.max_chunks_before_info:
        hints.append(
            Hint(
                severity=HintSeverity.INFO,
                message=(
                    f"Content spans {chunk_count} chunks. "
                    f"Position 1 and {chunk_count} have highest attention."
                ),
                rule="chunk_spread",
            )
        )

    if size > config.recommended_max_chunk_size:
        hints.append(
            Hint(
                severity=HintSeverity.OPTIMIZE,
                message=(
                    f"Research suggests {config.recommended_min_chunk_size}-"
                    f"{config.recommended_max_chunk_size} token chunks optimize "
                    "for LLM attention patterns."
                ),
                rule="chunk_size",
            )
        )

    return hints


def has_critical_hints(hints: list[Hint]) -> bool:
    """Return True if any hint is critical."""
    return any(h.severity is HintSeverity.CRITICAL for h in hints)
