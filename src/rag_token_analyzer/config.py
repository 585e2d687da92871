from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

# Chunk sizes commonly used by RAG ingestion pipelines.
CHUNK_SIZE_PRESETS: tuple[int, ...] = (90, 100, 120, 256, 512)


class InvalidChunkSizeError(ValueError):
    """Raised when a chunk size is not a positive integer."""


@dataclass(slots=True)
class AnalyzerConfig:
    """Configuration options for the chunk/attention analysis."""

    chunk_size: int = 100
    low_attention_threshold: float = 0.65
    optimal_words_per_token: float = 0.75
    acceptable_words_per_token: float = 0.65
    max_chunks_before_info: int = 5
    recommended_min_chunk_size: int = 90
    recommended_max_chunk_size: int = 120
    heat_strip_samples: int = 20
    example_entity_limit: int = 3

    def __post_init__(self) -> None:
        validate_chunk_size(self.chunk_size)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))

    def in_recommended_range(self, chunk_size: int | None = None) -> bool:
        size = self.chunk_size if chunk_size is None else chunk_size
        return (
            self.recommended_min_chunk_size <= size <= self.recommended_max_chunk_size
        )


def validate_chunk_size(chunk_size: object) -> int:
    """Return chunk_size unchanged or raise InvalidChunkSizeError."""
    # bool is an int subclass; True is not a chunk size.
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int):
        raise InvalidChunkSizeError(
            f"Chunk size must be a positive integer, got {chunk_size!r}."
        )
    if chunk_size < 1:
        raise InvalidChunkSizeError(
            f"Chunk size must be a positive integer, got {chunk_size}."
        )
    return chunk_size


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(AnalyzerConfig)}
    return {key: data[key] for key in data if key in allowed}


def config_from_dict(data: Mapping[str, Any] | None) -> AnalyzerConfig:
    """Build an AnalyzerConfig from a dictionary-like input."""
    if data is None:
        return AnalyzerConfig()
    return AnalyzerConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> AnalyzerConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> AnalyzerConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return AnalyzerConfig()
    return config_from_yaml(path)
