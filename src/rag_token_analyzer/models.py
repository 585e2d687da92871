from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Efficiency(str, Enum):
    """Words-per-token category."""

    OPTIMAL = "optimal"
    ACCEPTABLE = "acceptable"
    VERBOSE = "verbose"


class HintSeverity(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    OPTIMIZE = "optimize"
    INFO = "info"


class AttentionBand(str, Enum):
    """Coarse attention level used for heat strips."""

    HOT = "hot"
    WARM = "warm"
    DEGRADED = "degraded"
    COLD = "cold"


@dataclass(slots=True, frozen=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(slots=True, frozen=True)
class Token:
    """Represents a token and its inclusive-exclusive character offsets."""

    text: str
    start_char: int
    end_char: int

    def __len__(self) -> int:
        return len(self.text)


@dataclass(slots=True, frozen=True)
class Chunk:
    """A fixed-size run of tokens. ``end_token_idx`` is inclusive."""

    chunk_id: int
    start_token_idx: int
    end_token_idx: int
    text: str
    token_count: int


@dataclass(slots=True, frozen=True)
class Paragraph:
    """A blank-line separated block of text and its chunk footprint."""

    index: int
    text: str
    token_count: int
    exceeds_chunk: bool
    chunks_required: int


@dataclass(slots=True, frozen=True)
class Entity:
    """A candidate proper noun or acronym and its character offset."""

    text: str
    position: int


@dataclass(slots=True, frozen=True)
class EntityPlacement:
    """Where an entity lands in the chunk sequence and how much attention it gets."""

    entity: Entity
    token_position: int
    chunk_index: int
    position_in_chunk: int
    attention_score: float
    is_low_attention: bool

    @property
    def text(self) -> str:
        return self.entity.text

    @property
    def position(self) -> int:
        return self.entity.position


@dataclass(slots=True, frozen=True)
class TokenCounts:
    """Token counts reported by each tokenizer family."""

    gpt: int
    claude: int
    gemini: int

    def as_dict(self) -> dict[str, int]:
        return {"gpt": self.gpt, "claude": self.claude, "gemini": self.gemini}


@dataclass(slots=True, frozen=True)
class AnalysisResult:
    """Aggregated chunking, entity and efficiency analysis for one text."""

    chunk_size: int
    token_counts: TokenCounts
    variance: int
    paragraphs: tuple[Paragraph, ...]
    chunks: tuple[Chunk, ...]
    entities: tuple[EntityPlacement, ...]
    word_count: int
    words_per_token: float
    efficiency: Efficiency


@dataclass(slots=True, frozen=True)
class Hint:
    """An optimization advisory derived from an AnalysisResult."""

    severity: HintSeverity
    message: str
    rule: str
