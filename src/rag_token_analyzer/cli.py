from __future__ import annotations

import json
import logging
from dataclasses import replace as dc_replace
from pathlib import Path
from typing import Dict, List, TypedDict

import typer
import yaml

from .analysis import analyze_corpus, analyze_text
from .attention import attention_band, attention_strip
from .config import (
    CHUNK_SIZE_PRESETS,
    AnalyzerConfig,
    InvalidChunkSizeError,
    load_config,
)
from .hints import generate_hints, has_critical_hints
from .models import (
    AnalysisResult,
    AttentionBand,
    Chunk,
    Document,
    EntityPlacement,
    Hint,
    Paragraph,
)
from .windowing import hot_zone_ids

app = typer.Typer(help="RAG Token Analyzer CLI.", no_args_is_help=True)

logger = logging.getLogger(__name__)

# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".txt", ".md"}

BAND_GLYPHS = {
    AttentionBand.HOT: "█",
    AttentionBand.WARM: "▓",
    AttentionBand.DEGRADED: "▒",
    AttentionBand.COLD: "░",
}
PREVIEW_CHARS = 200


@app.callback()
def configure(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging on stderr."
    ),
) -> None:
    """Analyze content chunking and attention patterns for LLM citation."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    chunk_size: int | None = typer.Option(
        None, "--chunk-size", "-s", help="Tokens per chunk (overrides config)."
    ),
    fail_on_critical: bool = typer.Option(
        False,
        "--fail-on-critical",
        help="Exit with status 1 when any document has a critical hint.",
    ),
) -> None:
    """Analyze the input text(s) and emit a JSON summary."""
    cfg = _load_config_with_overrides(config, chunk_size)
    documents = _load_documents(input_path)
    logger.info("Analyzing %d document(s) at chunk size %d", len(documents), cfg.chunk_size)
    results = analyze_corpus(documents, cfg.chunk_size, cfg)
    hints = {
        doc_id: generate_hints(result, cfg.chunk_size, cfg)
        for doc_id, result in results.items()
    }
    summary = _build_summary(results, hints, cfg)
    typer.echo(json.dumps({"documents": summary}, indent=2))
    if fail_on_critical and any(has_critical_hints(h) for h in hints.values()):
        raise typer.Exit(code=1)


@app.command()
def chunks(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    chunk_size: int | None = typer.Option(
        None, "--chunk-size", "-s", help="Tokens per chunk (overrides config)."
    ),
) -> None:
    """Print the simulated chunks with a per-chunk attention strip."""
    cfg = _load_config_with_overrides(config, chunk_size)
    document = _document_from_file(input_path, input_path.name)
    result = analyze_text(document.text, cfg.chunk_size, cfg)
    if result is None:
        typer.echo("No content to analyze.")
        return

    typer.echo(f"Chunk simulation ({result.chunk_size} tokens/chunk)")
    hot = hot_zone_ids(result.chunks)
    for chunk in result.chunks:
        marker = " [hot zone]" if chunk.chunk_id in hot else ""
        typer.echo(f"Chunk {chunk.chunk_id + 1}{marker}: {chunk.token_count} tokens")
        typer.echo(f"  {_render_strip(chunk, cfg.heat_strip_samples)}")
        preview = chunk.text[:PREVIEW_CHARS].replace("\n", " ")
        ellipsis = "..." if len(chunk.text) > PREVIEW_CHARS else ""
        typer.echo(f"  {preview}{ellipsis}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = AnalyzerConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


@app.command()
def presets() -> None:
    """List the common chunk-size presets."""
    cfg = AnalyzerConfig()
    for size in CHUNK_SIZE_PRESETS:
        status = (
            "optimal range"
            if cfg.in_recommended_range(size)
            else "larger than recommended"
        )
        typer.echo(f"{size}\t{status}")


def main() -> None:
    app()


def _load_config_with_overrides(
    config_path: Path | None, chunk_size: int | None
) -> AnalyzerConfig:
    try:
        cfg = load_config(config_path)
        if chunk_size is not None:
            cfg = dc_replace(cfg, chunk_size=chunk_size)
    except InvalidChunkSizeError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return cfg


class ParagraphPayload(TypedDict):
    index: int
    token_count: int
    exceeds_chunk: bool
    chunks_required: int
    preview: str


class ChunkPayload(TypedDict):
    chunk_id: int
    start_token_idx: int
    end_token_idx: int
    token_count: int
    hot_zone: bool
    attention_strip: List[str]


class EntityPayload(TypedDict):
    text: str
    position: int
    token_position: int
    chunk_index: int
    position_in_chunk: int
    attention_score: float
    is_low_attention: bool


class HintPayload(TypedDict):
    severity: str
    rule: str
    message: str


class DocumentSummary(TypedDict, total=False):
    doc_id: str
    analyzed: bool
    chunk_size: int
    token_counts: Dict[str, int]
    variance: int
    word_count: int
    words_per_token: float
    efficiency: str
    paragraphs: List[ParagraphPayload]
    chunks: List[ChunkPayload]
    entities: List[EntityPayload]
    hints: List[HintPayload]


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents keyed by their relative path."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [_document_from_file(file, str(file.relative_to(input_path))) for file in files]


def _document_from_file(path: Path, doc_id: str) -> Document:
    """Read a text file from disk and wrap it in a Document."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"Cannot read {path}: {exc}") from exc
    return Document(doc_id=doc_id, text=text)


def _build_summary(
    results: Dict[str, AnalysisResult | None],
    hints: Dict[str, List[Hint]],
    config: AnalyzerConfig,
) -> List[DocumentSummary]:
    """Create a JSON-serializable summary for each analyzed document."""
    summary: List[DocumentSummary] = []
    for doc_id, result in sorted(results.items()):
        if result is None:
            summary.append({"doc_id": doc_id, "analyzed": False, "hints": []})
            continue
        hot = hot_zone_ids(result.chunks)
        summary.append(
            {
                "doc_id": doc_id,
                "analyzed": True,
                "chunk_size": result.chunk_size,
                "token_counts": result.token_counts.as_dict(),
                "variance": result.variance,
                "word_count": result.word_count,
                "words_per_token": round(result.words_per_token, 3),
                "efficiency": result.efficiency.value,
                "paragraphs": [_paragraph_dict(p) for p in result.paragraphs],
                "chunks": [
                    _chunk_dict(c, c.chunk_id in hot, config.heat_strip_samples)
                    for c in result.chunks
                ],
                "entities": [_entity_dict(e) for e in result.entities],
                "hints": [_hint_dict(h) for h in hints[doc_id]],
            }
        )
    return summary


def _paragraph_dict(paragraph: Paragraph) -> ParagraphPayload:
    return {
        "index": paragraph.index,
        "token_count": paragraph.token_count,
        "exceeds_chunk": paragraph.exceeds_chunk,
        "chunks_required": paragraph.chunks_required,
        "preview": paragraph.text[:150],
    }


def _chunk_dict(chunk: Chunk, hot_zone: bool, samples: int) -> ChunkPayload:
    return {
        "chunk_id": chunk.chunk_id,
        "start_token_idx": chunk.start_token_idx,
        "end_token_idx": chunk.end_token_idx,
        "token_count": chunk.token_count,
        "hot_zone": hot_zone,
        "attention_strip": [
            attention_band(score).value
            for score in attention_strip(chunk.token_count, samples)
        ],
    }


def _entity_dict(placement: EntityPlacement) -> EntityPayload:
    return {
        "text": placement.text,
        "position": placement.position,
        "token_position": placement.token_position,
        "chunk_index": placement.chunk_index,
        "position_in_chunk": placement.position_in_chunk,
        "attention_score": round(placement.attention_score, 4),
        "is_low_attention": placement.is_low_attention,
    }


def _hint_dict(hint: Hint) -> HintPayload:
    return {
        "severity": hint.severity.value,
        "rule": hint.rule,
        "message": hint.message,
    }


def _render_strip(chunk: Chunk, samples: int) -> str:
    return "".join(
        BAND_GLYPHS[attention_band(score)]
        for score in attention_strip(chunk.token_count, samples)
    )


if __name__ == "__main__":
    main()
