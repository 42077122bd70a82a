"""Manifest export - hand a loaded corpus to an external renderer."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Literal

import yaml

from postcorpus.contracts.manifest import CorpusManifest, LoadErrorInfo
from postcorpus.corpus.loader import LoadResult

ManifestFormat = Literal["json", "yaml"]
RecordOrder = Literal["input", "date"]


def build_manifest(
    result: LoadResult,
    corpus_path: Path | str | None = None,
    order: RecordOrder = "input",
) -> CorpusManifest:
    """Snapshot a LoadResult as a serializable manifest."""
    records = result.chronological() if order == "date" else list(result.records)

    return CorpusManifest(
        generated_at=datetime.now(timezone.utc),
        corpus_path=str(corpus_path) if corpus_path is not None else None,
        records=records,
        errors=[
            LoadErrorInfo(source=f.source, kind=f.kind, message=str(f.error))
            for f in result.errors
        ],
    )


def dump_manifest(manifest: CorpusManifest, fmt: ManifestFormat = "json") -> str:
    if fmt == "yaml":
        return yaml.safe_dump(
            manifest.model_dump(mode="json"),
            sort_keys=False,
            allow_unicode=True,
        )
    return manifest.model_dump_json(indent=2)


def write_manifest(
    manifest: CorpusManifest, output: Path, fmt: ManifestFormat = "json"
) -> Path:
    """
    Write a manifest to disk.

    Args:
        manifest: The manifest to save
        output: Destination file; parent directories are created
        fmt: ``json`` or ``yaml``

    Returns:
        Path to the saved file
    """
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(dump_manifest(manifest, fmt), encoding="utf-8")
    return output


def load_manifest(path: Path) -> CorpusManifest:
    """Read a manifest written by ``write_manifest`` in either format."""
    content = Path(path).read_text(encoding="utf-8")
    if Path(path).suffix in (".yaml", ".yml"):
        return CorpusManifest.model_validate(yaml.safe_load(content))
    return CorpusManifest.model_validate_json(content)


__all__ = ["build_manifest", "dump_manifest", "load_manifest", "write_manifest"]
