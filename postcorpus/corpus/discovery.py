"""File discovery - turn a corpus directory into document sources."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from postcorpus.constants import DEFAULT_CORPUS_EXTENSIONS
from postcorpus.contracts.document import DocumentSource
from postcorpus.corpus.errors import DocumentError, UndecodableSource

logger = logging.getLogger(__name__)


@dataclass
class Discovery:
    """Sources read from a corpus directory plus files that could not be read."""

    sources: list[DocumentSource] = field(default_factory=list)
    failures: list[tuple[str, DocumentError]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.sources) + len(self.failures)


def find_corpus_files(
    corpus_path: Path, extensions: Iterable[str] = DEFAULT_CORPUS_EXTENSIONS
) -> list[Path]:
    """Find all post files under the corpus directory, sorted by path."""
    files: set[Path] = set()

    for ext in extensions:
        files.update(p for p in corpus_path.rglob(ext) if p.is_file())

    return sorted(files)


def scan_corpus(
    corpus_path: Path | str,
    extensions: Iterable[str] = DEFAULT_CORPUS_EXTENSIONS,
) -> Discovery:
    """
    Read every post under ``corpus_path``.

    Filenames are POSIX paths relative to the corpus root, so sources stay
    stable across machines. A post that is not valid UTF-8 becomes an
    UndecodableSource failure instead of stopping the scan.

    Raises:
        FileNotFoundError: If ``corpus_path`` is not a directory.
    """
    root = Path(corpus_path)
    if not root.is_dir():
        raise FileNotFoundError(f"Corpus directory not found: {root}")

    discovery = Discovery()
    for file_path in find_corpus_files(root, extensions):
        filename = file_path.relative_to(root).as_posix()
        try:
            text = file_path.read_bytes().decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning(f"Cannot decode {filename}: {e}")
            discovery.failures.append((filename, UndecodableSource(str(e))))
            continue
        discovery.sources.append(DocumentSource(filename=filename, text=text))

    logger.info(f"Discovered {discovery.total} post(s) in {root}")
    return discovery


__all__ = ["Discovery", "find_corpus_files", "scan_corpus"]
