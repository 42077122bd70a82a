"""Corpus loader - parse, build and collect every post in one pass."""

import logging
from collections import defaultdict
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from postcorpus.constants import DEFAULT_CORPUS_EXTENSIONS
from postcorpus.contracts.document import DocumentRecord, DocumentSource
from postcorpus.corpus.builder import build_record
from postcorpus.corpus.discovery import Discovery, scan_corpus
from postcorpus.corpus.errors import (
    CorpusLoadError,
    DocumentError,
    DuplicateSlug,
    UnrecognizedKey,
)
from postcorpus.corpus.frontmatter import parse_frontmatter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadFailure:
    """A rejected source and the reason it was rejected."""

    source: str
    error: DocumentError

    @property
    def kind(self) -> str:
        return self.error.kind


@dataclass
class LoadResult:
    """
    Outcome of a corpus load.

    ``records`` keep the input order of the sources. Callers that want
    chronological order use ``chronological()``.
    """

    records: list[DocumentRecord] = field(default_factory=list)
    errors: list[LoadFailure] = field(default_factory=list)
    warnings: list[tuple[str, UnrecognizedKey]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def total(self) -> int:
        return len(self.records) + len(self.errors)

    def get(self, slug: str) -> DocumentRecord | None:
        for record in self.records:
            if record.slug == slug:
                return record
        return None

    def by_category(self) -> dict[str, list[DocumentRecord]]:
        groups: dict[str, list[DocumentRecord]] = defaultdict(list)
        for record in self.records:
            groups[record.category].append(record)
        return dict(groups)

    def chronological(self, reverse: bool = False) -> list[DocumentRecord]:
        """Records sorted by publication date; ties keep input order."""
        return sorted(self.records, key=lambda r: r.published_date, reverse=reverse)

    def raise_for_errors(self) -> None:
        """Strict policy: raise if any document was rejected."""
        if self.errors:
            raise CorpusLoadError([(f.source, f.error) for f in self.errors])


@dataclass(frozen=True)
class _Outcome:
    source: str
    record: DocumentRecord | None = None
    error: DocumentError | None = None
    warnings: tuple[UnrecognizedKey, ...] = ()


class CorpusLoader:
    """
    Load a set of post sources into document records.

    Every source is attempted; a bad post is reported in
    ``LoadResult.errors`` and never stops the batch. Slugs must be unique:
    the first post to claim a slug wins and later ones are rejected with
    DuplicateSlug.
    """

    def __init__(self, workers: int = 1):
        """
        Initialize the loader.

        Args:
            workers: Thread-pool size for per-document parse/build.
                     1 processes sources sequentially.
        """
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        self.workers = workers

    def _process(self, source: DocumentSource) -> _Outcome:
        try:
            frontmatter = parse_frontmatter(source.text)
        except DocumentError as e:
            return _Outcome(source=source.filename, error=e)

        # unknown keys are reported even when the build step rejects the post
        warnings = tuple(frontmatter.warnings)
        try:
            record = build_record(source.filename, frontmatter, text=source.text)
        except DocumentError as e:
            return _Outcome(source=source.filename, error=e, warnings=warnings)
        return _Outcome(source=source.filename, record=record, warnings=warnings)

    def _outcomes(self, sources: list[DocumentSource]) -> list[_Outcome]:
        if self.workers == 1 or len(sources) < 2:
            return [self._process(s) for s in sources]

        # map() preserves input order, so the reducer sees sources as given
        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            return list(pool.map(self._process, sources))

    def load(self, sources: Iterable[DocumentSource]) -> LoadResult:
        """
        Build a record for every source, continuing past failures.

        Returns:
            LoadResult with records in input order plus per-source errors.
            ``len(records) + len(errors)`` equals the number of sources.
        """
        sources = list(sources)
        result = LoadResult()
        claimed: dict[str, str] = {}

        for outcome in self._outcomes(sources):
            for warning in outcome.warnings:
                logger.warning(f"{outcome.source}: {warning}")
                result.warnings.append((outcome.source, warning))

            error = outcome.error
            record = outcome.record
            if record is not None and record.slug in claimed:
                error = DuplicateSlug(record.slug, claimed[record.slug])

            if error is not None:
                logger.warning(f"Rejected {outcome.source}: [{error.kind}] {error}")
                result.errors.append(LoadFailure(source=outcome.source, error=error))
                continue

            assert record is not None
            claimed[record.slug] = outcome.source
            result.records.append(record)
            logger.debug(f"Loaded {outcome.source} as {record.slug!r}")

        logger.info(
            f"Loaded {len(result.records)}/{len(sources)} post(s), "
            f"{len(result.errors)} rejected"
        )
        return result

    def load_directory(
        self,
        corpus_path: Path | str,
        extensions: Iterable[str] = DEFAULT_CORPUS_EXTENSIONS,
    ) -> LoadResult:
        """Discover posts under a directory and load them."""
        return self.load_discovered(scan_corpus(corpus_path, extensions))

    def load_discovered(self, discovery: Discovery) -> LoadResult:
        """
        Load scanned sources and fold in the files the scan could not read.

        Unreadable files are appended to ``errors`` after the load, so every
        scanned file is accounted for in ``LoadResult.total``.
        """
        result = self.load(discovery.sources)
        for source, error in discovery.failures:
            result.errors.append(LoadFailure(source=source, error=error))
        return result


__all__ = [
    "CorpusLoader",
    "LoadFailure",
    "LoadResult",
]
