"""Corpus management - front-matter parsing, record building and loading."""

from postcorpus.corpus.builder import build_record, compute_content_hash, parse_filename
from postcorpus.corpus.discovery import Discovery, find_corpus_files, scan_corpus
from postcorpus.corpus.errors import (
    CorpusLoadError,
    DocumentError,
    DuplicateSlug,
    InvalidDateFormat,
    MalformedFrontMatter,
    MissingRequiredField,
    UndecodableSource,
    UnrecognizedKey,
)
from postcorpus.corpus.frontmatter import (
    FrontMatter,
    parse_frontmatter,
    render_document,
    serialize_frontmatter,
)
from postcorpus.corpus.loader import CorpusLoader, LoadFailure, LoadResult

__all__ = [
    "CorpusLoader",
    "Discovery",
    "FrontMatter",
    "LoadFailure",
    "LoadResult",
    # Functions
    "build_record",
    "compute_content_hash",
    "find_corpus_files",
    "parse_filename",
    "parse_frontmatter",
    "render_document",
    "scan_corpus",
    "serialize_frontmatter",
    # Errors
    "CorpusLoadError",
    "DocumentError",
    "DuplicateSlug",
    "InvalidDateFormat",
    "MalformedFrontMatter",
    "MissingRequiredField",
    "UndecodableSource",
    "UnrecognizedKey",
]
