"""Data contracts for the post corpus."""

from postcorpus.contracts.document import DocumentRecord, DocumentSource
from postcorpus.contracts.manifest import CorpusManifest, LoadErrorInfo

__all__ = [
    # Documents
    "DocumentRecord",
    "DocumentSource",
    # Export
    "CorpusManifest",
    "LoadErrorInfo",
]
