"""Manifest contract - what the renderer receives from a corpus load."""

from datetime import datetime

from pydantic import BaseModel, Field

from postcorpus.contracts.document import DocumentRecord


class LoadErrorInfo(BaseModel):
    """Serializable summary of one rejected document."""

    source: str = Field(description="Source identifier of the rejected document")
    kind: str = Field(description="Error kind, e.g. MalformedFrontMatter")
    message: str = Field(description="Human-readable reason")


class CorpusManifest(BaseModel):
    """Records plus load errors, as exported for an external renderer."""

    generated_at: datetime = Field(description="When the manifest was produced")
    corpus_path: str | None = Field(default=None, description="Directory the corpus was read from")
    records: list[DocumentRecord] = Field(default_factory=list)
    errors: list[LoadErrorInfo] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.records) + len(self.errors)
