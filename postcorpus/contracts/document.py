"""Document contracts - sources in, normalized records out."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class DocumentSource(BaseModel):
    """One candidate document as handed over by file discovery."""

    model_config = ConfigDict(frozen=True)

    filename: str = Field(description="Source identifier, usually a path relative to the corpus")
    text: str = Field(description="Raw document text, front matter included")


class DocumentRecord(BaseModel):
    """
    A validated blog post.

    Built once per load from immutable source text and never mutated; a
    reload builds fresh records.
    """

    model_config = ConfigDict(frozen=True)

    slug: str = Field(description="Filename remainder after the date prefix, without extension")
    title: str = Field(min_length=1, description="Human-readable title")
    category: str = Field(default="", description="Free-form classification, may be empty")
    excerpt: str = Field(min_length=1, description="Short summary")
    published_date: date = Field(description="Date taken from the YYYY-MM-DD filename prefix")
    body: str = Field(description="Text after the front matter, passed through verbatim")

    layout: str | None = Field(default=None, description="Layout requested by the post")
    extra: dict[str, str] = Field(
        default_factory=dict, description="Unrecognized front-matter keys, kept as-is"
    )
    source: str = Field(default="", description="Source identifier the record was built from")
    content_hash: str = Field(default="", description="SHA-256 of the raw source text")

    @property
    def has_category(self) -> bool:
        return bool(self.category)
