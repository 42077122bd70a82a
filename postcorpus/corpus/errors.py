"""Errors raised while turning a source document into a record."""

from collections.abc import Sequence


class DocumentError(Exception):
    """
    Base class for document-local load failures.

    A DocumentError rejects a single document; the corpus loader records it
    and moves on to the next source.
    """

    kind = "DocumentError"


class MalformedFrontMatter(DocumentError):
    """The front-matter block is missing, unterminated or has a bad line."""

    kind = "MalformedFrontMatter"

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class UndecodableSource(MalformedFrontMatter):
    """The source bytes are not UTF-8, so no front matter can be read."""

    def __init__(self, reason: str):
        super().__init__(f"not valid UTF-8 text ({reason})")


class MissingRequiredField(DocumentError):
    """A required front-matter field is absent or empty."""

    kind = "MissingRequiredField"

    def __init__(self, fields: Sequence[str]):
        self.fields = tuple(fields)
        noun = "field" if len(self.fields) == 1 else "fields"
        super().__init__(f"Missing required {noun}: {', '.join(self.fields)}")


class InvalidDateFormat(DocumentError):
    """The filename does not start with a valid YYYY-MM-DD date."""

    kind = "InvalidDateFormat"

    def __init__(self, filename: str, reason: str):
        self.filename = filename
        super().__init__(f"{filename!r}: {reason}")


class DuplicateSlug(DocumentError):
    kind = "DuplicateSlug"

    def __init__(self, slug: str, first_source: str):
        self.slug = slug
        self.first_source = first_source
        super().__init__(f"Slug {slug!r} already used by {first_source}")


class UnrecognizedKey(UserWarning):
    """Front-matter key outside the recognized set. Never blocks loading."""

    kind = "UnrecognizedKey"

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unrecognized front-matter key: {key!r}")


class CorpusLoadError(Exception):
    """Raised by the strict policy when any document in a load failed."""

    def __init__(self, failures: Sequence[tuple[str, DocumentError]]):
        self.failures = list(failures)
        lines = [f"{len(self.failures)} document(s) failed to load:"]
        lines.extend(f"  {source}: [{err.kind}] {err}" for source, err in self.failures)
        super().__init__("\n".join(lines))


__all__ = [
    "CorpusLoadError",
    "DocumentError",
    "DuplicateSlug",
    "InvalidDateFormat",
    "MalformedFrontMatter",
    "MissingRequiredField",
    "UndecodableSource",
    "UnrecognizedKey",
]
