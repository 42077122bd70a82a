"""Record building - filename-derived fields plus validated front matter."""

import hashlib
from datetime import date
from pathlib import PurePath

from postcorpus.constants import POST_FILENAME_PATTERN, REQUIRED_FIELDS
from postcorpus.contracts.document import DocumentRecord
from postcorpus.corpus.errors import InvalidDateFormat, MissingRequiredField
from postcorpus.corpus.frontmatter import FrontMatter


def compute_content_hash(content: str) -> str:
    """Compute SHA-256 hash of content."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def parse_filename(filename: str) -> tuple[date, str]:
    """
    Split a post filename into its publication date and slug.

    ``2013-04-09-nserror.md`` -> ``(date(2013, 4, 9), "nserror")``.
    Only the basename is considered and only the last extension is dropped.

    Raises:
        InvalidDateFormat: If the name does not start with ``YYYY-MM-DD-``,
            the date is not a real calendar date, or nothing follows it.
    """
    name = PurePath(filename).name
    match = POST_FILENAME_PATTERN.match(name)
    if not match:
        raise InvalidDateFormat(filename, "expected a 'YYYY-MM-DD-<slug>' filename")

    year, month, day, rest = match.groups()
    try:
        published = date(int(year), int(month), int(day))
    except ValueError as e:
        raise InvalidDateFormat(filename, f"{year}-{month}-{day} is not a valid date ({e})") from e

    slug = PurePath(rest).stem
    if not slug or slug.startswith("."):
        raise InvalidDateFormat(filename, "no slug after the date prefix")

    return published, slug


def _missing_fields(values: dict[str, str]) -> list[str]:
    return [name for name in REQUIRED_FIELDS if not values.get(name, "").strip()]


def build_record(
    filename: str,
    frontmatter: FrontMatter,
    *,
    text: str | None = None,
) -> DocumentRecord:
    """
    Build a DocumentRecord from a filename and its parsed front matter.

    Args:
        filename: Source identifier, expected as ``YYYY-MM-DD-title-slug.ext``
        frontmatter: Result of ``parse_frontmatter`` on the source text
        text: Raw source text, used for the content hash when given

    Raises:
        InvalidDateFormat: Filename has no valid date prefix (checked first).
        MissingRequiredField: ``title`` and/or ``excerpt`` absent or blank.
    """
    published, slug = parse_filename(filename)

    values = frontmatter.recognized
    missing = _missing_fields(values)
    if missing:
        raise MissingRequiredField(missing)

    return DocumentRecord(
        slug=slug,
        title=values["title"],
        category=values.get("category", ""),
        excerpt=values["excerpt"],
        published_date=published,
        body=frontmatter.body,
        layout=values.get("layout"),
        extra=frontmatter.extra,
        source=filename,
        content_hash=compute_content_hash(text) if text is not None else "",
    )


__all__ = ["build_record", "compute_content_hash", "parse_filename"]
