"""Front-matter parsing - split the metadata block from the post body.

The block grammar is flat: a ``---`` line, ``key: value`` lines,
and a closing ``---`` line. Values are the rest of the line after the first
colon; a value wrapped in double quotes loses the quotes. Nothing is
interpreted as YAML, so ``title: NSError: the Cocoa way`` stays a plain string.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from postcorpus.constants import (
    FRONTMATTER_KEY_PATTERN,
    FRONTMATTER_MARKER,
    RECOGNIZED_KEYS,
)
from postcorpus.corpus.errors import MalformedFrontMatter, UnrecognizedKey

_BOM = "\ufeff"


@dataclass(frozen=True)
class FrontMatter:
    """Parsed front matter plus the body that follows it."""

    values: dict[str, str]
    body: str
    warnings: list[UnrecognizedKey] = field(default_factory=list)

    @property
    def recognized(self) -> dict[str, str]:
        return {k: v for k, v in self.values.items() if k in RECOGNIZED_KEYS}

    @property
    def extra(self) -> dict[str, str]:
        return {k: v for k, v in self.values.items() if k not in RECOGNIZED_KEYS}


def _iter_lines(text: str) -> Iterator[tuple[int, str, int]]:
    """Yield (line_number, line_without_newline, offset_after_line)."""
    pos = 0
    number = 1
    while pos < len(text):
        end = text.find("\n", pos)
        if end == -1:
            yield number, text[pos:], len(text)
            return
        yield number, text[pos:end], end + 1
        pos = end + 1
        number += 1


def _is_marker(line: str) -> bool:
    return line.rstrip() == FRONTMATTER_MARKER


def unquote(value: str) -> str:
    """Drop one pair of surrounding double quotes, if present."""
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def parse_line(line: str, number: int) -> tuple[str, str]:
    """Parse a single ``key: value`` line."""
    colon = line.find(":")
    if colon == -1:
        raise MalformedFrontMatter(f"expected 'key: value', got {line.strip()!r}", line=number)

    key = line[:colon].strip()
    if not FRONTMATTER_KEY_PATTERN.match(key):
        raise MalformedFrontMatter(f"invalid key {key!r}", line=number)

    value = unquote(line[colon + 1 :].strip())
    return key, value


def parse_frontmatter(text: str) -> FrontMatter:
    """
    Split raw document text into front-matter values and body.

    Raises:
        MalformedFrontMatter: If the opening or closing marker is missing,
            a line inside the block is not ``key: value``, or a key repeats.
    """
    if text.startswith(_BOM):
        text = text[len(_BOM) :]

    lines = _iter_lines(text)

    first = next(lines, None)
    if first is None or not _is_marker(first[1]):
        raise MalformedFrontMatter(
            f"opening marker is absent; document must start with a {FRONTMATTER_MARKER!r} line"
        )

    values: dict[str, str] = {}
    warnings: list[UnrecognizedKey] = []

    for number, line, offset in lines:
        if _is_marker(line):
            return FrontMatter(values=values, body=text[offset:], warnings=warnings)

        if not line.strip():
            continue

        key, value = parse_line(line, number)
        if key in values:
            raise MalformedFrontMatter(f"duplicate key {key!r}", line=number)
        if key not in RECOGNIZED_KEYS:
            warnings.append(UnrecognizedKey(key))
        values[key] = value

    raise MalformedFrontMatter(f"closing {FRONTMATTER_MARKER!r} marker is missing")


def _needs_quotes(value: str) -> bool:
    if value == "" or value != value.strip():
        return True
    return len(value) >= 2 and value[0] == '"' and value[-1] == '"'


def serialize_frontmatter(values: Mapping[str, str]) -> str:
    """
    Render a mapping as a marker-delimited front-matter block.

    Values that a plain ``key: value`` line would alter on re-parse are
    double-quoted, so ``parse_frontmatter(serialize_frontmatter(m))`` gives
    back ``m``.
    """
    lines = [FRONTMATTER_MARKER]
    for key, value in values.items():
        if "\n" in value or "\r" in value:
            raise ValueError(f"Front-matter value for {key!r} must be a single line")
        rendered = f'"{value}"' if _needs_quotes(value) else value
        lines.append(f"{key}: {rendered}")
    lines.append(FRONTMATTER_MARKER)
    return "\n".join(lines) + "\n"


def render_document(values: Mapping[str, str], body: str) -> str:
    """Front matter followed by body, ready to be written to disk."""
    return serialize_frontmatter(values) + body


__all__ = [
    "FrontMatter",
    "parse_frontmatter",
    "parse_line",
    "render_document",
    "serialize_frontmatter",
    "unquote",
]
