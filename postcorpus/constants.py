"""Shared constants for front matter and corpus discovery."""

import re

FRONTMATTER_MARKER = "---"

RECOGNIZED_KEYS: tuple[str, ...] = ("layout", "title", "category", "excerpt")
REQUIRED_FIELDS: tuple[str, ...] = ("title", "excerpt")

# 2013-04-09-nserror.md -> ("2013", "04", "09", "nserror.md")
POST_FILENAME_PATTERN = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})-(.+)$")
FRONTMATTER_KEY_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")

DEFAULT_CORPUS_PATH = "_posts"
DEFAULT_CORPUS_EXTENSIONS: tuple[str, ...] = ("*.md", "*.markdown")
