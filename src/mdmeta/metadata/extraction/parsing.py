"""Frontmatter parsing utilities.

Provides two readers for the ``---`` delimited block at the top of a
markdown document:

- parse_frontmatter: full YAML via PyYAML
- parse_simple_frontmatter: minimal line-based reader for flat
  ``key: value`` blocks (scalars, inline arrays, dates, booleans, numbers)

Both return a FrontmatterResult with the parsed data and the remaining body.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable

import yaml

from mdmeta.core.exceptions import FrontmatterError
from mdmeta.utils.dates import coerce_datetime


@dataclass
class FrontmatterResult:
    """Result from parsing frontmatter.

    Attributes:
        data: Parsed data as dictionary (empty if no frontmatter).
        content: Document content after frontmatter is removed.
        has_frontmatter: Whether frontmatter was found.
    """

    data: dict[str, Any]
    content: str
    has_frontmatter: bool


FrontmatterParser = Callable[[str], FrontmatterResult]

# Regex to match YAML frontmatter block at start of document
# Matches: ---\n<yaml content>\n---\n
_FRONTMATTER_PATTERN = re.compile(
    r"^---\s*\n(.*?)\n---\s*(?:\n|$)",
    re.DOTALL,
)

# Empty block: ---\n---
_EMPTY_FRONTMATTER_PATTERN = re.compile(r"^---\s*\n---\s*(?:\n|$)")

_SIMPLE_LINE_PATTERN = re.compile(r"^(\w+):\s*(.+)$")
_SIMPLE_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}")
_SIMPLE_NUMBER_PATTERN = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_SIMPLE_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")
_EDGE_QUOTES_PATTERN = re.compile(r"^[\"']|[\"']$")


def _split_block(content: str) -> tuple[str, str] | None:
    """Split a leading frontmatter block from content.

    Returns:
        (block text, remaining content), or None if there is no block.
    """
    empty = _EMPTY_FRONTMATTER_PATTERN.match(content)
    if empty:
        return "", content[empty.end() :]
    match = _FRONTMATTER_PATTERN.match(content)
    if not match:
        return None
    return match.group(1), content[match.end() :]


def parse_frontmatter(content: str, *, strict: bool = False) -> FrontmatterResult:
    """Parse YAML frontmatter from markdown content.

    Args:
        content: Full markdown document content.
        strict: Raise FrontmatterError on invalid YAML instead of treating
            the document as having no frontmatter.

    Returns:
        FrontmatterResult with parsed data and remaining content.

    Example:
        >>> result = parse_frontmatter('''---
        ... title: My Doc
        ... tags: [python, code]
        ... ---
        ... # Hello World
        ... ''')
        >>> result.data
        {'title': 'My Doc', 'tags': ['python', 'code']}
        >>> result.has_frontmatter
        True
    """
    split = _split_block(content)
    if split is None:
        return FrontmatterResult(data={}, content=content, has_frontmatter=False)

    yaml_text, remaining_content = split

    try:
        data = yaml.safe_load(yaml_text)
    except yaml.YAMLError as e:
        if strict:
            raise FrontmatterError(f"Invalid YAML frontmatter: {e}") from e
        # Invalid YAML - treat as no frontmatter
        return FrontmatterResult(data={}, content=content, has_frontmatter=False)

    if data is None:
        data = {}
    elif not isinstance(data, dict):
        if strict:
            raise FrontmatterError(
                f"Frontmatter must be a mapping, got {type(data).__name__}"
            )
        # YAML could parse to a scalar or list - wrap it
        data = {"_raw": data}

    return FrontmatterResult(data=data, content=remaining_content, has_frontmatter=True)


def parse_simple_frontmatter(content: str) -> FrontmatterResult:
    """Parse flat frontmatter with a minimal line-based reader.

    Each ``key: value`` line is coerced in order:

    - ``[a, b]`` -> list of strings (quotes stripped)
    - leading ``YYYY-MM-DD`` -> datetime (kept as string if invalid)
    - ``true`` / ``false`` -> bool
    - numeric -> int or float
    - anything else -> string with one pair of surrounding quotes removed

    Lines that do not match ``key: value`` (nested blocks, list items,
    comments) are ignored.

    Args:
        content: Full markdown document content.

    Returns:
        FrontmatterResult with parsed data and remaining content.
    """
    split = _split_block(content)
    if split is None:
        return FrontmatterResult(data={}, content=content, has_frontmatter=False)

    block, remaining_content = split
    data: dict[str, Any] = {}

    for line in block.split("\n"):
        match = _SIMPLE_LINE_PATTERN.match(line.rstrip("\r"))
        if match:
            key, raw = match.groups()
            data[key] = _coerce_simple_value(raw.strip())

    return FrontmatterResult(data=data, content=remaining_content, has_frontmatter=True)


def _coerce_simple_value(value: str) -> Any:
    if value.startswith("[") and value.endswith("]"):
        items = [_strip_quotes(item.strip()) for item in value[1:-1].split(",")]
        return [item for item in items if item]

    if _SIMPLE_DATE_PATTERN.match(value):
        parsed = coerce_datetime(value)
        return parsed if parsed is not None else value

    if value in ("true", "false"):
        return value == "true"

    if _SIMPLE_NUMBER_PATTERN.match(value):
        if _SIMPLE_INTEGER_PATTERN.match(value):
            return int(value)
        return float(value)

    return _strip_quotes(value)


def _strip_quotes(value: str) -> str:
    """Remove one leading and one trailing quote character."""
    return _EDGE_QUOTES_PATTERN.sub("", value)


def extract_tags_from_field(value: Any) -> list[str]:
    """Extract tags from a frontmatter field value.

    Handles various YAML formats for tags:
    - String: "tag1, tag2"
    - List: ["tag1", "tag2"]
    - Single value: "tag1"

    Args:
        value: Field value from YAML frontmatter.

    Returns:
        List of extracted tag strings.
    """
    if value is None:
        return []

    if isinstance(value, list):
        # Flatten and convert to strings
        tags = []
        for item in value:
            if isinstance(item, str):
                tags.append(item.strip())
            elif item is not None:
                tags.append(str(item).strip())
        return [t for t in tags if t]

    if isinstance(value, str):
        if "," in value:
            return [t.strip() for t in value.split(",") if t.strip()]
        return [value.strip()] if value.strip() else []

    return [str(value).strip()] if value else []
