"""Metadata source extractors.

Each extractor reads the extraction context and offers entries to the
running MetadataCollection. They run in a fixed order because later
extractors inspect entries placed by earlier ones:

1. extract_defaults        (always)
2. extract_frontmatter     (priority 3)
3. extract_from_content    (H1 title at priority 2, filename title at 1)
4. extract_from_filename   (version at 1, date at 2)
5. compute_statistics      (computed fields at 1)

Problems local to one field (e.g. an unparsable date) omit that field.
"""

from __future__ import annotations

import math
import re
from pathlib import PurePath
from typing import Any, Mapping

from mdmeta.core.config import PLACEHOLDER_AUTHOR, PLACEHOLDER_TITLE
from mdmeta.metadata.extraction.parsing import extract_tags_from_field
from mdmeta.metadata.model.fields import is_extended_field, is_standard_field
from mdmeta.metadata.model.types import (
    DEFAULT_PRIORITY,
    FALLBACK_PRIORITY,
    FRONTMATTER_PRIORITY,
    HEURISTIC_PRIORITY,
    MetadataCollection,
    MetadataEntry,
    MetadataExtractionContext,
    MetadataSource,
)
from mdmeta.utils.dates import coerce_datetime, utc_now

WORDS_PER_PAGE = 250

# Fields whose list values are joined into one comma-separated string
_JOINED_LIST_FIELDS = frozenset({"keywords", "tags", "author", "authors"})

_GENERATED_DATE_FIELDS = ("creation_date", "mod_date")

_H1_PATTERN = re.compile(r"^#\s+(.+)$", re.MULTILINE)
_VERSION_STRIP_PATTERN = re.compile(r"[._-]v?\d+\.\d+(?:\.\d+)?", re.IGNORECASE)
_DATE_STRIP_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}[._-]?")
_SEPARATOR_PATTERN = re.compile(r"[._-]")
_WHITESPACE_PATTERN = re.compile(r"\s+")

_VERSION_PATTERN = re.compile(r"[._-]v?(\d+\.\d+(?:\.\d+)?)", re.IGNORECASE)
_DATE_PATTERN = re.compile(r"(\d{4}-\d{2}-\d{2})")

_MARKDOWN_SYNTAX_PATTERN = re.compile(r"[#*`_~\[\]()]")
_HEADING_PATTERN = re.compile(r"^(#+)\s", re.MULTILINE)
_IMAGE_PATTERN = re.compile(r"!\[.*?\]\(.*?\)")
_TABLE_PATTERN = re.compile(r"\|.*\|")
_CODE_FENCE_PATTERN = re.compile(r"```")
_DIAGRAM_PATTERN = re.compile(r"```(?:mermaid|plantuml)")


def _is_schema_field(key: Any) -> bool:
    return is_standard_field(key) or is_extended_field(key)


# =============================================================================
# Defaults
# =============================================================================


def extract_defaults(
    context: MetadataExtractionContext, sources: MetadataCollection
) -> None:
    """Offer configured default values and the generation timestamp.

    ``creation_date`` and ``mod_date`` always come from the generation
    timestamp; configured defaults for them are ignored.
    """
    defaults = context.config.defaults or {}

    for key, value in defaults.items():
        if value is None or key in _GENERATED_DATE_FIELDS:
            continue
        # Placeholders must not mask inferred values
        if key == "title" and value == PLACEHOLDER_TITLE:
            continue
        if key == "author" and value == PLACEHOLDER_AUTHOR:
            continue
        if not _is_schema_field(key):
            continue

        sources.offer(key, MetadataEntry(value, MetadataSource.DEFAULT, DEFAULT_PRIORITY))

    now = context.generate_date or utc_now()
    for key in _GENERATED_DATE_FIELDS:
        sources.offer(key, MetadataEntry(now, MetadataSource.DEFAULT, DEFAULT_PRIORITY))


# =============================================================================
# Frontmatter
# =============================================================================


def extract_frontmatter(
    context: MetadataExtractionContext, sources: MetadataCollection
) -> None:
    """Offer frontmatter values at the highest priority.

    Mapped keys are translated through ``config.frontmatter_mapping``. Any
    unmapped key that is itself a canonical field name is accepted as-is.

    When several frontmatter keys map to the same field, the first one in
    mapping order wins (``keywords`` over ``tags``, ``author`` over
    ``authors``, ``description`` over ``subject``); a later alias never
    overwrites an earlier one.
    """
    frontmatter = context.frontmatter
    if not frontmatter:
        return

    mapping = context.config.frontmatter_mapping or {}

    for frontmatter_key, field_name in mapping.items():
        if frontmatter_key not in frontmatter:
            continue
        _offer_frontmatter_value(sources, field_name, frontmatter[frontmatter_key])

    for key, value in frontmatter.items():
        if key in mapping or not _is_schema_field(key):
            continue
        _offer_frontmatter_value(sources, key, value)


def _offer_frontmatter_value(
    sources: MetadataCollection, field_name: str, value: Any
) -> None:
    if value is None or not _is_schema_field(field_name):
        return
    coerced = coerce_field_value(field_name, value)
    if coerced is None:
        return
    sources.offer(
        field_name, MetadataEntry(coerced, MetadataSource.FRONTMATTER, FRONTMATTER_PRIORITY)
    )


def coerce_field_value(field_name: str, value: Any) -> Any:
    """Coerce a raw frontmatter value for the target field.

    Args:
        field_name: Canonical metadata field name.
        value: Raw value as parsed from frontmatter.

    Returns:
        The coerced value, or None if it cannot be used for this field.
    """
    if "date" in field_name.lower():
        return coerce_datetime(value)

    if field_name == "custom":
        return dict(value) if isinstance(value, Mapping) else None

    if isinstance(value, list) and field_name in _JOINED_LIST_FIELDS:
        return ", ".join(extract_tags_from_field(value))

    # YAML reads "version: 1.2" as a float
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)

    return value


# =============================================================================
# Content
# =============================================================================


def extract_from_content(
    context: MetadataExtractionContext, sources: MetadataCollection
) -> None:
    """Infer a title from the first H1 heading, or from the file name.

    Skipped when the configuration supplies a real (non-placeholder) title.
    """
    configured_title = (context.config.defaults or {}).get("title")
    if (
        isinstance(configured_title, str)
        and configured_title.strip()
        and configured_title != PLACEHOLDER_TITLE
    ):
        return

    match = _H1_PATTERN.search(context.markdown_content)
    if match:
        sources.offer(
            "title",
            MetadataEntry(match.group(1).strip(), MetadataSource.AUTO, HEURISTIC_PRIORITY),
        )

    if context.file_path and sources.get("title") is None:
        title = title_from_filename(context.file_path)
        if title:
            sources.offer("title", MetadataEntry(title, MetadataSource.AUTO, FALLBACK_PRIORITY))


def title_from_filename(file_path: str) -> str:
    """Derive a human readable title from a file name.

    Example:
        >>> title_from_filename("docs/2024-01-15_my-awesome_document_v1.2.md")
        'My Awesome Document'
    """
    stem = PurePath(file_path).stem
    title = _VERSION_STRIP_PATTERN.sub("", stem)
    title = _DATE_STRIP_PATTERN.sub("", title)
    title = _SEPARATOR_PATTERN.sub(" ", title)
    title = _WHITESPACE_PATTERN.sub(" ", title).strip()
    return " ".join(word.capitalize() for word in title.split(" ") if word)


# =============================================================================
# Filename
# =============================================================================


def extract_from_filename(
    context: MetadataExtractionContext, sources: MetadataCollection
) -> None:
    """Extract a version token and an ISO date from the file name."""
    if not context.file_path:
        return

    stem = PurePath(context.file_path).stem

    version = _VERSION_PATTERN.search(stem)
    if version:
        sources.offer(
            "version", MetadataEntry(version.group(1), MetadataSource.AUTO, FALLBACK_PRIORITY)
        )

    date_match = _DATE_PATTERN.search(stem)
    if date_match:
        created = coerce_datetime(date_match.group(1))
        if created is not None:
            sources.offer(
                "creation_date",
                MetadataEntry(created, MetadataSource.AUTO, HEURISTIC_PRIORITY),
            )


# =============================================================================
# Statistics
# =============================================================================


def compute_statistics(
    context: MetadataExtractionContext, sources: MetadataCollection
) -> None:
    """Compute word/page counts, heading depth and feature flags."""
    content = context.markdown_content

    word_count = count_words(content)
    stats: dict[str, Any] = {
        "word_count": word_count,
        "page_count": max(1, math.ceil(word_count / WORDS_PER_PAGE)),
        "toc_depth": max((len(m) for m in _HEADING_PATTERN.findall(content)), default=0),
        "has_images": bool(_IMAGE_PATTERN.search(content)),
        "has_tables": bool(_TABLE_PATTERN.search(content)),
        "has_code_blocks": bool(_CODE_FENCE_PATTERN.search(content)),
        "has_diagrams": bool(_DIAGRAM_PATTERN.search(content)),
    }

    for key, value in stats.items():
        sources.offer(key, MetadataEntry(value, MetadataSource.AUTO, FALLBACK_PRIORITY))


def count_words(content: str) -> int:
    """Estimate the word count of markdown content."""
    stripped = _MARKDOWN_SYNTAX_PATTERN.sub("", content)
    return len(stripped.split())
