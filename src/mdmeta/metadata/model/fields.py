"""Metadata field vocabularies and classification.

Every metadata key belongs to at most one of three fixed vocabularies:

- standard: properties of the PDF document information dictionary
- extended: non-standard document properties (organization, licensing, ...)
- computed: values derived from content analysis

Classification is a constant-time set membership test. Keys outside the
standard and extended vocabularies are dropped by the extractors.
"""

from enum import Enum

STANDARD_FIELDS: frozenset[str] = frozenset(
    {
        "title",
        "author",
        "subject",
        "keywords",
        "creator",
        "producer",
        "creation_date",
        "mod_date",
    }
)

EXTENDED_FIELDS: frozenset[str] = frozenset(
    {
        "organization",
        "department",
        "team",
        "category",
        "version",
        "language",
        "copyright",
        "license",
        "confidentiality",
        "email",
        "website",
        "format",
        "generator",
        "custom",
    }
)

COMPUTED_FIELDS: frozenset[str] = frozenset(
    {
        "word_count",
        "page_count",
        "toc_depth",
        "has_images",
        "has_tables",
        "has_code_blocks",
        "has_diagrams",
    }
)

CONFIDENTIALITY_LEVELS: tuple[str, ...] = ("public", "internal", "confidential", "restricted")


class FieldCategory(Enum):
    """Bucket a metadata field is stored in."""

    STANDARD = "standard"
    EXTENDED = "extended"
    COMPUTED = "computed"


def is_standard_field(key: str) -> bool:
    """Check if key is a standard PDF metadata field."""
    return key in STANDARD_FIELDS


def is_extended_field(key: str) -> bool:
    """Check if key is an extended metadata field."""
    return key in EXTENDED_FIELDS


def is_computed_field(key: str) -> bool:
    """Check if key is a computed statistics field."""
    return key in COMPUTED_FIELDS


def classify_field(key: str) -> FieldCategory | None:
    """Classify a metadata key.

    Args:
        key: Field name, e.g. "title" or "word_count".

    Returns:
        The field's category, or None if the key is not part of the schema.
    """
    if key in STANDARD_FIELDS:
        return FieldCategory.STANDARD
    if key in EXTENDED_FIELDS:
        return FieldCategory.EXTENDED
    if key in COMPUTED_FIELDS:
        return FieldCategory.COMPUTED
    return None
