"""Metadata model: field vocabularies and core types."""

from mdmeta.metadata.model.fields import (
    COMPUTED_FIELDS,
    CONFIDENTIALITY_LEVELS,
    EXTENDED_FIELDS,
    STANDARD_FIELDS,
    FieldCategory,
    classify_field,
    is_computed_field,
    is_extended_field,
    is_standard_field,
)
from mdmeta.metadata.model.types import (
    DEFAULT_PRIORITY,
    FALLBACK_PRIORITY,
    FRONTMATTER_PRIORITY,
    HEURISTIC_PRIORITY,
    DocumentMetadata,
    MetadataCollection,
    MetadataEntry,
    MetadataExtractionContext,
    MetadataExtractionResult,
    MetadataSource,
)

__all__ = [
    # Fields
    "STANDARD_FIELDS",
    "EXTENDED_FIELDS",
    "COMPUTED_FIELDS",
    "CONFIDENTIALITY_LEVELS",
    "FieldCategory",
    "classify_field",
    "is_standard_field",
    "is_extended_field",
    "is_computed_field",
    # Types
    "MetadataSource",
    "MetadataEntry",
    "MetadataCollection",
    "DocumentMetadata",
    "MetadataExtractionContext",
    "MetadataExtractionResult",
    # Priorities
    "DEFAULT_PRIORITY",
    "FALLBACK_PRIORITY",
    "HEURISTIC_PRIORITY",
    "FRONTMATTER_PRIORITY",
]
