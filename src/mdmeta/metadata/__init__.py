"""Document metadata domain for mdmeta.

Subpackages
-----------
model
    Field vocabularies, classifier and core types
extraction
    Source extractors, frontmatter parsing and the extraction pipeline

Modules
-------
merge
    Priority merge of source entries
validation
    Non-fatal validation rules
service
    MetadataService facade with output transforms

Example
-------
>>> from mdmeta.metadata import MetadataExtractor, MetadataService
>>>
>>> context = MetadataExtractor.create_context(markdown, "report_v1.2.md")
>>> result = MetadataExtractor().extract(context)
>>> MetadataService().to_pdf_info(result.metadata)
"""

# =============================================================================
# Model
# =============================================================================
from mdmeta.metadata.model import (
    COMPUTED_FIELDS,
    DEFAULT_PRIORITY,
    EXTENDED_FIELDS,
    FALLBACK_PRIORITY,
    FRONTMATTER_PRIORITY,
    HEURISTIC_PRIORITY,
    STANDARD_FIELDS,
    DocumentMetadata,
    FieldCategory,
    MetadataCollection,
    MetadataEntry,
    MetadataExtractionContext,
    MetadataExtractionResult,
    MetadataSource,
    classify_field,
    is_computed_field,
    is_extended_field,
    is_standard_field,
)

# =============================================================================
# Extraction
# =============================================================================
from mdmeta.metadata.extraction import (
    AUTO_EXTRACTION_STEPS,
    FrontmatterResult,
    MetadataExtractor,
    parse_frontmatter,
    parse_simple_frontmatter,
)

# =============================================================================
# Merge, validation and service
# =============================================================================
from mdmeta.metadata.merge import merge_sources
from mdmeta.metadata.service import MetadataService, escape_html
from mdmeta.metadata.validation import Invalid, Ok, validate_metadata

__all__ = [
    # Model
    "STANDARD_FIELDS",
    "EXTENDED_FIELDS",
    "COMPUTED_FIELDS",
    "FieldCategory",
    "classify_field",
    "is_standard_field",
    "is_extended_field",
    "is_computed_field",
    "MetadataSource",
    "MetadataEntry",
    "MetadataCollection",
    "DocumentMetadata",
    "MetadataExtractionContext",
    "MetadataExtractionResult",
    "DEFAULT_PRIORITY",
    "FALLBACK_PRIORITY",
    "HEURISTIC_PRIORITY",
    "FRONTMATTER_PRIORITY",
    # Extraction
    "MetadataExtractor",
    "AUTO_EXTRACTION_STEPS",
    "FrontmatterResult",
    "parse_frontmatter",
    "parse_simple_frontmatter",
    # Merge / validation / service
    "merge_sources",
    "validate_metadata",
    "Ok",
    "Invalid",
    "MetadataService",
    "escape_html",
]
