"""Metadata extraction.

Pipeline:
- MetadataExtractor: runs the source extractors, merge and validation
- AUTO_EXTRACTION_STEPS: the gated extractors, in execution order

Source extractors:
- extract_defaults, extract_frontmatter, extract_from_content,
  extract_from_filename, compute_statistics

Parsing utilities:
- parse_frontmatter: YAML frontmatter via PyYAML
- parse_simple_frontmatter: minimal line-based reader
- extract_tags_from_field: Parse tag lists from various YAML formats
"""

from mdmeta.metadata.extraction.extractor import (
    AUTO_EXTRACTION_STEPS,
    ExtractionStep,
    MetadataExtractor,
)
from mdmeta.metadata.extraction.parsing import (
    FrontmatterParser,
    FrontmatterResult,
    extract_tags_from_field,
    parse_frontmatter,
    parse_simple_frontmatter,
)
from mdmeta.metadata.extraction.sources import (
    coerce_field_value,
    compute_statistics,
    count_words,
    extract_defaults,
    extract_from_content,
    extract_from_filename,
    extract_frontmatter,
    title_from_filename,
)

__all__ = [
    # Pipeline
    "MetadataExtractor",
    "ExtractionStep",
    "AUTO_EXTRACTION_STEPS",
    # Sources
    "extract_defaults",
    "extract_frontmatter",
    "extract_from_content",
    "extract_from_filename",
    "compute_statistics",
    "coerce_field_value",
    "count_words",
    "title_from_filename",
    # Parsing
    "FrontmatterParser",
    "FrontmatterResult",
    "parse_frontmatter",
    "parse_simple_frontmatter",
    "extract_tags_from_field",
]
