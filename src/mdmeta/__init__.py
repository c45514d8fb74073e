"""mdmeta - Metadata extraction and merging for Markdown to PDF conversion."""

from mdmeta.core import ConfigError, ContextError, MdMetaError, MetadataConfig
from mdmeta.metadata import (
    DocumentMetadata,
    MetadataExtractionContext,
    MetadataExtractionResult,
    MetadataExtractor,
    MetadataService,
)

__version__ = "1.0.0"

__all__ = [
    "MetadataConfig",
    "MetadataExtractor",
    "MetadataService",
    "DocumentMetadata",
    "MetadataExtractionContext",
    "MetadataExtractionResult",
    "MdMetaError",
    "ConfigError",
    "ContextError",
]
