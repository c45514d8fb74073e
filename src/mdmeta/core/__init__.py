"""Core configuration and exceptions for mdmeta."""

from .config import (
    PLACEHOLDER_AUTHOR,
    PLACEHOLDER_TITLE,
    AutoExtractionConfig,
    MetadataConfig,
    ValidationConfig,
)
from .exceptions import (
    ConfigError,
    ContextError,
    FrontmatterError,
    MdMetaError,
)

__all__ = [
    "MetadataConfig",
    "AutoExtractionConfig",
    "ValidationConfig",
    "PLACEHOLDER_TITLE",
    "PLACEHOLDER_AUTHOR",
    "MdMetaError",
    "ConfigError",
    "ContextError",
    "FrontmatterError",
]
