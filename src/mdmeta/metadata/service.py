"""Metadata service for the conversion pipeline.

Wraps the extractor and provides stateless transforms of resolved
metadata for downstream consumers: the PDF info dictionary for the
renderer, HTML meta tags for templating, and summary/merge/filter helpers.
"""

from __future__ import annotations

import html
from dataclasses import fields, replace
from datetime import date
from typing import Any, Mapping

from loguru import logger as default_logger

from mdmeta.app.protocols import LoggerProtocol, MetadataExtractorProtocol
from mdmeta.core.config import MetadataConfig
from mdmeta.metadata.extraction.extractor import MetadataExtractor
from mdmeta.metadata.model.fields import COMPUTED_FIELDS, EXTENDED_FIELDS
from mdmeta.metadata.model.types import (
    DocumentMetadata,
    MetadataExtractionContext,
    MetadataExtractionResult,
)
from mdmeta.utils.dates import to_iso8601

# (attribute, PDF info key) for the string-valued standard fields
_PDF_STRING_FIELDS = (
    ("title", "Title"),
    ("author", "Author"),
    ("subject", "Subject"),
    ("keywords", "Keywords"),
    ("creator", "Creator"),
    ("producer", "Producer"),
)

_PDF_DATE_FIELDS = (
    ("creation_date", "CreationDate"),
    ("mod_date", "ModDate"),
)

# (attribute, meta name) in output order
_META_TAG_FIELDS = (
    ("author", "author"),
    ("subject", "description"),
    ("keywords", "keywords"),
    ("language", "language"),
    ("organization", "organization"),
    ("copyright", "copyright"),
    ("version", "version"),
)

_DUBLIN_CORE_FIELDS = (
    ("title", "DC.title"),
    ("author", "DC.creator"),
    ("subject", "DC.description"),
    ("language", "DC.language"),
)

_FEATURE_LABELS = (
    ("has_images", "images"),
    ("has_tables", "tables"),
    ("has_code_blocks", "code"),
    ("has_diagrams", "diagrams"),
)


def escape_html(value: Any) -> str:
    """Escape ``& < > " '`` for use in HTML text and attributes."""
    return html.escape(str(value), quote=True)


class MetadataService:
    """Manages document metadata throughout the conversion pipeline."""

    def __init__(
        self,
        logger: LoggerProtocol | None = None,
        extractor: MetadataExtractorProtocol | None = None,
    ):
        """Initialize the service.

        Args:
            logger: Logging collaborator (defaults to loguru's logger).
            extractor: Extraction pipeline (created with the same logger if omitted).
        """
        self._logger = logger or default_logger
        self._extractor = extractor or MetadataExtractor(self._logger)

    async def extract_metadata(
        self, context: MetadataExtractionContext
    ) -> MetadataExtractionResult:
        """Extract metadata from a prepared context."""
        self._logger.debug(
            f"Extracting metadata: file={getattr(context, 'file_path', None)!r}"
        )
        return await self._extractor.extract_metadata(context)

    async def extract_metadata_simple(
        self,
        markdown_content: str,
        file_path: str | None = None,
        config: MetadataConfig | Mapping[str, Any] | None = None,
    ) -> MetadataExtractionResult:
        """Extract metadata from raw markdown (convenience method).

        Args:
            markdown_content: Full markdown document, possibly with frontmatter.
            file_path: Source path for filename heuristics.
            config: A MetadataConfig, or partial overrides for the defaults.

        Returns:
            MetadataExtractionResult.
        """
        context = MetadataExtractor.create_context(markdown_content, file_path, config)
        return await self.extract_metadata(context)

    def to_pdf_info(self, metadata: DocumentMetadata) -> dict[str, str]:
        """Convert metadata to a PDF document information dictionary.

        Dates are rendered as ISO-8601 UTC strings.
        """
        info: dict[str, str] = {}

        for attr, key in _PDF_STRING_FIELDS:
            value = getattr(metadata, attr)
            if value:
                info[key] = str(value)

        for attr, key in _PDF_DATE_FIELDS:
            value = getattr(metadata, attr)
            if value:
                info[key] = to_iso8601(value) if isinstance(value, date) else str(value)

        return info

    def to_html_meta_tags(self, metadata: DocumentMetadata) -> str:
        """Render metadata as HTML head tags, one per line.

        Emits <title>, named meta tags and their Dublin Core equivalents.
        Every value is HTML-escaped.
        """
        tags: list[str] = []

        if metadata.title:
            tags.append(f"<title>{escape_html(metadata.title)}</title>")

        for attr, name in _META_TAG_FIELDS + _DUBLIN_CORE_FIELDS:
            value = getattr(metadata, attr)
            if value:
                tags.append(f'<meta name="{name}" content="{escape_html(value)}">')

        return "\n".join(tags)

    def generate_summary(self, metadata: DocumentMetadata) -> str:
        """Summarize metadata on one line for logging."""
        parts: list[str] = []

        if metadata.title:
            parts.append(f'Title: "{metadata.title}"')
        if metadata.author:
            parts.append(f'Author: "{metadata.author}"')
        if metadata.organization:
            parts.append(f'Organization: "{metadata.organization}"')
        if metadata.version:
            parts.append(f'Version: "{metadata.version}"')

        if metadata.word_count:
            parts.append(f"Words: {metadata.word_count}")
        if metadata.page_count:
            parts.append(f"Pages: ~{metadata.page_count}")

        features = [label for attr, label in _FEATURE_LABELS if getattr(metadata, attr)]
        if features:
            parts.append(f"Features: {', '.join(features)}")

        return ", ".join(parts)

    def merge_metadata(
        self, base: DocumentMetadata, override: DocumentMetadata
    ) -> DocumentMetadata:
        """Merge two metadata records, with override taking precedence.

        Present (non-None) override fields replace base fields. ``custom``
        mappings are merged key by key; a ``custom`` value that is not a
        mapping takes no part in that merge.
        """
        changes = {
            f.name: getattr(override, f.name)
            for f in fields(override)
            if getattr(override, f.name) is not None
        }
        customs = [c for c in (base.custom, override.custom) if isinstance(c, Mapping)]
        if customs:
            changes["custom"] = {key: value for custom in customs for key, value in custom.items()}
        return replace(base, **changes)

    def filter_metadata(
        self,
        metadata: DocumentMetadata,
        *,
        require_title: bool = False,
        require_author: bool = False,
        include_extended: bool = True,
        include_computed: bool = True,
    ) -> DocumentMetadata:
        """Filter metadata by completeness and category.

        Args:
            metadata: Resolved metadata.
            require_title: Keep the title only when it is present.
            require_author: Keep the author only when it is present.
            include_extended: Keep extended fields.
            include_computed: Keep computed fields.

        Returns:
            New DocumentMetadata with the selected fields.
        """
        kept: dict[str, Any] = {}

        # Standard fields
        if not require_title or metadata.title:
            if metadata.title:
                kept["title"] = metadata.title
        if not require_author or metadata.author:
            if metadata.author:
                kept["author"] = metadata.author
        for attr in ("subject", "keywords", "creator", "producer", "creation_date", "mod_date"):
            value = getattr(metadata, attr)
            if value:
                kept[attr] = value

        if include_extended:
            for attr in sorted(EXTENDED_FIELDS):
                value = getattr(metadata, attr)
                if value:
                    kept[attr] = value

        # Zero counts are dropped; False feature flags are kept
        if include_computed:
            for attr in sorted(COMPUTED_FIELDS):
                value = getattr(metadata, attr)
                if attr.startswith("has_") and value is not None:
                    kept[attr] = value
                elif value:
                    kept[attr] = value

        return DocumentMetadata.from_dict(kept)

    def get_document_language(
        self, metadata: DocumentMetadata | None = None, fallback: str = "en"
    ) -> str:
        """Get the document language, falling back to the UI language."""
        if metadata is not None and metadata.language:
            return metadata.language
        return fallback
