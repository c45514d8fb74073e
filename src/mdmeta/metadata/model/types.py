"""Core metadata types.

Defines the provenance-tracked entries produced by the extractors, the
per-bucket collection they are stored in, the flat resolved record and the
context/result envelope of an extraction run.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any, Iterator, Mapping

from mdmeta.core.config import MetadataConfig
from mdmeta.metadata.model.fields import FieldCategory, classify_field

# Priority per source. Higher wins when merging; ties keep the first entry.
DEFAULT_PRIORITY = 1
FALLBACK_PRIORITY = 1
HEURISTIC_PRIORITY = 2
FRONTMATTER_PRIORITY = 3


class MetadataSource(Enum):
    """Where a metadata value came from."""

    DEFAULT = "default"
    FRONTMATTER = "frontmatter"
    AUTO = "auto"
    CONFIG = "config"
    CLI = "cli"


@dataclass(frozen=True)
class MetadataEntry:
    """A metadata value with provenance.

    Attributes:
        value: The field value.
        source: Which source produced the value.
        priority: Merge priority; higher numbers win.
    """

    value: Any
    source: MetadataSource
    priority: int


@dataclass
class MetadataCollection:
    """Metadata entries grouped by field category.

    Each bucket maps a field name to the entry currently holding it. Entries
    only enter through offer(), which replaces an existing entry only when
    the new priority is strictly greater.
    """

    standard: dict[str, MetadataEntry] = field(default_factory=dict)
    extended: dict[str, MetadataEntry] = field(default_factory=dict)
    computed: dict[str, MetadataEntry] = field(default_factory=dict)

    def bucket_for(self, key: str) -> dict[str, MetadataEntry] | None:
        """Get the bucket a field belongs in, or None for unknown fields."""
        category = classify_field(key)
        if category is FieldCategory.STANDARD:
            return self.standard
        if category is FieldCategory.EXTENDED:
            return self.extended
        if category is FieldCategory.COMPUTED:
            return self.computed
        return None

    def offer(self, key: str, entry: MetadataEntry) -> bool:
        """Offer an entry for a field.

        Args:
            key: Field name.
            entry: Candidate entry.

        Returns:
            True if the entry was stored, False if the field is unknown or
            an entry with equal or higher priority already holds it.
        """
        bucket = self.bucket_for(key)
        if bucket is None:
            return False
        existing = bucket.get(key)
        if existing is not None and entry.priority <= existing.priority:
            return False
        bucket[key] = entry
        return True

    def get(self, key: str) -> MetadataEntry | None:
        """Get the entry currently holding a field."""
        bucket = self.bucket_for(key)
        return bucket.get(key) if bucket is not None else None

    def field_count(self) -> int:
        """Total number of fields across all buckets."""
        return len(self.standard) + len(self.extended) + len(self.computed)

    def items(self) -> Iterator[tuple[str, MetadataEntry]]:
        """Iterate entries in bucket order: standard, extended, computed."""
        yield from self.standard.items()
        yield from self.extended.items()
        yield from self.computed.items()


@dataclass
class DocumentMetadata:
    """Fully resolved document metadata, one value per field.

    None means the field is absent.
    """

    # Standard PDF fields
    title: str | None = None
    author: str | None = None
    subject: str | None = None
    keywords: str | None = None
    creator: str | None = None
    producer: str | None = None
    creation_date: datetime | None = None
    mod_date: datetime | None = None

    # Extended fields
    organization: str | None = None
    department: str | None = None
    team: str | None = None
    category: str | None = None
    version: str | None = None
    language: str | None = None
    copyright: str | None = None
    license: str | None = None
    confidentiality: str | None = None
    email: str | None = None
    website: str | None = None
    format: str | None = None
    generator: str | None = None
    custom: dict[str, Any] | None = None

    # Computed fields
    word_count: int | None = None
    page_count: int | None = None
    toc_depth: int | None = None
    has_images: bool | None = None
    has_tables: bool | None = None
    has_code_blocks: bool | None = None
    has_diagrams: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dict containing only present fields."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DocumentMetadata:
        """Build from a mapping, ignoring keys outside the schema."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})


@dataclass(frozen=True)
class MetadataExtractionContext:
    """Input for one extraction run.

    Attributes:
        markdown_content: Markdown body, already read.
        config: Extraction configuration.
        file_path: Source file path, used for filename heuristics.
        frontmatter: Already-parsed frontmatter mapping.
        generate_date: Timestamp used for default creation/modification
            dates (defaults to now).
    """

    markdown_content: str
    config: MetadataConfig = field(default_factory=MetadataConfig)
    file_path: str | None = None
    frontmatter: dict[str, Any] | None = None
    generate_date: datetime | None = None


@dataclass
class MetadataExtractionResult:
    """Outcome of one extraction run.

    Attributes:
        metadata: Resolved metadata (may be partial when errors is non-empty).
        sources: All entries considered, with provenance.
        warnings: Validation issues; never block output.
        errors: Failures caught by the pipeline.
    """

    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)
    sources: MetadataCollection = field(default_factory=MetadataCollection)
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Whether the run finished without caught errors."""
        return not self.errors
