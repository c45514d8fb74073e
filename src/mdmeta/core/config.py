"""Configuration management for metadata extraction."""

import os
from dataclasses import dataclass, field, fields
from typing import Any, Mapping

from .exceptions import ConfigError

# Placeholder defaults that must never mask inferred values
PLACEHOLDER_TITLE = "Document Title"
PLACEHOLDER_AUTHOR = "Author Name"


def _default_values() -> dict[str, Any]:
    """Get default metadata values."""
    return {
        "language": "en",
        "title": PLACEHOLDER_TITLE,
        "author": PLACEHOLDER_AUTHOR,
        "subject": "Document Subject",
        "keywords": "keywords, tags, categories",
        "creator": "MD2PDF",
        "producer": "MD2PDF",
        "format": "markdown",
    }


def _default_frontmatter_mapping() -> dict[str, str]:
    """Get default frontmatter key -> metadata field mapping."""
    return {
        # Standard mappings
        "title": "title",
        "author": "author",
        "authors": "author",
        "description": "subject",
        "subject": "subject",
        "keywords": "keywords",
        "tags": "keywords",
        "date": "creation_date",
        "created": "creation_date",
        "creationDate": "creation_date",
        "modified": "mod_date",
        "updated": "mod_date",
        "modDate": "mod_date",
        # Extended mappings
        "organization": "organization",
        "org": "organization",
        "company": "organization",
        "department": "department",
        "dept": "department",
        "team": "team",
        "category": "category",
        "type": "category",
        "version": "version",
        "lang": "language",
        "language": "language",
        "copyright": "copyright",
        "license": "license",
        "confidential": "confidentiality",
        "confidentiality": "confidentiality",
        "email": "email",
        "contact": "email",
        "website": "website",
        "url": "website",
    }


@dataclass
class AutoExtractionConfig:
    """Which inference sources run during extraction."""

    from_frontmatter: bool = True
    from_content: bool = True
    from_filename: bool = False
    compute_stats: bool = True


@dataclass
class ValidationConfig:
    """Non-fatal validation rules."""

    require_title: bool = False
    require_author: bool = False
    max_keyword_length: int = 255
    max_subject_length: int = 512


@dataclass
class MetadataConfig:
    """Main metadata extraction configuration."""

    # Global kill-switch; defaults are still applied when disabled
    enabled: bool = True
    auto_extraction: AutoExtractionConfig = field(default_factory=AutoExtractionConfig)
    defaults: dict[str, Any] = field(default_factory=_default_values)
    frontmatter_mapping: dict[str, str] = field(default_factory=_default_frontmatter_mapping)
    validation: ValidationConfig = field(default_factory=ValidationConfig)

    @classmethod
    def from_dict(cls, overrides: Mapping[str, Any] | None = None) -> "MetadataConfig":
        """Build a configuration from partial overrides.

        Nested sections (``auto_extraction``, ``validation``) are merged
        field by field over the defaults. ``defaults`` and
        ``frontmatter_mapping`` replace the default mappings wholesale.

        Args:
            overrides: Partial configuration, or None for all defaults.

        Returns:
            New MetadataConfig.

        Raises:
            ConfigError: If a key is unknown or a section has the wrong shape.
        """
        config = cls()
        if not overrides:
            return config

        for key, value in overrides.items():
            if key == "enabled":
                config.enabled = bool(value)
            elif key == "auto_extraction":
                config.auto_extraction = _merge_section(
                    config.auto_extraction, value, key
                )
            elif key == "validation":
                config.validation = _merge_section(config.validation, value, key)
            elif key in ("defaults", "frontmatter_mapping"):
                if not isinstance(value, Mapping):
                    raise ConfigError(key, "expected a mapping")
                setattr(config, key, dict(value))
            else:
                raise ConfigError(key, "unknown configuration key")

        return config

    @classmethod
    def from_env(cls) -> "MetadataConfig":
        """Load configuration from environment variables."""
        config = cls()

        if (value := _env_flag("MDMETA_ENABLED")) is not None:
            config.enabled = value

        # Auto-extraction switches
        auto = config.auto_extraction
        if (value := _env_flag("MDMETA_FROM_FRONTMATTER")) is not None:
            auto.from_frontmatter = value
        if (value := _env_flag("MDMETA_FROM_CONTENT")) is not None:
            auto.from_content = value
        if (value := _env_flag("MDMETA_FROM_FILENAME")) is not None:
            auto.from_filename = value
        if (value := _env_flag("MDMETA_COMPUTE_STATS")) is not None:
            auto.compute_stats = value

        # Validation rules
        if (value := _env_flag("MDMETA_REQUIRE_TITLE")) is not None:
            config.validation.require_title = value
        if (value := _env_flag("MDMETA_REQUIRE_AUTHOR")) is not None:
            config.validation.require_author = value
        if (length := _env_int("MDMETA_MAX_KEYWORD_LENGTH")) is not None:
            config.validation.max_keyword_length = length
        if (length := _env_int("MDMETA_MAX_SUBJECT_LENGTH")) is not None:
            config.validation.max_subject_length = length

        # Default values
        if author := os.environ.get("MDMETA_DEFAULT_AUTHOR"):
            config.defaults["author"] = author
        if language := os.environ.get("MDMETA_DEFAULT_LANGUAGE"):
            config.defaults["language"] = language

        return config


def _merge_section(section: Any, value: Any, key: str) -> Any:
    """Return a copy of a dataclass section with overrides applied."""
    if not isinstance(value, Mapping):
        raise ConfigError(key, "expected a mapping")

    known = {f.name for f in fields(section)}
    merged = {name: getattr(section, name) for name in known}
    for name, item in value.items():
        if name not in known:
            raise ConfigError(f"{key}.{name}", "unknown configuration key")
        merged[name] = item
    return type(section)(**merged)


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_flag(name: str) -> bool | None:
    """Read a boolean environment variable, None when unset."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(name, f"expected a boolean, got {raw!r}")


def _env_int(name: str) -> int | None:
    """Read a positive integer environment variable, None when unset."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(name, f"expected an integer, got {raw!r}") from None
    if value < 0:
        raise ConfigError(name, "must not be negative")
    return value
