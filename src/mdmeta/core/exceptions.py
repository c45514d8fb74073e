"""Custom exceptions for mdmeta."""


class MdMetaError(Exception):
    """Base exception for all mdmeta errors."""

    pass


class ConfigError(MdMetaError):
    """Metadata configuration is invalid."""

    def __init__(self, key: str, reason: str):
        """Initialize exception with the offending key.

        Args:
            key: Configuration key or environment variable name.
            reason: Human readable description of the problem.
        """
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid configuration for {key!r}: {reason}")


class ContextError(MdMetaError):
    """Extraction context is missing or malformed."""

    pass


class FrontmatterError(MdMetaError):
    """Frontmatter block could not be parsed."""

    pass
