"""Protocol definitions for injectable collaborators.

Services depend on these interfaces rather than on concrete
implementations, so tests can substitute fakes.

Example:
    class MyService:
        def __init__(self, logger: LoggerProtocol | None = None):
            self._logger = logger or loguru.logger
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..metadata.model.types import (
        MetadataExtractionContext,
        MetadataExtractionResult,
    )


@runtime_checkable
class LoggerProtocol(Protocol):
    """Observational logging collaborator.

    loguru's ``logger`` satisfies this protocol. Implementations must not
    affect extraction behavior.
    """

    def debug(self, message: str) -> None:
        ...

    def info(self, message: str) -> None:
        ...

    def warning(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...


class NullLogger:
    """Logger that discards every message."""

    def debug(self, message: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass


@runtime_checkable
class MetadataExtractorProtocol(Protocol):
    """Protocol for metadata extraction pipelines."""

    def extract(self, context: MetadataExtractionContext) -> MetadataExtractionResult:
        """Run extraction synchronously."""
        ...

    async def extract_metadata(
        self, context: MetadataExtractionContext
    ) -> MetadataExtractionResult:
        """Run extraction for async callers."""
        ...
