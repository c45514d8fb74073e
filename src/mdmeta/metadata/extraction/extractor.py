"""Metadata extraction pipeline.

Runs the source extractors in a fixed order, merges their entries by
priority and validates the result. Every failure is contained: the
pipeline never raises, it records errors on the result instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Mapping

from loguru import logger as default_logger

from mdmeta.app.protocols import LoggerProtocol
from mdmeta.core.config import MetadataConfig
from mdmeta.core.exceptions import ContextError
from mdmeta.metadata.extraction.parsing import FrontmatterParser, parse_frontmatter
from mdmeta.metadata.extraction.sources import (
    compute_statistics,
    extract_defaults,
    extract_from_content,
    extract_from_filename,
    extract_frontmatter,
)
from mdmeta.metadata.merge import merge_sources
from mdmeta.metadata.model.types import (
    MetadataCollection,
    MetadataExtractionContext,
    MetadataExtractionResult,
)
from mdmeta.metadata.validation import validate_metadata
from mdmeta.utils.dates import utc_now

SourceExtractor = Callable[[MetadataExtractionContext, MetadataCollection], None]


@dataclass(frozen=True)
class ExtractionStep:
    """A gated source extractor.

    Attributes:
        name: Source name used in log messages.
        run: Extractor function.
        is_enabled: Gate evaluated against the context before running.
    """

    name: str
    run: SourceExtractor
    is_enabled: Callable[[MetadataExtractionContext], bool]


# Order matters: later steps inspect entries placed by earlier ones.
AUTO_EXTRACTION_STEPS: tuple[ExtractionStep, ...] = (
    ExtractionStep(
        "frontmatter",
        extract_frontmatter,
        lambda ctx: ctx.config.auto_extraction.from_frontmatter and bool(ctx.frontmatter),
    ),
    ExtractionStep(
        "content",
        extract_from_content,
        lambda ctx: ctx.config.auto_extraction.from_content,
    ),
    ExtractionStep(
        "filename",
        extract_from_filename,
        lambda ctx: ctx.config.auto_extraction.from_filename and bool(ctx.file_path),
    ),
    ExtractionStep(
        "statistics",
        compute_statistics,
        lambda ctx: ctx.config.auto_extraction.compute_stats,
    ),
)


class MetadataExtractor:
    """Extracts document metadata from defaults, frontmatter, content and filename.

    The extractor holds no per-document state and can be shared across
    concurrent conversions.

    Example:
        >>> extractor = MetadataExtractor()
        >>> context = MetadataExtractor.create_context("# Hello World")
        >>> extractor.extract(context).metadata.title
        'Hello World'
    """

    def __init__(self, logger: LoggerProtocol | None = None):
        """Initialize the extractor.

        Args:
            logger: Logging collaborator (defaults to loguru's logger).
        """
        self._logger = logger or default_logger

    async def extract_metadata(
        self, context: MetadataExtractionContext
    ) -> MetadataExtractionResult:
        """Extract metadata for async pipelines.

        The body is synchronous; see extract().
        """
        return self.extract(context)

    def extract(self, context: MetadataExtractionContext) -> MetadataExtractionResult:
        """Extract complete metadata from a context.

        Args:
            context: Extraction input for one document.

        Returns:
            MetadataExtractionResult. Check ``errors``: failures are
            recorded there and never raised.
        """
        result = MetadataExtractionResult()

        try:
            _require_context(context)
            config = context.config
            auto = config.auto_extraction

            self._logger.info(
                f"Starting metadata extraction: enabled={config.enabled}, "
                f"frontmatter={auto.from_frontmatter}, content={auto.from_content}, "
                f"filename={auto.from_filename}, stats={auto.compute_stats}, "
                f"has_file={context.file_path is not None}, "
                f"has_frontmatter={context.frontmatter is not None}"
            )

            extract_defaults(context, result.sources)
            self._logger.debug(f"Extracted defaults: {result.sources.field_count()} fields")

            if config.enabled:
                for step in AUTO_EXTRACTION_STEPS:
                    self._run_step(step, context, result.sources)
            else:
                self._logger.info("Metadata auto-extraction disabled, using defaults only")

            result.metadata = merge_sources(result.sources)

            for issue in validate_metadata(result.metadata, config.validation):
                result.warnings.append(issue.message)

            self._logger.debug(
                f"Extracted metadata with {len(result.metadata.to_dict())} fields"
            )
        except Exception as e:
            result.errors.append(f"Metadata extraction failed: {e}")
            self._logger.error(f"Metadata extraction error: {e!r}")

        return result

    def _run_step(
        self,
        step: ExtractionStep,
        context: MetadataExtractionContext,
        sources: MetadataCollection,
    ) -> None:
        if not step.is_enabled(context):
            self._logger.debug(f"Skipped {step.name} extraction")
            return

        before = sources.field_count()
        step.run(context, sources)
        after = sources.field_count()
        self._logger.info(
            f"Extracted from {step.name}: {after - before} fields added, {after} total"
        )

    @staticmethod
    def create_context(
        markdown_content: str,
        file_path: str | None = None,
        config: MetadataConfig | Mapping[str, Any] | None = None,
        *,
        parser: FrontmatterParser = parse_frontmatter,
        generate_date: datetime | None = None,
    ) -> MetadataExtractionContext:
        """Create an extraction context from raw markdown.

        Splits off a leading frontmatter block and passes the remaining
        body as the markdown content.

        Args:
            markdown_content: Full markdown document, possibly with frontmatter.
            file_path: Source path for filename heuristics.
            config: A MetadataConfig, or partial overrides for the defaults.
            parser: Frontmatter reader (PyYAML by default; use
                parse_simple_frontmatter for the line-based reader).
            generate_date: Timestamp for default dates (defaults to now).

        Returns:
            MetadataExtractionContext ready for extraction.

        Raises:
            ConfigError: If config overrides are invalid.
        """
        if not isinstance(config, MetadataConfig):
            config = MetadataConfig.from_dict(config)

        parsed = parser(markdown_content)

        return MetadataExtractionContext(
            markdown_content=parsed.content,
            config=config,
            file_path=file_path or None,
            frontmatter=parsed.data if parsed.has_frontmatter else None,
            generate_date=generate_date or utc_now(),
        )


def _require_context(context: Any) -> None:
    if context is None:
        raise ContextError("Extraction context is required")
    if not isinstance(context, MetadataExtractionContext):
        raise ContextError(
            f"Expected MetadataExtractionContext, got {type(context).__name__}"
        )
    if not isinstance(context.markdown_content, str):
        raise ContextError("Extraction context has no markdown content")
    if not isinstance(context.config, MetadataConfig):
        raise ContextError("Extraction context has no configuration")
