"""Extract command for mdmeta CLI."""

import asyncio
import json
import sys
from pathlib import Path

from ...core.config import MetadataConfig
from ...metadata import (
    MetadataExtractionResult,
    MetadataExtractor,
    MetadataService,
    parse_frontmatter,
    parse_simple_frontmatter,
)
from ...utils.dates import to_iso8601

OUTPUT_FORMATS = ("summary", "json", "pdf-info", "html")


def add_extract_arguments(parser) -> None:
    """Add arguments for the extract command.

    Args:
        parser: ArgumentParser to add arguments to.
    """
    parser.add_argument("path", help="Markdown file to read")
    parser.add_argument(
        "-f",
        "--format",
        choices=OUTPUT_FORMATS,
        default="summary",
        help="Output format (default: summary)",
    )
    parser.add_argument(
        "--from-filename",
        action="store_true",
        help="Extract version and date from the file name",
    )
    parser.add_argument(
        "--no-frontmatter", action="store_true", help="Ignore YAML frontmatter"
    )
    parser.add_argument(
        "--no-content", action="store_true", help="Do not infer the title from content"
    )
    parser.add_argument(
        "--no-stats", action="store_true", help="Do not compute document statistics"
    )
    parser.add_argument(
        "--disable",
        action="store_true",
        help="Disable auto-extraction entirely (defaults only)",
    )
    parser.add_argument(
        "--require-title", action="store_true", help="Warn when no title is found"
    )
    parser.add_argument(
        "--require-author", action="store_true", help="Warn when no author is found"
    )
    parser.add_argument(
        "--simple-parser",
        action="store_true",
        help="Use the line-based frontmatter reader instead of YAML",
    )


def handle_extract(args, config: MetadataConfig) -> int:
    """Handle extract command.

    Args:
        args: Parsed command arguments.
        config: Base configuration (from the environment).

    Returns:
        Process exit code.
    """
    return asyncio.run(_handle_extract_async(args, config))


async def _handle_extract_async(args, config: MetadataConfig) -> int:
    path = Path(args.path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        print(f"Error: cannot read {path}: {e}", file=sys.stderr)
        return 1

    _apply_flags(args, config)
    parser = parse_simple_frontmatter if args.simple_parser else parse_frontmatter
    context = MetadataExtractor.create_context(
        content, str(path), config, parser=parser
    )

    service = MetadataService()
    result = await service.extract_metadata(context)

    print(format_result(service, result, args.format))

    for warning in result.warnings:
        print(f"Warning: {warning}", file=sys.stderr)
    for error in result.errors:
        print(f"Error: {error}", file=sys.stderr)

    return 0 if result.ok else 1


def _apply_flags(args, config: MetadataConfig) -> None:
    auto = config.auto_extraction
    if args.disable:
        config.enabled = False
    if args.from_filename:
        auto.from_filename = True
    if args.no_frontmatter:
        auto.from_frontmatter = False
    if args.no_content:
        auto.from_content = False
    if args.no_stats:
        auto.compute_stats = False
    if args.require_title:
        config.validation.require_title = True
    if args.require_author:
        config.validation.require_author = True


def format_result(
    service: MetadataService, result: MetadataExtractionResult, output_format: str
) -> str:
    """Render an extraction result in the requested output format.

    Args:
        service: Metadata service providing the transforms.
        result: Extraction result.
        output_format: One of OUTPUT_FORMATS.

    Returns:
        Rendered text.
    """
    metadata = result.metadata
    if output_format == "json":
        payload = {
            "metadata": metadata.to_dict(),
            "sources": {
                key: {"source": entry.source.value, "priority": entry.priority}
                for key, entry in result.sources.items()
            },
            "warnings": result.warnings,
            "errors": result.errors,
        }
        return json.dumps(payload, indent=2, default=_json_default, ensure_ascii=False)
    if output_format == "pdf-info":
        return json.dumps(service.to_pdf_info(metadata), indent=2, ensure_ascii=False)
    if output_format == "html":
        return service.to_html_meta_tags(metadata)
    return service.generate_summary(metadata)


def _json_default(value):
    try:
        return to_iso8601(value)
    except TypeError:
        return str(value)
