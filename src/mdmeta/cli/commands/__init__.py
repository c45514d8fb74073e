"""CLI command handlers for mdmeta."""

from .extract import OUTPUT_FORMATS, add_extract_arguments, format_result, handle_extract

__all__ = [
    "OUTPUT_FORMATS",
    "add_extract_arguments",
    "format_result",
    "handle_extract",
]
