"""Pytest configuration and fixtures."""

from datetime import datetime, timezone
from pathlib import Path

import pytest

from mdmeta.core.config import MetadataConfig
from mdmeta.metadata import MetadataExtractor, MetadataService
from tests.fakes import RecordingLogger


@pytest.fixture
def generate_date() -> datetime:
    """Provide a fixed generation timestamp."""
    return datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def config() -> MetadataConfig:
    """Provide a default metadata configuration."""
    return MetadataConfig()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Provide a logger that records messages."""
    return RecordingLogger()


@pytest.fixture
def extractor(recording_logger: RecordingLogger) -> MetadataExtractor:
    """Provide an extractor wired to the recording logger."""
    return MetadataExtractor(logger=recording_logger)


@pytest.fixture
def service(recording_logger: RecordingLogger) -> MetadataService:
    """Provide a metadata service wired to the recording logger."""
    return MetadataService(logger=recording_logger)


@pytest.fixture
def markdown_file(tmp_path: Path) -> Path:
    """Create a markdown document with frontmatter on disk."""
    path = tmp_path / "quarterly-report_v1.2.md"
    path.write_text(
        "---\n"
        "title: Quarterly Report\n"
        "author: Jane Doe\n"
        "tags: [finance, q1]\n"
        "---\n"
        "# Heading\n"
        "\n"
        "Revenue grew this quarter.\n",
        encoding="utf-8",
    )
    return path
