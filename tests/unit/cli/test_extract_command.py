"""Tests for the extract CLI command."""

import json
from pathlib import Path

import pytest
from loguru import logger

from mdmeta.cli.main import create_parser, main


def run_cli(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestCreateParser:
    """Tests for argument parsing."""

    def test_extract_defaults(self):
        args = create_parser().parse_args(["extract", "doc.md"])

        assert args.command == "extract"
        assert args.path == "doc.md"
        assert args.format == "summary"
        assert args.from_filename is False
        assert args.simple_parser is False

    def test_short_v_is_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["-v"])

        assert exc_info.value.code == 0
        assert "1.0.0" in capsys.readouterr().out

    def test_verbose_is_long_option_only(self):
        args = create_parser().parse_args(["--verbose", "extract", "doc.md"])

        assert args.verbose is True

    def test_rejects_unknown_format(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["extract", "doc.md", "--format", "xml"])


class TestExtractCommand:
    """Tests for `mdmeta extract`."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in ("MDMETA_ENABLED", "MDMETA_FROM_FILENAME", "MDMETA_REQUIRE_AUTHOR"):
            monkeypatch.delenv(name, raising=False)
        yield
        # main() points loguru at the captured stderr
        logger.remove()

    def test_summary(self, markdown_file: Path, capsys):
        code = run_cli(["extract", str(markdown_file)])

        out = capsys.readouterr().out
        assert code == 0
        assert 'Title: "Quarterly Report"' in out
        assert 'Author: "Jane Doe"' in out

    def test_json(self, markdown_file: Path, capsys):
        code = run_cli(["extract", str(markdown_file), "--format", "json", "--from-filename"])

        payload = json.loads(capsys.readouterr().out)
        assert code == 0
        assert payload["metadata"]["title"] == "Quarterly Report"
        assert payload["metadata"]["keywords"] == "finance, q1"
        assert payload["metadata"]["version"] == "1.2"
        assert payload["metadata"]["creation_date"].endswith("Z")
        assert payload["sources"]["title"] == {"source": "frontmatter", "priority": 3}
        assert payload["errors"] == []

    def test_pdf_info(self, markdown_file: Path, capsys):
        run_cli(["extract", str(markdown_file), "-f", "pdf-info"])

        info = json.loads(capsys.readouterr().out)
        assert info["Title"] == "Quarterly Report"
        assert info["Keywords"] == "finance, q1"

    def test_html(self, markdown_file: Path, capsys):
        run_cli(["extract", str(markdown_file), "-f", "html"])

        out = capsys.readouterr().out
        assert "<title>Quarterly Report</title>" in out
        assert '<meta name="DC.creator" content="Jane Doe">' in out

    def test_no_frontmatter_flag(self, markdown_file: Path, capsys):
        run_cli(["extract", str(markdown_file), "-f", "json", "--no-frontmatter"])

        payload = json.loads(capsys.readouterr().out)
        assert payload["metadata"]["title"] == "Heading"

    def test_disable_flag(self, markdown_file: Path, capsys):
        run_cli(["extract", str(markdown_file), "-f", "json", "--disable"])

        metadata = json.loads(capsys.readouterr().out)["metadata"]
        assert "title" not in metadata
        assert "word_count" not in metadata

    def test_no_stats_flag(self, markdown_file: Path, capsys):
        run_cli(["extract", str(markdown_file), "-f", "json", "--no-stats"])

        assert "word_count" not in json.loads(capsys.readouterr().out)["metadata"]

    def test_simple_parser(self, markdown_file: Path, capsys):
        run_cli(["extract", str(markdown_file), "-f", "json", "--simple-parser"])

        metadata = json.loads(capsys.readouterr().out)["metadata"]
        assert metadata["keywords"] == "finance, q1"

    def test_warnings_go_to_stderr(self, tmp_path: Path, capsys):
        path = tmp_path / "untitled.md"
        path.write_text("just text\n", encoding="utf-8")

        code = run_cli(["extract", str(path), "--no-content", "--require-title", "--require-author"])

        err = capsys.readouterr().err
        assert code == 0
        assert "Warning: Title is required but not provided" in err
        assert "Warning: Author is required but not provided" in err

    def test_missing_file(self, tmp_path: Path, capsys):
        code = run_cli(["extract", str(tmp_path / "missing.md")])

        assert code == 1
        assert "cannot read" in capsys.readouterr().err

    def test_invalid_environment(self, markdown_file: Path, monkeypatch, capsys):
        monkeypatch.setenv("MDMETA_ENABLED", "sometimes")

        code = run_cli(["extract", str(markdown_file)])

        assert code == 1
        assert "MDMETA_ENABLED" in capsys.readouterr().err

    def test_no_command_prints_help(self, capsys):
        assert run_cli([]) == 0
        assert "usage: mdmeta" in capsys.readouterr().out
