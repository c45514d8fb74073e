"""Tests for frontmatter parsing utilities."""

from datetime import datetime, timezone

import pytest

from mdmeta.core.exceptions import FrontmatterError
from mdmeta.metadata.extraction.parsing import (
    extract_tags_from_field,
    parse_frontmatter,
    parse_simple_frontmatter,
)


class TestParseFrontmatter:
    """Tests for the parse_frontmatter function."""

    def test_valid_yaml_frontmatter(self):
        """Should parse valid YAML frontmatter."""
        content = """---
title: My Document
tags: [python, code]
author: Test User
---
# Hello World

Content here.
"""
        result = parse_frontmatter(content)

        assert result.has_frontmatter is True
        assert result.data["title"] == "My Document"
        assert result.data["tags"] == ["python", "code"]
        assert result.data["author"] == "Test User"
        assert result.content.startswith("# Hello World")

    def test_no_frontmatter(self):
        """Should handle documents without frontmatter."""
        content = "# Hello World\n\nNo frontmatter here.\n"

        result = parse_frontmatter(content)

        assert result.has_frontmatter is False
        assert result.data == {}
        assert result.content == content

    def test_empty_frontmatter(self):
        """Should handle empty frontmatter block."""
        result = parse_frontmatter("---\n---\n# Content\n")

        assert result.has_frontmatter is True
        assert result.data == {}
        assert result.content == "# Content\n"

    def test_invalid_yaml(self):
        """Should treat invalid YAML as no frontmatter."""
        content = """---
invalid: yaml: syntax: here
: broken
---
# Content
"""
        result = parse_frontmatter(content)

        assert result.has_frontmatter is False
        assert result.content == content

    def test_invalid_yaml_strict(self):
        """Strict mode should raise on invalid YAML."""
        with pytest.raises(FrontmatterError):
            parse_frontmatter("---\nkey: [unclosed\n---\n", strict=True)

    def test_frontmatter_with_scalar_yaml(self):
        """Should wrap YAML that parses to a scalar."""
        result = parse_frontmatter("---\njust a string value\n---\n# Content\n")

        assert result.has_frontmatter is True
        assert result.data == {"_raw": "just a string value"}

    def test_scalar_yaml_strict(self):
        with pytest.raises(FrontmatterError):
            parse_frontmatter("---\n- a\n- b\n---\n", strict=True)

    def test_yaml_dates_are_native(self):
        """YAML date values should be parsed by PyYAML."""
        result = parse_frontmatter("---\ndate: 2024-01-15\n---\n")

        assert result.data["date"].isoformat() == "2024-01-15"

    def test_delimiter_must_start_document(self):
        """A --- block later in the document is not frontmatter."""
        content = "# Title\n---\ntitle: Nope\n---\n"

        assert parse_frontmatter(content).has_frontmatter is False


class TestParseSimpleFrontmatter:
    """Tests for the line-based frontmatter reader."""

    def test_scalars_and_coercions(self):
        content = """---
title: "Quoted Title"
draft: true
published: false
count: 42
ratio: 1.5
date: 2024-01-15
---
Body
"""
        result = parse_simple_frontmatter(content)

        assert result.has_frontmatter is True
        assert result.data["title"] == "Quoted Title"
        assert result.data["draft"] is True
        assert result.data["published"] is False
        assert result.data["count"] == 42
        assert result.data["ratio"] == 1.5
        assert result.data["date"] == datetime(2024, 1, 15, tzinfo=timezone.utc)
        assert result.content == "Body\n"

    def test_inline_arrays(self):
        """Arrays split on commas, strip quotes and drop empty items."""
        result = parse_simple_frontmatter("---\ntags: ['a', \"b\", , c]\n---\n")

        assert result.data["tags"] == ["a", "b", "c"]

    def test_invalid_date_stays_string(self):
        result = parse_simple_frontmatter("---\ndate: 2024-99-99\n---\n")

        assert result.data["date"] == "2024-99-99"

    def test_non_key_value_lines_ignored(self):
        content = """---
title: Doc
authors:
  - Alice
# comment
---
"""
        result = parse_simple_frontmatter(content)

        assert result.data == {"title": "Doc"}

    def test_no_frontmatter(self):
        result = parse_simple_frontmatter("# Just content")

        assert result.has_frontmatter is False
        assert result.data == {}


class TestExtractTagsFromField:
    """Tests for extract_tags_from_field."""

    def test_list(self):
        assert extract_tags_from_field(["python", " rust ", "", None, 3]) == ["python", "rust", "3"]

    def test_comma_separated_string(self):
        assert extract_tags_from_field("a, b,,c") == ["a", "b", "c"]

    def test_single_string(self):
        assert extract_tags_from_field(" solo ") == ["solo"]

    def test_none(self):
        assert extract_tags_from_field(None) == []
