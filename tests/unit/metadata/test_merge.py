"""Tests for priority merging of metadata sources."""

from mdmeta.metadata.merge import merge_sources
from mdmeta.metadata.model.types import (
    DEFAULT_PRIORITY,
    FRONTMATTER_PRIORITY,
    HEURISTIC_PRIORITY,
    MetadataCollection,
    MetadataEntry,
    MetadataSource,
)


def collection(**entries: tuple) -> MetadataCollection:
    sources = MetadataCollection()
    for key, (value, priority) in entries.items():
        sources.offer(key, MetadataEntry(value, MetadataSource.AUTO, priority))
    return sources


class TestMergeSources:
    """Tests for merge_sources."""

    def test_empty(self):
        assert merge_sources(MetadataCollection()).to_dict() == {}

    def test_all_buckets_resolved(self):
        sources = collection(
            title=("T", HEURISTIC_PRIORITY),
            organization=("ACME", DEFAULT_PRIORITY),
            word_count=(12, DEFAULT_PRIORITY),
        )

        metadata = merge_sources(sources)

        assert metadata.title == "T"
        assert metadata.organization == "ACME"
        assert metadata.word_count == 12

    def test_buckets_edited_directly_still_resolve_to_highest(self):
        """Strictly greater priority wins even across duplicate keys."""
        sources = MetadataCollection()
        sources.standard["title"] = MetadataEntry("Low", MetadataSource.DEFAULT, DEFAULT_PRIORITY)
        sources.extended["title"] = MetadataEntry("High", MetadataSource.FRONTMATTER, FRONTMATTER_PRIORITY)

        assert merge_sources(sources).title == "High"

    def test_tie_keeps_earlier_bucket(self):
        sources = MetadataCollection()
        sources.standard["title"] = MetadataEntry("Standard", MetadataSource.AUTO, HEURISTIC_PRIORITY)
        sources.computed["title"] = MetadataEntry("Computed", MetadataSource.AUTO, HEURISTIC_PRIORITY)

        assert merge_sources(sources).title == "Standard"

    def test_keyword_quotes_stripped(self):
        sources = collection(keywords=('"alpha, beta"', FRONTMATTER_PRIORITY))

        assert merge_sources(sources).keywords == "alpha, beta"

    def test_only_edge_quotes_stripped(self):
        sources = collection(keywords=("it's, 'fine'", FRONTMATTER_PRIORITY))

        assert merge_sources(sources).keywords == "it's, 'fine"
