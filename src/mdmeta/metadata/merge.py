"""Priority merge of metadata sources into one resolved record."""

import re

from mdmeta.metadata.model.types import DocumentMetadata, MetadataCollection, MetadataEntry

_KEYWORD_QUOTES_PATTERN = re.compile(r"^[\"']|[\"']$")


def merge_sources(sources: MetadataCollection) -> DocumentMetadata:
    """Resolve every field to its highest-priority entry.

    Buckets are walked in order standard, extended, computed. An entry
    replaces the current winner only with a strictly greater priority, so
    ties keep the first entry seen.

    Args:
        sources: Collected entries with provenance.

    Returns:
        DocumentMetadata with one value per resolved field.
    """
    winners: dict[str, MetadataEntry] = {}
    for key, entry in sources.items():
        existing = winners.get(key)
        if existing is None or entry.priority > existing.priority:
            winners[key] = entry

    resolved = {key: entry.value for key, entry in winners.items()}

    keywords = resolved.get("keywords")
    if isinstance(keywords, str):
        resolved["keywords"] = _KEYWORD_QUOTES_PATTERN.sub("", keywords)

    return DocumentMetadata.from_dict(resolved)
