"""Application-level protocols for mdmeta."""

from .protocols import LoggerProtocol, MetadataExtractorProtocol, NullLogger

__all__ = ["LoggerProtocol", "MetadataExtractorProtocol", "NullLogger"]
