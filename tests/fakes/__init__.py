"""Test fakes for collaborators injected into the metadata services.

Example:
    from tests.fakes import RecordingLogger

    logger = RecordingLogger()
    extractor = MetadataExtractor(logger=logger)
    extractor.extract(context)
    assert logger.messages("error") == []
"""

from .loggers import RecordingLogger

__all__ = [
    "RecordingLogger",
]
