"""Custom exceptions for the segmenting context."""

from pathlib import Path
from typing import Optional


class InvalidRecordStructureError(ValueError):
    """
    Exception raised when a serialized resume record is malformed.

    Raised when a dict or YAML file does not conform to the ResumeRecord shape
    (missing top-level keys, entries that are not mappings, wrong container types).

    Attributes:
        message: Error description
        source_path: YAML file the record was loaded from, if any
    """

    def __init__(self, message: str, source_path: Optional[Path] = None):
        self.message = message
        self.source_path = source_path

        parts = [message]
        if source_path:
            parts.append(f"Source: {source_path}")

        super().__init__("\n".join(parts))
