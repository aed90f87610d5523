"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """
    Current local time as a compact, sortable string.

    Used to name per-run log directories (e.g. "segment_20251114_123456").

    Returns:
        Timestamp formatted as YYYYmmdd_HHMMSS
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")
