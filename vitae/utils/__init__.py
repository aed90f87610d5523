"""
Shared utilities for vitae.

Common functionality used across contexts:
- Logger setup with provenance
- Timestamps for log directories
"""

from vitae.utils.timestamp import now

__all__ = ["now"]
