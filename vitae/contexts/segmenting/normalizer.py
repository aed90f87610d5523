"""
Resume text normalizer for the Segmenting context.

Turns a raw text blob into the ordered line sequence the segmenter walks.
Normalize BEFORE classifying: every downstream predicate assumes a trimmed,
non-empty line.
"""

import re
from typing import List

# Any line-ending convention: Windows, old Mac, Unix
LINE_BREAK = re.compile(r"\r\n|\r|\n")


def normalize_lines(text: str) -> List[str]:
    """
    Split raw text into trimmed, non-empty lines.

    Blank lines and whitespace-only separators are dropped. Source order is
    preserved exactly.

    Args:
        text: Raw resume text

    Returns:
        List of lines, empty for empty input
    """
    lines = (line.strip() for line in LINE_BREAK.split(text))
    return [line for line in lines if line]
