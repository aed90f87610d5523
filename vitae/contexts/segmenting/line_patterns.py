"""
Pattern matching for resume line classification.

This module provides the section header triggers and the regex patterns used to
recognize structured lines (job titles, degrees, years, bullets, skill lists)
while segmenting resume text.

Pattern classes follow the frozen-dataclass convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple


class Section:
    """Enum-like class for resume section tags"""

    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    OTHER = "other"

    @classmethod
    def get_all_sections(cls) -> Tuple[str, ...]:
        """Return all section tags, OTHER last"""
        return (cls.SUMMARY, cls.EXPERIENCE, cls.EDUCATION, cls.SKILLS, cls.OTHER)


# =============================================================================
# SECTION HEADER TRIGGERS
# =============================================================================


@dataclass(frozen=True)
class HeaderTriggers:
    """
    Lowercase substrings that turn a line into a section header.

    Matching is case-insensitive containment, not anchored: "Professional
    Summary" and "CAREER OBJECTIVE:" both open the summary section.
    """

    SUMMARY: tuple = ("summary", "objective")
    EXPERIENCE: tuple = ("experience", "work history")
    EDUCATION: tuple = ("education",)
    SKILLS: tuple = ("skills", "technical skills")


# Checked in this order; the first section with a matching trigger wins
HEADER_TRIGGERS = [
    (Section.SUMMARY, HeaderTriggers.SUMMARY),
    (Section.EXPERIENCE, HeaderTriggers.EXPERIENCE),
    (Section.EDUCATION, HeaderTriggers.EDUCATION),
    (Section.SKILLS, HeaderTriggers.SKILLS),
]


# =============================================================================
# ENTRY PATTERNS
# =============================================================================

# Standalone "at" in any case. Word edges are ASCII-only, so "Data" and
# "Atlanta" never split, while whitespace elsewhere stays Unicode-aware.
_AT_WORD = r"(?<![A-Za-z0-9_])[Aa][Tt](?![A-Za-z0-9_])"


@dataclass(frozen=True)
class EntryPatterns:
    """
    Regex patterns for lines inside the experience, education and skills sections.
    """

    # Job title line: ASCII letters and any whitespace (no-break spaces from PDF
    # extraction included), then a standalone "at" or "@", then anything.
    # e.g., "Software Engineer at Acme Corp", "Designer @ Studio"
    TITLE_LINE: re.Pattern = re.compile(rf"^[A-Za-z\s]+(?:{_AT_WORD}|@).*$")

    # Separator between job title and company
    TITLE_SEPARATOR: re.Pattern = re.compile(rf"{_AT_WORD}|@")

    # Separator between degree and institution (no "@" here)
    DEGREE_SEPARATOR: re.Pattern = re.compile(_AT_WORD)

    # Any run of four digits marks a duration or graduation year line
    YEAR: re.Pattern = re.compile(r"[0-9]{4}")

    # Skill list delimiters: comma, semicolon, bullet
    SKILL_DELIMITER: re.Pattern = re.compile(r"[,;•]")

    # Literal degree tokens, periods included
    DEGREE_MARKERS: tuple = (
        "B.S.",
        "B.A.",
        "M.S.",
        "M.A.",
        "Ph.D.",
        "Bachelor",
        "Master",
        "Doctorate",
    )

    BULLET_MARKERS: tuple = ("•", "-")


_DEGREE_MARKERS_LOWER = tuple(marker.lower() for marker in EntryPatterns.DEGREE_MARKERS)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def classify_header(line: str) -> Optional[str]:
    """
    Decide whether a line is a section header.

    Args:
        line: Normalized (trimmed, non-empty) resume line

    Returns:
        Section tag the header opens, or None for ordinary content
    """
    lowered = line.lower()

    for section, triggers in HEADER_TRIGGERS:
        if any(trigger in lowered for trigger in triggers):
            return section

    return None


def is_title_line(line: str) -> bool:
    """Check if line looks like "<title> at <company>" or "<title> @ <company>"."""
    return EntryPatterns.TITLE_LINE.match(line) is not None


def is_degree_line(line: str) -> bool:
    """Check if line mentions a degree token (case-insensitive substring)."""
    lowered = line.lower()
    return any(marker in lowered for marker in _DEGREE_MARKERS_LOWER)


def contains_year(line: str) -> bool:
    """Check if line contains a run of four digits."""
    return EntryPatterns.YEAR.search(line) is not None


def is_bullet_line(line: str) -> bool:
    """Check if line starts with a bullet marker ("•" or "-")."""
    return line.startswith(EntryPatterns.BULLET_MARKERS)


def strip_bullet(line: str) -> str:
    """Remove the leading bullet character and surrounding whitespace."""
    return line[1:].strip()


def _split_on_separator(line: str, separator: re.Pattern) -> Tuple[str, str]:
    """
    Split line into (head, tail) around a separator.

    Everything before the first separator is the head. Every later piece is
    concatenated, without the separators, into the tail.
    """
    parts = separator.split(line)
    return parts[0].strip(), "".join(parts[1:]).strip()


def split_title_line(line: str) -> Tuple[str, str]:
    """
    Split a title line into (title, company).

    Example:
        >>> split_title_line("Engineer at Acme Corp")
        ('Engineer', 'Acme Corp')
    """
    return _split_on_separator(line, EntryPatterns.TITLE_SEPARATOR)


def split_degree_line(line: str) -> Tuple[str, str]:
    """
    Split a degree line into (degree, institution).

    Institution is empty when the line has no standalone "at".

    Example:
        >>> split_degree_line("B.S. in Computer Science at MIT")
        ('B.S. in Computer Science', 'MIT')
    """
    return _split_on_separator(line, EntryPatterns.DEGREE_SEPARATOR)


def split_skills(line: str) -> List[str]:
    """Split a skills line on commas, semicolons and bullets, dropping empty pieces."""
    pieces = (piece.strip() for piece in EntryPatterns.SKILL_DELIMITER.split(line))
    return [piece for piece in pieces if piece]
