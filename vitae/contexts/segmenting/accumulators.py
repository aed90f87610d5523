"""
Section accumulators for the Segmenting context.

Each accumulator consumes one content line under its active section and folds it
into the ResumeRecord. Experience and education are small state machines: a
title/degree line opens an entry on the ParserCursor, later lines fill it in,
and the entry is flushed into the record when the next one opens or input ends.

All accumulators share the signature (line, cursor, record) so the segmenter can
dispatch on the cursor's active section through ACCUMULATORS.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from vitae.contexts.segmenting.line_patterns import (
    Section,
    contains_year,
    is_bullet_line,
    is_degree_line,
    is_title_line,
    split_degree_line,
    split_skills,
    split_title_line,
    strip_bullet,
)
from vitae.contexts.segmenting.record import EducationEntry, ExperienceEntry, ResumeRecord


@dataclass
class ParserCursor:
    """
    Transient segmentation state for a single pass.

    Attributes:
        section: Active section tag (starts as Section.OTHER)
        experience: In-progress experience entry, if any
        education: In-progress education entry, if any
    """

    section: str = Section.OTHER
    experience: Optional[ExperienceEntry] = None
    education: Optional[EducationEntry] = None

    def flush_experience(self, record: ResumeRecord) -> None:
        """Append the in-progress experience entry to the record and clear the slot."""
        if self.experience is not None:
            record.experience.append(self.experience)
            self.experience = None

    def flush_education(self, record: ResumeRecord) -> None:
        """Append the in-progress education entry to the record and clear the slot."""
        if self.education is not None:
            record.education.append(self.education)
            self.education = None

    def flush_all(self, record: ResumeRecord) -> None:
        """Flush both in-progress entries (end of input)."""
        self.flush_experience(record)
        self.flush_education(record)


def accumulate_summary(line: str, cursor: ParserCursor, record: ResumeRecord) -> None:
    record.summary += line + " "


def accumulate_other(line: str, cursor: ParserCursor, record: ResumeRecord) -> None:
    record.other += line + " "


def accumulate_experience(line: str, cursor: ParserCursor, record: ResumeRecord) -> None:
    """
    Fold a line into the experience section.

    - Title line: flush the current entry and open a new one
    - Year line: becomes the duration (last one wins)
    - Bullet line: becomes a responsibility
    - Anything else, or anything before the first title line, is dropped
    """
    if is_title_line(line):
        cursor.flush_experience(record)
        title, company = split_title_line(line)
        cursor.experience = ExperienceEntry(title=title, company=company)
        return

    entry = cursor.experience
    if entry is None:
        return

    if contains_year(line):
        entry.duration = line
    elif is_bullet_line(line):
        entry.responsibilities.append(strip_bullet(line))


def accumulate_education(line: str, cursor: ParserCursor, record: ResumeRecord) -> None:
    """
    Fold a line into the education section.

    - Degree line: flush the current entry and open a new one
    - Year line: becomes the year (last one wins)
    - Anything else is appended to details
    - Lines before the first degree line are dropped
    """
    if is_degree_line(line):
        cursor.flush_education(record)
        degree, institution = split_degree_line(line)
        cursor.education = EducationEntry(degree=degree, institution=institution)
        return

    entry = cursor.education
    if entry is None:
        return

    if contains_year(line):
        entry.year = line
    else:
        entry.details += line + " "


def accumulate_skills(line: str, cursor: ParserCursor, record: ResumeRecord) -> None:
    record.skills.extend(split_skills(line))


Accumulator = Callable[[str, ParserCursor, ResumeRecord], None]

ACCUMULATORS: Dict[str, Accumulator] = {
    Section.SUMMARY: accumulate_summary,
    Section.EXPERIENCE: accumulate_experience,
    Section.EDUCATION: accumulate_education,
    Section.SKILLS: accumulate_skills,
    Section.OTHER: accumulate_other,
}


def dispatch_line(line: str, cursor: ParserCursor, record: ResumeRecord) -> None:
    """Route a content line to the accumulator for the cursor's active section."""
    ACCUMULATORS[cursor.section](line, cursor, record)
