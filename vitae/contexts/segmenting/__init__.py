"""
Segmenting Context

Responsibilities:
- Normalizes raw resume text into trimmed, non-empty lines
- Classifies header lines into sections (summary, experience, education, skills)
- Accumulates content lines into structured entries
- Assembles the final ResumeRecord

Owns: Resume text segmentation heuristics and the ResumeRecord structure
Never: Extracts text from binary documents or renders HTML
"""

from vitae.contexts.segmenting.exceptions import InvalidRecordStructureError
from vitae.contexts.segmenting.record import (
    EducationEntry,
    ExperienceEntry,
    ResumeRecord,
    load_record,
    save_record,
)
from vitae.contexts.segmenting.segmenter import SegmentationResult, segment, segment_file

__all__ = [
    # Segmentation entry points
    "segment",
    "segment_file",
    "SegmentationResult",
    # Data structure classes
    "ResumeRecord",
    "ExperienceEntry",
    "EducationEntry",
    # Persistence
    "save_record",
    "load_record",
    "InvalidRecordStructureError",
]
