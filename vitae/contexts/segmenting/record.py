"""
Resume Record Structure

Defines the structured result of segmenting resume text. This structure is the
interface between the segmenter and whatever renders the profile page, which
reads summary, experience, education, skills and other.
"""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from omegaconf import OmegaConf

from vitae.contexts.segmenting.exceptions import InvalidRecordStructureError

RECORD_KEYS = ("summary", "experience", "education", "skills", "other")


@dataclass
class ExperienceEntry:
    """
    One job opened by a title line.

    Attributes:
        title: Text before the first "at"/"@" (e.g., "Software Engineer")
        company: Text after it (e.g., "Acme Corp")
        duration: Last line containing a four-digit year, empty if none seen
        responsibilities: Bullet lines with the bullet marker removed
    """

    title: str
    company: str
    duration: str = ""
    responsibilities: List[str] = field(default_factory=list)


@dataclass
class EducationEntry:
    """
    One degree opened by a degree line.

    Attributes:
        degree: Text before the first standalone "at" (whole line if none)
        institution: Text after it, empty if the line has no "at"
        year: Last line containing a four-digit year, empty if none seen
        details: Every other line, each followed by one space
    """

    degree: str
    institution: str
    year: str = ""
    details: str = ""


@dataclass
class ResumeRecord:
    """
    Segmented resume.

    Attributes:
        summary: Summary/objective lines, each followed by one space
        experience: Jobs in document order
        education: Degrees in document order
        skills: Skill tokens in discovery order, duplicates kept
        other: Lines seen before any header, each followed by one space
    """

    summary: str = ""
    experience: List[ExperienceEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)
    other: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict/list representation, safe to hand to a template or YAML dumper."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source_path: Optional[Path] = None) -> "ResumeRecord":
        """
        Rebuild a record from its dict representation.

        Args:
            data: Dict as produced by to_dict()
            source_path: Optional file the dict came from (for error messages)

        Returns:
            ResumeRecord instance

        Raises:
            InvalidRecordStructureError: If keys are missing or containers have the wrong type
        """
        if not isinstance(data, dict):
            raise InvalidRecordStructureError(
                f"Invalid record structure: expected a mapping, got {type(data).__name__}",
                source_path,
            )

        missing = [key for key in RECORD_KEYS if key not in data]
        if missing:
            raise InvalidRecordStructureError(
                f"Invalid record structure: missing {', '.join(repr(k) for k in missing)}",
                source_path,
            )

        for key in ("experience", "education", "skills"):
            if not isinstance(data[key], list):
                raise InvalidRecordStructureError(
                    f"Invalid record structure: '{key}' must be a list", source_path
                )

        try:
            experience = [ExperienceEntry(**entry) for entry in data["experience"]]
            education = [EducationEntry(**entry) for entry in data["education"]]
        except TypeError as e:
            raise InvalidRecordStructureError(
                f"Invalid record structure: malformed entry ({e})", source_path
            ) from e

        return cls(
            summary=data["summary"],
            experience=experience,
            education=education,
            skills=list(data["skills"]),
            other=data["other"],
        )


def save_record(record: ResumeRecord, output_path: Path) -> Path:
    """
    Write a record to YAML.

    Args:
        record: Segmented resume
        output_path: Destination .yaml file (parent directories are created)

    Returns:
        Path written
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    conf = OmegaConf.create(record.to_dict())
    OmegaConf.save(conf, output_path)

    # Strip trailing blank lines for consistency
    content = output_path.read_text(encoding="utf-8")
    output_path.write_text(content.rstrip() + "\n", encoding="utf-8")

    return output_path


def load_record(yaml_path: Path) -> ResumeRecord:
    """
    Load a record previously written by save_record().

    Args:
        yaml_path: Path to YAML file

    Returns:
        ResumeRecord instance

    Raises:
        FileNotFoundError: If yaml_path does not exist
        InvalidRecordStructureError: If the YAML does not describe a record
    """
    yaml_path = Path(yaml_path)
    if not yaml_path.exists():
        raise FileNotFoundError(f"Record file not found: {yaml_path}")

    yaml_data = OmegaConf.load(yaml_path)
    yaml_dict = OmegaConf.to_container(yaml_data, resolve=False)

    return ResumeRecord.from_dict(yaml_dict, source_path=yaml_path)
