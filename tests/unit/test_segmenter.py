"""
Unit tests for the segment() entry point.

End-to-end behavior of vitae.contexts.segmenting.segmenter.segment over
in-memory text.
"""

import pytest

from vitae.contexts.segmenting import EducationEntry, ExperienceEntry, ResumeRecord, segment

PLACEHOLDER = "Unable to extract text from PDF..."

SAMPLE = """
Jane Doe
jane@example.com

Professional Summary
Backend engineer with a focus on data systems.
Enjoys mentoring.

Work Experience
Senior Engineer at Acme Corp
Jan 2019 - Present
• Led migration to Kubernetes
- Cut build times in half
Worked closely with product
Engineer @ Globex
2015 - 2018
- Built billing pipeline

Education
B.S. in Computer Science at MIT
2015
Graduated with honors

Technical Skills
Python, Go; Rust•C++
SQL
"""


@pytest.mark.unit
class TestSegmentSample:
    """Tests against a small but complete resume."""

    def test_other_collects_preamble(self):
        assert segment(SAMPLE).other == "Jane Doe jane@example.com "

    def test_summary(self):
        assert segment(SAMPLE).summary == (
            "Backend engineer with a focus on data systems. Enjoys mentoring. "
        )

    def test_experience(self):
        assert segment(SAMPLE).experience == [
            ExperienceEntry(
                title="Senior Engineer",
                company="Acme Corp",
                duration="Jan 2019 - Present",
                responsibilities=["Led migration to Kubernetes", "Cut build times in half"],
            ),
            ExperienceEntry(
                title="Engineer",
                company="Globex",
                duration="2015 - 2018",
                responsibilities=["Built billing pipeline"],
            ),
        ]

    def test_education(self):
        assert segment(SAMPLE).education == [
            EducationEntry(
                degree="B.S. in Computer Science",
                institution="MIT",
                year="2015",
                details="Graduated with honors ",
            )
        ]

    def test_skills(self):
        assert segment(SAMPLE).skills == ["Python", "Go", "Rust", "C++", "SQL"]

    def test_deterministic(self):
        assert segment(SAMPLE) == segment(SAMPLE)

    def test_crlf_input_matches_lf_input(self):
        assert segment(SAMPLE.replace("\n", "\r\n")) == segment(SAMPLE)


@pytest.mark.unit
class TestSegmentEdgeCases:
    """Tests for degenerate inputs and header handling."""

    def test_empty_text(self):
        record = segment("")
        assert record == ResumeRecord()
        assert record.summary == ""
        assert record.other == ""
        assert record.experience == []
        assert record.education == []
        assert record.skills == []

    def test_blank_lines_only(self):
        assert segment("\n   \n\t\n") == ResumeRecord()

    def test_none_treated_as_empty(self):
        assert segment(None) == ResumeRecord()

    def test_extraction_placeholder_lands_in_other(self):
        record = segment(PLACEHOLDER)
        assert record.other == PLACEHOLDER + " "
        assert record.summary == ""
        assert record.experience == []
        assert record.education == []
        assert record.skills == []

    def test_unstructured_text_lands_in_other(self):
        record = segment("Lorem ipsum\nDolor sit amet")
        assert record.other == "Lorem ipsum Dolor sit amet "

    def test_header_line_content_is_discarded(self):
        """Text on a header line is never stored, even after the trigger word."""
        record = segment("Skills: Python, Go")
        assert record == ResumeRecord()

    def test_skills_under_active_section(self):
        record = segment("Skills\nPython, Go; Rust•C++")
        assert record.skills == ["Python", "Go", "Rust", "C++"]

    def test_title_before_experience_header_is_other(self):
        record = segment("Engineer at Acme")
        assert record.experience == []
        assert record.other == "Engineer at Acme "

    def test_one_entry_per_title_line(self):
        text = "Experience\nEngineer at Acme\nAnalyst at Initech\nIntern @ Globex"
        record = segment(text)
        assert [e.title for e in record.experience] == ["Engineer", "Analyst", "Intern"]
        assert all(e.duration == "" for e in record.experience)
        assert all(e.responsibilities == [] for e in record.experience)

    def test_headers_do_not_flush_entries(self):
        """Switching sections leaves the in-progress entry open."""
        text = "\n".join(
            [
                "Experience",
                "Engineer at Acme",
                "Education",
                "B.A. in History",
                "Experience",
                "- Wrote docs",
            ]
        )
        record = segment(text)
        assert record.experience == [
            ExperienceEntry(title="Engineer", company="Acme", responsibilities=["Wrote docs"])
        ]
        assert record.education == [EducationEntry(degree="B.A. in History", institution="")]

    def test_last_entries_flushed_at_end(self):
        text = "Experience\nEngineer at Acme\nEducation\nMaster of Science at Oxford"
        record = segment(text)
        assert len(record.experience) == 1
        assert len(record.education) == 1

    def test_no_break_space_title_opens_entry(self):
        record = segment("Experience\nSoftware\u00a0Engineer at Acme\n2019")
        assert len(record.experience) == 1
        assert record.experience[0].company == "Acme"
        assert record.experience[0].duration == "2019"

    def test_header_precedence_in_document(self):
        """A line naming two sections opens the one checked first."""
        record = segment("Education and Experience\nEngineer at Acme")
        assert record.experience == [ExperienceEntry(title="Engineer", company="Acme")]


ODD_INPUTS = [
    "@",
    "at",
    "Experience\n@",
    "Experience\nat",
    "Experience\nat at at",
    "Experience\n@@@\n- \n•",
    "Education\nat\nB.S.\n@",
    "Skills\n,;•\n;;;",
    "Summary\r\rExperience\r\n\rEngineer at\r- 2020",
    " \u3000\ufeff\u2028",
    "Experience\nIngénieur at Société Générale\n\u2013 2019 \u2013",
    "Experience\n\x00\x1f\x7f at",
    "Skills\n" + "•" * 500,
    "Experience\n" + "a" * 2000 + " at",
    "🚀 Rocket at Launchpad",
]


@pytest.mark.unit
@pytest.mark.parametrize("text", ODD_INPUTS)
def test_segment_never_raises(text):
    """Malformed input still yields a record."""
    record = segment(text)
    assert isinstance(record, ResumeRecord)
    assert segment(text) == record
