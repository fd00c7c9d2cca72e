"""Parse section-header CV text back into structured CV data.

Understands the layout the CV builder writes: a name line, contact lines,
then blocks introduced by literal headers (EXPERIENCE, EDUCATION, SKILLS,
SUMMARY, PROFESSIONAL SUMMARY) on their own line.
"""

import re

from models.schemas.cv_document import (
    ContactInfo,
    CVData,
    EducationEntry,
    ExperienceEntry,
)
from services.document_parser import is_bullet, strip_bullet

SECTION_HEADERS = ("EXPERIENCE", "EDUCATION", "SKILLS", "SUMMARY", "PROFESSIONAL SUMMARY")

_HEADER_RE = re.compile(
    rf"^(?:{'|'.join(SECTION_HEADERS)})$", re.IGNORECASE
)

# Contact info patterns
EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_RE = re.compile(r"(?:\+\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
PERIOD_RE = re.compile(r"\(([^)]+)\)")

DEFAULT_NAME = "Your Name"


def parse_sections(text: str) -> dict[str, str]:
    """Split CV text into sections keyed by upper-case header.

    Text before the first header is not part of any section.
    """
    sections: dict[str, str] = {}
    current_section = None
    current_lines: list[str] = []

    for line in text.split("\n"):
        if not line.strip():
            continue
        stripped = line.strip()
        if _HEADER_RE.match(stripped):
            if current_section:
                sections[current_section] = "\n".join(current_lines)
            current_section = stripped.upper()
            current_lines = []
        elif current_section:
            current_lines.append(line)

    if current_section:
        sections[current_section] = "\n".join(current_lines)

    return sections


def extract_contact_info(text: str, location: str = "") -> ContactInfo:
    email_match = EMAIL_RE.search(text)
    phone_match = PHONE_RE.search(text)
    return ContactInfo(
        email=email_match.group() if email_match else "",
        phone=phone_match.group() if phone_match else "",
        location=location,
    )


def extract_period(text: str) -> str:
    """Return the first parenthesized span, e.g. "2020 - 2023"."""
    match = PERIOD_RE.search(text)
    return match.group(1) if match else ""


def parse_experience(section_text: str) -> list[ExperienceEntry]:
    """Non-bullet lines start a job ("Title at Company (period)"), bullets add duties."""
    experiences: list[ExperienceEntry] = []
    current: ExperienceEntry | None = None

    for line in section_text.split("\n"):
        stripped = line.strip()
        if not stripped:
            continue
        if not is_bullet(stripped):
            if current:
                experiences.append(current)
            title, _, rest = stripped.partition(" at ")
            current = ExperienceEntry(
                title=title.strip() or stripped,
                company=rest.split("(")[0].strip(),
                period=extract_period(stripped),
            )
        elif current:
            current.responsibilities.append(strip_bullet(stripped))

    if current:
        experiences.append(current)
    return experiences


def parse_education(section_text: str) -> list[EducationEntry]:
    return [
        EducationEntry(degree=line.strip(), period=extract_period(line))
        for line in section_text.split("\n")
        if line.strip() and not is_bullet(line)
    ]


def parse_skills(section_text: str) -> list[str]:
    return [skill.strip() for skill in re.split(r"[,\n]", section_text) if skill.strip()]


def parse_cv(text: str | None, full_name: str = "", location: str = "") -> CVData:
    """Parse CV text into ``CVData``. Empty or missing text yields defaults."""
    text = text or ""
    lines = [line.strip() for line in text.split("\n") if line.strip()]
    sections = parse_sections(text)

    return CVData(
        name=full_name or (lines[0] if lines else DEFAULT_NAME),
        contact=extract_contact_info(text, location),
        summary=sections.get("PROFESSIONAL SUMMARY") or sections.get("SUMMARY", ""),
        experience=parse_experience(sections.get("EXPERIENCE", "")),
        education=parse_education(sections.get("EDUCATION", "")),
        skills=parse_skills(sections.get("SKILLS", "")),
        raw_sections=sections,
    )
