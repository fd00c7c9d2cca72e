"""Structured CV data: builder form input and parsed CV output."""

from pydantic import BaseModel


class PersonalInfo(BaseModel):
    full_name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""


class ExperienceForm(BaseModel):
    """One job entry as typed into the CV builder."""
    company: str = ""
    position: str = ""
    period: str = ""  # free text, e.g. "2020 - Present"
    responsibilities: list[str] = []


class EducationForm(BaseModel):
    institution: str = ""
    degree: str = ""
    period: str = ""
    details: str = ""


class CVForm(BaseModel):
    """Form-builder input serialized into section-header CV text."""
    personal_info: PersonalInfo = PersonalInfo()
    experiences: list[ExperienceForm] = []
    education: list[EducationForm] = []
    skills: list[str] = []


class ContactInfo(BaseModel):
    email: str = ""
    phone: str = ""
    location: str = ""


class ExperienceEntry(BaseModel):
    """A job parsed back out of the EXPERIENCE section."""
    title: str = ""
    company: str = ""
    period: str = ""
    responsibilities: list[str] = []


class EducationEntry(BaseModel):
    degree: str = ""
    period: str = ""
    description: str = ""


class CVData(BaseModel):
    """CV text parsed into the structure export layers render from."""
    name: str = ""
    contact: ContactInfo = ContactInfo()
    summary: str = ""
    experience: list[ExperienceEntry] = []
    education: list[EducationEntry] = []
    skills: list[str] = []
    raw_sections: dict[str, str] = {}  # upper-case header -> section text
