"""Serialize CV builder form data into section-header CV text."""

from models.schemas.cv_document import CVForm, EducationForm, ExperienceForm


def _experience_block(exp: ExperienceForm) -> str:
    heading = f"{exp.position} at {exp.company}"
    if exp.period:
        heading += f" ({exp.period})"
    lines = [heading]
    lines.extend(f"- {resp}" for resp in exp.responsibilities if resp)
    return "\n".join(lines) + "\n\n"


def _education_block(edu: EducationForm) -> str:
    block = f"{edu.degree}\n{edu.institution}"
    if edu.period:
        block += f" ({edu.period})"
    block += "\n"
    if edu.details:
        block += f"{edu.details}\n"
    return block + "\n"


def build_cv_text(form: CVForm) -> str:
    """Render the form as CV text the parser and analyzer understand.

    Returns an empty string until a full name is provided. A section is
    written only when its first entry is filled in; within a section,
    incomplete entries are skipped.
    """
    info = form.personal_info
    if not info.full_name:
        return ""

    cv_text = f"{info.full_name}\n"
    if info.title:
        cv_text += f"{info.title}\n"
    contact = [value for value in (info.email, info.phone) if value]
    if contact:
        cv_text += " | ".join(contact) + "\n"

    if form.experiences and form.experiences[0].company:
        cv_text += "\nEXPERIENCE\n"
        for exp in form.experiences:
            if exp.company and exp.position:
                cv_text += _experience_block(exp)

    if form.education and form.education[0].institution:
        cv_text += "EDUCATION\n"
        for edu in form.education:
            if edu.degree and edu.institution:
                cv_text += _education_block(edu)

    if form.skills:
        cv_text += "SKILLS\n"
        cv_text += ", ".join(form.skills)

    return cv_text
