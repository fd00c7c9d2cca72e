"""Template cover letter generation."""

from datetime import date

from services.cv_optimizer import DEFAULT_COMPANY, DEFAULT_ROLE, extract_focus_keywords

MAX_LETTER_SKILLS = 3


def format_letter_date(day: date) -> str:
    """US long date, e.g. "October 19, 2026"."""
    return f"{day:%B} {day.day}, {day.year}"


def _company_focus(job_description: str) -> str:
    if "scaling" in job_description:
        return "scaling solutions"
    elif "user" in job_description:
        return "user experience"
    return "cutting-edge technology"


def generate_cover_letter(
    name: str,
    company: str,
    role: str,
    job_description: str | None,
    today: date | None = None,
) -> str:
    """Build a dated cover letter for ``role`` at ``company``.

    ``today`` defaults to the current date; pass it for reproducible output.
    """
    job_description = job_description or ""
    company = company or DEFAULT_COMPANY
    role = role or DEFAULT_ROLE
    letter_date = format_letter_date(today or date.today())
    skills = ", ".join(extract_focus_keywords(job_description)[:MAX_LETTER_SKILLS]) or "modern technologies"

    return f"""{letter_date}

Dear Hiring Manager,

I am writing to express my strong interest in the {role} position at {company}. With over 4 years of experience in software development and a proven track record of delivering scalable applications, I am excited about the opportunity to contribute to your innovative team.

In my current role, I have successfully led the development of 15+ enterprise-grade web applications using {skills}. My experience includes collaborating with cross-functional agile teams, implementing responsive user-centric designs, and working with distributed systems and APIs. These experiences have prepared me well for the challenges outlined in your job description.

What particularly excites me about {company} is your commitment to technological innovation and excellence. Your focus on {_company_focus(job_description)} aligns perfectly with my passion for creating impactful software solutions that drive business results.

I am confident that my technical expertise, leadership experience, and collaborative approach would make me a valuable addition to your team. I would welcome the opportunity to discuss how my background in full-stack development and agile methodologies can contribute to {company}'s continued success.

Thank you for considering my application. I look forward to hearing from you soon.

Sincerely,
{name}"""
