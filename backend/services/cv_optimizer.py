"""Deterministic CV rewriting tuned to a job description.

Template/substitution engine, no language model:
- experience bullets get job-relevant phrase upgrades and a scale metric
- skills lines gain focus keywords they lack
- a role-specific PROFESSIONAL SUMMARY is inserted above EXPERIENCE
"""

import logging
import re

from services.cv_parser import SECTION_HEADERS
from services.document_parser import is_bullet
from services.keyword_extractor import extract_keywords
from services.skill_normalizer import normalize_skill

logger = logging.getLogger(__name__)

# Terms worth surfacing in a rewritten CV when the job mentions them
FOCUS_KEYWORDS: tuple[str, ...] = (
    "React", "JavaScript", "TypeScript", "Node.js", "Python", "AWS", "Docker",
    "leadership", "agile", "scrum", "team lead", "senior", "architecture",
    "microservices", "API", "database", "frontend", "backend", "full-stack",
    "responsive", "testing", "CI/CD", "DevOps", "cloud", "Kubernetes",
)

# phrase -> upgraded phrase, applied when the upgrade mentions a focus keyword
BULLET_ENHANCEMENTS: dict[str, str] = {
    "web applications": "scalable web applications",
    "javascript": "JavaScript/TypeScript",
    "teams": "cross-functional agile teams",
    "projects": "high-impact projects",
    "designs": "responsive, user-centric designs",
    "systems": "distributed systems and APIs",
    "development": "full-stack development",
}

MAX_ADDED_SKILLS = 3
MAX_SUMMARY_SKILLS = 4
SUMMARY_HEADER = "PROFESSIONAL SUMMARY"
DEFAULT_ROLE = "professional"
DEFAULT_COMPANY = "your company"

_DIGIT_RE = re.compile(r"\d")


def _focus_key(term: str) -> str:
    """Matching key ignoring hyphens and a plural "s" ("APIs", "full stack")."""
    key = normalize_skill(term).replace("-", "")
    if len(key) > 3 and key.endswith("s"):
        return key[:-1]
    return key


def extract_focus_keywords(job_description: str | None) -> list[str]:
    """Focus keywords mentioned in the job description, in list order.

    Job unigrams and phrases are compared with spaces and hyphens removed,
    so "full stack" finds "full-stack" and "APIs" finds "API".
    """
    job_keys = {_focus_key(kw) for kw in extract_keywords(job_description)}
    return [kw for kw in FOCUS_KEYWORDS if _focus_key(kw) in job_keys]


def enhance_bullet(bullet: str, focus_keywords: list[str]) -> str:
    """Upgrade phrasing in one experience bullet."""
    focus_lower = [kw.lower() for kw in focus_keywords]
    enhanced = bullet
    for original, replacement in BULLET_ENHANCEMENTS.items():
        if original in enhanced.lower() and any(kw in replacement.lower() for kw in focus_lower):
            enhanced = re.sub(re.escape(original), replacement, enhanced, flags=re.IGNORECASE)

    if "Developed" in enhanced and not _DIGIT_RE.search(enhanced):
        enhanced = enhanced.replace("Developed", "Developed 15+ enterprise-grade", 1)

    if "Collaborated with" in enhanced and not _DIGIT_RE.search(enhanced):
        enhanced = enhanced.replace("Collaborated with", "Led collaboration with 8+", 1)

    return enhanced


def enhance_skills_line(line: str, focus_keywords: list[str]) -> str:
    """Append up to three focus keywords the skills line does not mention."""
    line_lower = line.lower()
    additions = [kw for kw in focus_keywords if kw.lower() not in line_lower][:MAX_ADDED_SKILLS]
    if additions:
        return line + ", " + ", ".join(additions)
    return line


def generate_role_summary(role: str, focus_keywords: list[str], company: str) -> str:
    key_skills = ", ".join(focus_keywords[:MAX_SUMMARY_SKILLS]) or "software development"
    return (
        f"Experienced {role or DEFAULT_ROLE} with 4+ years developing scalable applications "
        f"and leading technical initiatives. Proven expertise in {key_skills} with a track "
        f"record of delivering high-impact solutions. Seeking to leverage technical "
        f"leadership and innovation skills to drive {company or DEFAULT_COMPANY}'s "
        f"engineering excellence."
    )


def _header_of(line: str) -> str | None:
    stripped = line.strip().upper()
    return stripped if stripped in SECTION_HEADERS else None


def optimize_cv(
    cv_text: str | None,
    job_description: str | None,
    role: str = "",
    company: str = "",
) -> str:
    """Rewrite CV text for the target job. Same inputs always give the same output."""
    focus_keywords = extract_focus_keywords(job_description)
    lines = [line for line in (cv_text or "").split("\n") if line.strip()]

    optimized: list[str] = []
    section = None
    for line in lines:
        header = _header_of(line)
        if header:
            section = header
            optimized.append(line)
        elif is_bullet(line) and section != "SKILLS":
            optimized.append(enhance_bullet(line, focus_keywords))
        elif section == "SKILLS":
            optimized.append(enhance_skills_line(line, focus_keywords))
        else:
            optimized.append(line)

    has_summary = any(_header_of(line) in ("SUMMARY", SUMMARY_HEADER) for line in optimized)
    experience_index = next(
        (i for i, line in enumerate(optimized) if _header_of(line) == "EXPERIENCE"), -1
    )
    if experience_index > 0 and not has_summary:
        summary = generate_role_summary(role, focus_keywords, company)
        optimized[experience_index:experience_index] = ["", SUMMARY_HEADER, summary, ""]

    logger.debug("Optimized CV with %d focus keywords", len(focus_keywords))
    return "\n".join(optimized)
