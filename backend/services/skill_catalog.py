"""Master skill catalog: categories, canonical skill names and synonyms.

All tables here are read-only and built once at import.
"""

from types import MappingProxyType

from models.schemas.analysis_report import SkillCategory

# ---------------------------------------------------------------------------
# Canonical skills per category, in catalog order (drives match/missing order)
# ---------------------------------------------------------------------------
SKILL_CATEGORIES: MappingProxyType = MappingProxyType({
    SkillCategory.FRONTEND: (
        "React", "Vue", "Angular", "JavaScript", "TypeScript",
        "HTML", "CSS", "SCSS", "Tailwind", "Bootstrap",
    ),
    SkillCategory.BACKEND: (
        "Node.js", "Python", "Java", "C#", "PHP", "Ruby",
        "Go", "Rust", "Express", "Django", "Spring",
    ),
    SkillCategory.DATABASE: (
        "MySQL", "PostgreSQL", "MongoDB", "Redis",
        "SQLite", "Oracle", "SQL Server", "DynamoDB",
    ),
    SkillCategory.CLOUD: (
        "AWS", "Azure", "Google Cloud", "Docker",
        "Kubernetes", "Terraform", "Jenkins", "CI/CD",
    ),
    SkillCategory.TOOLS: (
        "Git", "GitHub", "GitLab", "Jira", "Confluence",
        "Slack", "Figma", "Postman", "VS Code",
    ),
    SkillCategory.SOFT_SKILLS: (
        "Leadership", "Communication", "Team work", "Problem solving",
        "Critical thinking", "Agile", "Scrum",
    ),
})

# ---------------------------------------------------------------------------
# Alternate surface spellings: canonical display name -> synonyms
# Each synonym is normalized before matching, so only spellings that survive
# normalization as a *different* string need to be listed.
# ---------------------------------------------------------------------------
SKILL_SYNONYMS: MappingProxyType = MappingProxyType({
    "React": ("React.js", "ReactJS"),
    "Node.js": ("Node", "NodeJS", "Nodejs"),
    "C#": ("CSharp", "C-sharp", "C sharp"),
    "CI/CD": ("CI-CD", "CI CD"),
    "Vue": ("Vue.js", "VueJS"),
    "Express": ("Express.js", "ExpressJS"),
    "Go": ("Golang",),
    "PostgreSQL": ("Postgres",),
    "MongoDB": ("Mongo",),
    "Kubernetes": ("K8s",),
    "Google Cloud": ("GCP",),
    "VS Code": ("VSCode",),
    "Team work": ("Teamwork",),
    "Problem solving": ("Problem-solving",),
})

ALL_SKILLS: tuple[str, ...] = tuple(
    skill for skills in SKILL_CATEGORIES.values() for skill in skills
)

_SKILL_TO_CATEGORY: dict[str, SkillCategory] = {
    skill: category
    for category, skills in SKILL_CATEGORIES.items()
    for skill in skills
}

if len(_SKILL_TO_CATEGORY) != len(ALL_SKILLS):
    raise ValueError("Skill catalog lists a skill under more than one category")

SKILL_TO_CATEGORY: MappingProxyType = MappingProxyType(_SKILL_TO_CATEGORY)


def category_of(skill: str) -> SkillCategory:
    """Look up the single category a canonical skill belongs to."""
    return SKILL_TO_CATEGORY[skill]


def synonyms_of(skill: str) -> tuple[str, ...]:
    return SKILL_SYNONYMS.get(skill, ())
