"""Shared test configuration, sample texts and fixtures."""

import pytest

SAMPLE_CV = """John Doe
john.doe@email.com | (555) 123-4567

EXPERIENCE
Software Developer at TechCorp (2020 - Present)
- Developed web applications using JavaScript and React
- Collaborated with designers on responsive layouts

EDUCATION
B.S. Computer Science
State University (2016 - 2020)

SKILLS
JavaScript, React, Git, Communication"""

SAMPLE_JD = "We need a React and JavaScript developer with CI/CD experience"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the HTTP layer through TestClient"
    )


@pytest.fixture
def sample_cv() -> str:
    return SAMPLE_CV


@pytest.fixture
def sample_jd() -> str:
    return SAMPLE_JD
