"""Uploaded CV document handling: plain-text extraction and bullet lines."""

import logging
import re

logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = (".txt", ".text", ".md")

# Bullet markers recognised at the start of a line
BULLET_MARKERS = frozenset("•-–—►▪*")

_NUMBERED_RE = re.compile(r"^\d{1,2}[.)]\s")


class UnsupportedDocumentError(ValueError):
    """The uploaded file type has no text extractor."""


class DocumentDecodeError(ValueError):
    """The uploaded bytes are not valid UTF-8 text."""


def is_supported(filename: str | None) -> bool:
    return bool(filename) and filename.lower().endswith(TEXT_EXTENSIONS)


def extract_text(content: bytes, filename: str | None) -> str:
    """Extract CV text from an uploaded plain-text document.

    Binary formats (PDF, Word) are not parsed; callers receive
    ``UnsupportedDocumentError`` for them.
    """
    if not is_supported(filename):
        raise UnsupportedDocumentError(f"Unsupported document type: {filename!r}")
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise DocumentDecodeError(f"Could not decode {filename!r} as UTF-8") from e
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    logger.debug("Extracted %d characters from %s", len(text), filename)
    return text.strip()


def is_bullet(line: str) -> bool:
    """Whether a line starts with a bullet marker or "1." / "1)" numbering."""
    stripped = line.strip()
    if not stripped:
        return False
    return stripped[0] in BULLET_MARKERS or bool(_NUMBERED_RE.match(stripped))


def strip_bullet(line: str) -> str:
    """Remove the leading bullet marker or numbering from a line."""
    stripped = line.strip()
    if _NUMBERED_RE.match(stripped):
        return _NUMBERED_RE.sub("", stripped).strip()
    return stripped.lstrip("".join(BULLET_MARKERS) + " ").strip()


def extract_bullets(text: str) -> list[str]:
    """Extract bullet-point lines from CV text, markers removed."""
    bullets = []
    for line in text.split("\n"):
        if is_bullet(line):
            cleaned = strip_bullet(line)
            if cleaned:
                bullets.append(cleaned)
    return bullets
