"""Keyword extraction for CV / job description analysis.

Turns free text into a deduplicated set of lowercase tokens plus every
contiguous 2- and 3-word phrase, so multi-word skills such as
"problem solving" or "sql server" can be matched as phrases.
"""

import logging
import re

logger = logging.getLogger(__name__)

# Characters that survive cleaning: skill names like "c#", "ci/cd", "node.js"
# and "c++" depend on them
_DISALLOWED_CHARS_RE = re.compile(r"[^a-z0-9\s.+#/-]")

MIN_TOKEN_LENGTH = 2  # keeps two-letter skills like "go"
MAX_PHRASE_LENGTH = 3


def _tokenize(text: str) -> list[str]:
    """Lowercase, strip unsupported characters and split into tokens."""
    cleaned = _DISALLOWED_CHARS_RE.sub(" ", text.lower())
    return [word for word in cleaned.split() if len(word) >= MIN_TOKEN_LENGTH]


def extract_keywords(text: str | None) -> set[str]:
    """Extract unigrams, bigrams and trigrams from text.

    ``None`` and empty text yield an empty set. Unknown characters (including
    non-ASCII letters) are replaced by spaces rather than rejected. Periods
    are kept, so "React." yields "react."; skill normalization strips them.
    """
    if not text:
        return set()

    words = _tokenize(text)
    keywords: set[str] = set(words)
    for size in range(2, MAX_PHRASE_LENGTH + 1):
        for i in range(len(words) - size + 1):
            keywords.add(" ".join(words[i:i + size]))

    logger.debug("Extracted %d keywords from %d tokens", len(keywords), len(words))
    return keywords
