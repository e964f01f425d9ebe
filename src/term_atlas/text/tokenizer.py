"""Split free text into content words."""

import re
from collections.abc import Iterable

STOPWORDS = frozenset({
    "the", "and", "but", "for", "nor", "yet", "with", "from", "into", "onto",
    "about", "over", "under", "than", "then", "that", "this", "these", "those",
    "there", "their", "they", "them", "you", "your", "our", "its", "his", "her",
    "she", "him", "who", "whom", "what", "which", "when", "where", "why", "how",
    "are", "was", "were", "been", "being", "have", "has", "had", "does", "did",
    "doing", "will", "would", "shall", "should", "can", "could", "may", "might",
    "must", "not", "all", "any", "some", "such", "very", "just", "also", "out",
    "off", "upon", "per", "via", "too", "only", "own", "same", "each",
})

_NON_WORD = re.compile(r"[^a-z0-9\s]")


def tokenize(
    text: str | None,
    min_length: int = 3,
    stopwords: Iterable[str] | None = None,
) -> list[str]:
    """Lower-case text and return its content words in order.

    Anything that is not a lowercase letter, digit or whitespace becomes a
    space. Tokens shorter than ``min_length`` and stopwords are dropped.

    Args:
        text: The text to tokenize. ``None`` is treated as empty.
        min_length: Minimum token length to keep.
        stopwords: Words to drop; defaults to ``STOPWORDS``.

    Returns:
        List of tokens, possibly empty.
    """
    if not text:
        return []
    stop = STOPWORDS if stopwords is None else frozenset(stopwords)
    cleaned = _NON_WORD.sub(" ", text.lower())
    return [t for t in cleaned.split() if len(t) >= min_length and t not in stop]
