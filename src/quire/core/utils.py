"""Text helpers shared by the built-in filters."""

import re
from unicodedata import normalize


def slugify(text: str, max_len: int = 60) -> str:
    """Convert text to a safe URL-friendly slug.

    Examples:
        >>> slugify("Hello World")
        'hello-world'
        >>> slugify("Café")
        'cafe'
        >>> slugify("A" * 100, max_len=20)
        'aaaaaaaaaaaaaaaaaaaa'

    """
    normalized = normalize("NFKD", text).encode("ascii", "ignore").decode("ascii").lower()
    slug = re.sub(r"[^a-z0-9]+", "-", normalized).strip("-")

    if not slug:
        return "untitled"

    if len(slug) > max_len:
        slug = slug[:max_len].rstrip("-")

    return slug


def truncate_words(text: str, count: int = 30, suffix: str = "...") -> str:
    """Keep the first ``count`` words of ``text``, appending ``suffix`` if any were dropped."""
    words = text.split()
    if len(words) <= count:
        return text
    return " ".join(words[:count]) + suffix
