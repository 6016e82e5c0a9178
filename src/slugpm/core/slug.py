"""
Slug generation for project directory names.

Turns arbitrary titles into lowercase, hyphen-separated ASCII suitable for
use as a directory name.
"""

import re
import unicodedata

_APOSTROPHES = re.compile(r"'")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(title: str, max_length: int | None = None) -> str:
    """
    Generate a filesystem-safe slug from a title.

    Diacritics are transliterated to their base letter; any other character
    outside ``[a-z0-9]`` becomes a separator. Runs of separators collapse to a
    single hyphen and the result never starts or ends with one.

    Args:
        title: Input text to slugify
        max_length: Optional maximum slug length, cut at a word boundary

    Returns:
        Slug containing only ``[a-z0-9-]``. Empty if the title has nothing
        sluggable in it.

    Example:
        >>> slugify("My Project!")
        'my-project'
        >>> slugify("Café Crème")
        'cafe-creme'
    """
    # NFKD splits accented letters into base letter + combining mark,
    # the ASCII encode then drops the marks
    text = unicodedata.normalize("NFKD", title)
    text = text.encode("ascii", "ignore").decode("ascii")

    slug = _APOSTROPHES.sub("", text.lower())
    slug = _NON_ALNUM.sub("-", slug)
    slug = slug.strip("-")

    if max_length is not None and len(slug) > max_length:
        truncated = slug[:max_length]
        # Cut at word boundary unless the first word alone is too long
        if "-" in truncated and slug[max_length] != "-":
            truncated = truncated.rsplit("-", 1)[0]
        slug = truncated.strip("-")

    return slug
