"""Shared text normalization utilities.

Used by the unit parser and the metal resolver to turn free-text labels
(column headers, form selections, lab export strings) into matchable keys.
"""

import re
import unicodedata


def normalize_name(
    s: str,
    *,
    allowed_chars: str = r"a-z0-9\s\-",
) -> str:
    """Aggressive normalization for fuzzy matching of names.

    Transformations:
      1. Unicode normalization (NFKD) and ASCII transliteration
      2. Lowercase
      3. Remove punctuation (keep only allowed_chars)
      4. Collapse whitespace

    Args:
        s: Raw text to normalize
        allowed_chars: Regex character class for allowed characters

    Returns:
        Normalized string for matching

    Examples:
        >>> normalize_name("Lead (Pb)")
        'lead pb'

        >>> normalize_name("  Arsenic, total ")
        'arsenic total'
    """
    if not s:
        return ""

    s = unicodedata.normalize("NFKD", s)
    s = s.encode("ascii", "ignore").decode("ascii")
    s = s.lower()
    s = re.sub(rf"[^{allowed_chars}]", " ", s)
    s = re.sub(r"\s+", " ", s).strip()

    return s


def normalize_unit_label(s: str) -> str:
    """Normalization for unit labels ahead of fuzzy matching.

    Unlike ``normalize_name`` this keeps non-ASCII letters, since "μ" is
    meaningful in "μg/L". NFKC folds the micro sign (U+00B5) onto Greek mu.

    Examples:
        >>> normalize_unit_label(" µg / L ")
        'μg / l'
    """
    if not s:
        return ""

    s = unicodedata.normalize("NFKC", s)
    s = s.lower()
    return re.sub(r"\s+", " ", s).strip()


__all__ = [
    "normalize_name",
    "normalize_unit_label",
]
