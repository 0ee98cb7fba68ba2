"""Derivation of a product's missing letter."""

import string

MISSING_LETTER_SENTINEL = "_"


def find_missing_letter(name: str) -> str:
    """Return the first letter ``a``-``z`` that does not occur in ``name``.

    The comparison is case-insensitive and characters outside ``a``-``z``
    are ignored.  If the name contains all 26 letters the sentinel
    ``"_"`` is returned.
    """
    present = {char for char in (name or "").lower() if char in string.ascii_lowercase}
    for letter in string.ascii_lowercase:
        if letter not in present:
            return letter
    return MISSING_LETTER_SENTINEL
