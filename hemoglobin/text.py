"""Text normalisation helpers used when matching and naming cards."""

from __future__ import annotations

_ASCII_TABLE = str.maketrans(
    {
        "ä": "a",
        "ë": "e",
        "ï": "i",
        "ö": "o",
        "ü": "u",
        '"': None,
        "'": None,
        ".": None,
        ",": None,
    }
)


def clean_ascii_keep_case(string: str) -> str:
    """Fold lowercase umlauts to plain vowels and drop quotes, dots and commas."""
    return string.translate(_ASCII_TABLE)


def clean_ascii(string: str) -> str:
    """Lowercase ``string`` and then clean it with :func:`clean_ascii_keep_case`."""
    return clean_ascii_keep_case(string.lower())