"""Cards, kins, rich text and imprecise numbers for the Bloodless card game."""

__version__ = "0.9.2"

__all__ = [
    "cards",
    "kins",
    "numbers",
    "ordering",
    "properties",
    "rich_text",
    "ternary",
    "text",
]