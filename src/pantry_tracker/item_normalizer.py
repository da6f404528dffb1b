"""Shared ingredient name normalization utilities."""

import re

_MODIFIERS = {
    "organic",
    "fresh",
    "frozen",
    "dried",
    "raw",
    "cooked",
    "canned",
    "tinned",
    "ground",
    "minced",
    "sliced",
    "diced",
    "whole",
    "peeled",
    "powdered",
    "paste",
    "sauce",
    "extract",
    "oil",
    "juice",
    "zest",
    "peel",
    "rind",
}
_NON_WORD = re.compile(r"[^\w\s]+")


def normalize_ingredient(name: str) -> str:
    """Normalize an ingredient or product name into a comparable key.

    Lowercases, strips punctuation, drops descriptive modifiers such as
    "fresh" or "canned" and collapses whitespace. Never fails; blank input
    gives an empty string.
    """
    cleaned = _NON_WORD.sub("", name.lower())
    tokens = [token for token in cleaned.split() if token not in _MODIFIERS]
    return " ".join(tokens)


def canonical_display_name(name: str) -> str:
    """Build a readable name from the normalized form."""
    canonical = normalize_ingredient(name)
    if not canonical:
        return name.strip()
    return " ".join(token.capitalize() for token in canonical.split())
