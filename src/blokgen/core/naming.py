"""
Case conversion for type, field and group names.

Words are split on lower-to-upper boundaries, acronym boundaries and any
non-alphanumeric run, so ``heroImage``, ``HeroImage`` and ``hero_image`` all
yield the words ``hero`` and ``image``.
"""

from __future__ import annotations

import re

_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM = re.compile(r"([A-Z])([A-Z][a-z])")
_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")


def split_words(name: str) -> list[str]:
    """Split an identifier or phrase into words."""
    spaced = _LOWER_UPPER.sub(r"\1 \2", name)
    spaced = _ACRONYM.sub(r"\1 \2", spaced)
    return [w for w in _SEPARATORS.split(spaced) if w]


def snake_case(name: str) -> str:
    """Convert to snake_case, e.g. ``BlogPost`` -> ``blog_post``."""
    return "_".join(w.lower() for w in split_words(name))


def param_case(name: str) -> str:
    """Convert to param-case, e.g. ``inlineCode`` -> ``inline-code``."""
    return "-".join(w.lower() for w in split_words(name))


def camel_case(name: str) -> str:
    """Convert to camelCase, e.g. ``section Main Info`` -> ``sectionMainInfo``."""
    parts = []
    for i, word in enumerate(split_words(name)):
        if i == 0:
            parts.append(word.lower())
        elif word[0].isdigit():
            parts.append(f"_{word.lower()}")
        else:
            parts.append(word[0].upper() + word[1:].lower())
    return "".join(parts)


def sentence_case(name: str) -> str:
    """Convert to Sentence case, e.g. ``heroImage`` -> ``Hero image``."""
    words = [w.lower() for w in split_words(name)]
    if not words:
        return ""
    words[0] = words[0][0].upper() + words[0][1:]
    return " ".join(words)


def icon_name(symbol: str) -> str:
    """Convert an icon enum symbol to a Storyblok icon name."""
    if symbol == "block_at":
        return "block-@"
    return symbol.replace("_", "-")
