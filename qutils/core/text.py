"""
Text helpers: pluralization, slugs and random words.
"""

import re
from typing import Union

from .arrays import get_random_array_item
from .constants import CONSONANTS, VOWELS

# Anything that is not an ASCII letter, digit, space, or one of - _ . ~
_SLUG_DISALLOWED = re.compile(r"[^A-Za-z0-9\s\-_.~]")


def pluralize(amount: Union[int, float, str], word: str, include_amount: bool = True) -> str:
    """
    Pluralize a word based on an amount.

        pluralize(3, "apple")               # "3 apples"
        pluralize("1", "apple")             # "1 apple"
        pluralize(3, "apple", False)        # "apples"
        pluralize("many", "apple")          # "many apples"
    """
    try:
        singular = float(amount) == 1
    except (TypeError, ValueError):
        singular = False
    suffix = "" if singular else "s"
    plural = f"{word}{suffix}"
    return f"{amount} {plural}" if include_amount else plural


def slugify(text: str) -> str:
    """
    Make a URL-safe slug.

    Disallowed characters are dropped (not replaced), whitespace runs
    become a single dash and repeated dashes are collapsed.

        slugify("  Hello  @#$ World!! ~JavaScript~ ")  # "Hello-World-~JavaScript~"
    """
    slug = _SLUG_DISALLOWED.sub("", text).strip()
    slug = re.sub(r"\s+", "-", slug)
    return re.sub(r"-+", "-", slug)


def get_random_pronounceable_word(length: int = 5) -> str:
    """Random word of alternating consonants and vowels, consonant first."""
    letters = []
    for i in range(length):
        pool = CONSONANTS if i % 2 == 0 else VOWELS
        letters.append(get_random_array_item(pool))
    return "".join(letters)
