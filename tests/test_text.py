"""
Tests for text helpers.
"""

import pytest

from qutils.core.constants import CONSONANTS, VOWELS
from qutils.core.numbers import get_random_number
from qutils.core.text import get_random_pronounceable_word, pluralize, slugify


class TestPluralize:
    """Tests for pluralize() - amount-aware word endings."""

    def test_numbers(self):
        assert pluralize(3, "apple") == "3 apples"
        assert pluralize(1, "apple") == "1 apple"
        assert pluralize(0, "apple") == "0 apples"

    def test_strings(self):
        assert pluralize("3", "apple") == "3 apples"
        assert pluralize("1", "apple") == "1 apple"
        assert pluralize("0", "apple") == "0 apples"

    def test_without_amount(self):
        assert pluralize(3, "apple", False) == "apples"
        assert pluralize("1", "apple", False) == "apple"

    def test_non_numeric_amount_is_plural(self):
        assert pluralize("many", "apple") == "many apples"
        assert pluralize("", "apple") == " apples"
        assert pluralize(None, "apple", False) == "apples"


class TestSlugify:
    """Tests for slugify() - URL-safe slugs."""

    @pytest.mark.parametrize("text, expected", [
        ("  Hello World  ", "Hello-World"),
        ("Hello@#World!", "HelloWorld"),
        ("Hello     World", "Hello-World"),
        ("Hello$%^&*()World", "HelloWorld"),
        ("Hello---World", "Hello-World"),
        ("a-zA-Z0-9-_.~", "a-zA-Z0-9-_.~"),
        ("  Hello  @#$ World!! ~JavaScript~ ", "Hello-World-~JavaScript~"),
    ])
    def test_slugs(self, text, expected):
        assert slugify(text) == expected

    def test_nothing_left(self):
        assert slugify("") == ""
        assert slugify("     ") == ""
        assert slugify("@#$%^&*()") == ""

    def test_emoji_dropped(self):
        assert slugify("🌟🌟🌟") == ""
        assert slugify("🚀 Launch the 🚀 rocket!") == "Launch-the-rocket"


class TestGetRandomPronounceableWord:
    """Tests for get_random_pronounceable_word() - consonant/vowel words."""

    def test_default_length(self):
        word = get_random_pronounceable_word()
        assert len(word) == 5
        assert word[0] in CONSONANTS
        assert word[-1] in CONSONANTS

    def test_alternates_starting_with_consonant(self):
        for _ in range(100):
            length = get_random_number(2, 20)
            word = get_random_pronounceable_word(length)

            assert len(word) == length
            for i, letter in enumerate(word):
                assert letter in (CONSONANTS if i % 2 == 0 else VOWELS)

    def test_zero_length(self):
        assert get_random_pronounceable_word(0) == ""


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
