"""Tests for casing classification of words and tokens."""

import pytest

from textcheck_tools.character.casing import (
    change_first_char_case,
    is_all_uppercase,
    is_capitalized_word,
    is_mixed_case,
    is_not_all_lowercase,
    lowercase_first_char,
    starts_with_uppercase,
    uppercase_first_char,
)


class TestIsAllUppercase:
    """Test all-uppercase detection."""

    @pytest.mark.parametrize("word", ["", "A", "ABC", "AB-C", "1234", "ÄÖÜ", "NASA's".upper(), "日本"])
    def test_uppercase_or_caseless(self, word):
        """Test strings without lowercase letters."""
        assert is_all_uppercase(word) is True

    @pytest.mark.parametrize("word", ["a", "Abc", "ABc", "ABCß", "éTÉ"])
    def test_contains_lowercase(self, word):
        """Test strings containing a lowercase letter."""
        assert is_all_uppercase(word) is False

    def test_ignores_digits_and_punctuation(self):
        """Test that caseless characters do not affect the result."""
        assert is_all_uppercase("A1-B2.C3!") is True


class TestIsNotAllLowercase:
    """Test detection of letters that are not lowercase."""

    def test_all_lowercase(self):
        """Test that lowercase-only words are rejected."""
        assert is_not_all_lowercase("hello") is False
        assert is_not_all_lowercase("hello, world 42") is False

    def test_empty_and_caseless(self):
        """Test strings without any letters."""
        assert is_not_all_lowercase("") is False
        assert is_not_all_lowercase("123 ...") is False

    def test_uppercase_letter(self):
        """Test that an uppercase letter anywhere is found."""
        assert is_not_all_lowercase("helLo") is True

    def test_caseless_letter(self):
        """Test that letters without case count as not lowercase."""
        assert is_not_all_lowercase("漢字") is True


class TestIsCapitalizedWord:
    """Test capitalized word detection."""

    @pytest.mark.parametrize("word", ["Hello", "A", "Élan", "Hello-world", "Mc2"])
    def test_capitalized(self, word):
        """Test words with one leading capital."""
        assert is_capitalized_word(word) is True

    @pytest.mark.parametrize("word", ["", "hello", "HEllo", "HelLo", "(Hello", "1Hello"])
    def test_not_capitalized(self, word):
        """Test words not matching the capitalized pattern."""
        assert is_capitalized_word(word) is False


class TestIsMixedCase:
    """Test mixed case detection."""

    @pytest.mark.parametrize("word", ["MixedCase", "mixedCase", "iPhone", "eBay", "McDonald"])
    def test_mixed(self, word):
        """Test words with irregular internal case changes."""
        assert is_mixed_case(word) is True

    @pytest.mark.parametrize("word", ["Mixedcase", "MIXED", "mixed", "", "42"])
    def test_not_mixed(self, word):
        """Test pure patterns and capitalized words."""
        assert is_mixed_case(word) is False

    @pytest.mark.parametrize("word", ["Hello", "A", "Zürich", "O'neil", "Well-known"])
    def test_capitalized_words_start_uppercase_and_are_not_mixed(self, word):
        """Test consistency between the capitalized and mixed case predicates."""
        # Arrange & Act
        capitalized = is_capitalized_word(word)

        # Assert
        assert capitalized is True
        assert starts_with_uppercase(word) is True
        assert is_mixed_case(word) is False


class TestStartsWithUppercase:
    """Test first character case detection."""

    def test_uppercase_start(self):
        """Test strings starting with an uppercase letter."""
        assert starts_with_uppercase("Hello") is True
        assert starts_with_uppercase("HELLO") is True

    def test_other_starts(self):
        """Test strings starting with something other than an uppercase letter."""
        assert starts_with_uppercase("") is False
        assert starts_with_uppercase("hello") is False
        assert starts_with_uppercase("(Hello)") is False
        assert starts_with_uppercase("1A") is False


class TestChangeFirstCharCase:
    """Test changing the case of the first letter or digit."""

    def test_uppercase_skips_leading_punctuation(self):
        """Test that quotes and brackets before the word are kept."""
        assert uppercase_first_char("(hello)") == "(Hello)"
        assert uppercase_first_char('"quoted"') == '"Quoted"'
        assert uppercase_first_char("¿qué?") == "¿Qué?"

    def test_lowercase_changes_only_first_letter(self):
        """Test that the rest of the string is unchanged."""
        assert lowercase_first_char("HELLO") == "hELLO"
        assert lowercase_first_char("[ABC]") == "[aBC]"

    def test_plain_words(self):
        """Test words starting with a letter."""
        assert uppercase_first_char("hello world") == "Hello world"
        assert lowercase_first_char("Hello World") == "hello World"

    def test_empty_string(self):
        """Test that the empty string is returned unchanged."""
        assert uppercase_first_char("") == ""
        assert lowercase_first_char("") == ""

    def test_single_character(self):
        """Test that a single character is changed directly."""
        assert uppercase_first_char("a") == "A"
        assert lowercase_first_char("A") == "a"
        assert uppercase_first_char("(") == "("

    def test_digit_stops_scan(self):
        """Test that a digit counts as the first alphanumeric character."""
        assert uppercase_first_char("(1abc)") == "(1abc)"

    def test_no_alphanumeric_changes_last_character(self):
        """Test that the scan stops at the last character."""
        assert uppercase_first_char("((") == "(("
        assert change_first_char_case("..x", to_upper=True) == "..X"

    def test_already_in_target_case(self):
        """Test that an already matching character is left as is."""
        assert uppercase_first_char("Hello") == "Hello"
        assert lowercase_first_char("hello") == "hello"

    def test_multi_character_mapping_keeps_length(self):
        """Test that a character whose uppercase form is longer stays as is."""
        # Arrange
        word = "\u00dfa"

        # Act
        result = uppercase_first_char(word)

        # Assert
        assert result == word
        assert len(result) == len(word)
        assert uppercase_first_char("\u00df") == "\u00df"
        assert uppercase_first_char("(\ufb01ne)") == "(\ufb01ne)"
