"""Tests for the string analysis helpers."""

import hashlib

import pytest

from string_analyzer.utils import (
    analyze_string,
    compute_sha256,
    count_words,
    get_character_frequency,
    is_palindrome,
    utf16_length,
)


class TestAnalyzeString:
    def test_racecar(self):
        props = analyze_string("racecar")
        assert props["is_palindrome"] is True
        assert props["length"] == 7
        assert props["word_count"] == 1

    def test_hello_world(self):
        props = analyze_string("Hello World")
        assert props["length"] == 11
        assert props["word_count"] == 2
        assert props["is_palindrome"] is False

    def test_unique_characters(self):
        assert analyze_string("aabbcc")["unique_characters"] == 3

    def test_unique_characters_case_sensitive(self):
        assert analyze_string("Aa")["unique_characters"] == 2

    def test_hash_matches_hashlib(self):
        value = "héllo wörld"
        expected = hashlib.sha256(value.encode("utf-8")).hexdigest()
        assert analyze_string(value)["sha256_hash"] == expected
        assert compute_sha256(value) == expected

    def test_deterministic(self):
        assert analyze_string("same input") == analyze_string("same input")

    def test_empty_string(self):
        props = analyze_string("")
        assert props["length"] == 0
        assert props["is_palindrome"] is True
        assert props["unique_characters"] == 0
        assert props["word_count"] == 1
        assert props["character_frequency_map"] == {}


class TestPalindrome:
    @pytest.mark.parametrize("value", ["racecar", "Noon", "A", "", "aBbA"])
    def test_palindromes(self, value):
        assert is_palindrome(value)

    @pytest.mark.parametrize("value", ["hello", "A man a plan a canal Panama", "ab"])
    def test_not_palindromes(self, value):
        # whitespace and punctuation are significant
        assert not is_palindrome(value)

    @pytest.mark.parametrize("value", ["Racecar", "Hello", "Step on no pets", "xyZ zyx"])
    def test_matches_lowercase_reverse(self, value):
        assert is_palindrome(value) == (value.lower() == value.lower()[::-1])


class TestWordCount:
    def test_multiple_spaces(self):
        assert count_words("  one   two\tthree\n") == 3

    @pytest.mark.parametrize("value", ["", "   ", "\n\t"])
    def test_blank_counts_as_one(self, value):
        assert count_words(value) == 1


class TestCharacterFrequency:
    def test_counts(self):
        assert get_character_frequency("hello") == {"h": 1, "e": 1, "l": 2, "o": 1}

    def test_first_seen_order(self):
        assert list(get_character_frequency("banana split")) == ["b", "a", "n", " ", "s", "p", "l", "i", "t"]

    def test_whitespace_counted(self):
        assert get_character_frequency("a a")[" "] == 1


class TestLength:
    def test_ascii(self):
        assert utf16_length("abc") == 3

    def test_astral_counts_two_units(self):
        assert utf16_length("a\U0001F600") == 3

    def test_lone_surrogate_is_one_unit(self):
        assert utf16_length("a\ud800") == 2


class TestLoneSurrogate:
    def test_analyze_does_not_fail(self):
        props = analyze_string("\ud800")
        assert props["length"] == 1
        assert props["unique_characters"] == 1
        assert props["is_palindrome"] is True
        assert props["character_frequency_map"] == {"\ud800": 1}

    def test_hashed_as_replacement_character(self):
        expected = hashlib.sha256("a\ufffd".encode("utf-8")).hexdigest()
        assert compute_sha256("a\ud800") == expected
