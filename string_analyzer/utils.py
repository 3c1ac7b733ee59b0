import hashlib
from collections import Counter
from typing import Dict


def compute_sha256(text: str) -> str:
    """
    Compute SHA-256 hash of a string over its UTF-8 bytes.

    Lone surrogates hash as U+FFFD.
    """
    utf16 = text.encode("utf-16-le", "surrogatepass")
    return hashlib.sha256(utf16.decode("utf-16-le", "replace").encode("utf-8")).hexdigest()


def utf16_length(text: str) -> int:
    """Length in UTF-16 code units (astral characters count twice)"""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def is_palindrome(text: str) -> bool:
    """Check if string is palindrome (case-insensitive, spaces and punctuation kept)"""
    lowered = text.lower()
    return lowered == lowered[::-1]


def count_unique_characters(text: str) -> int:
    """Count distinct characters in string (case-sensitive)"""
    return len(set(text))


def count_words(text: str) -> int:
    """
    Count words separated by whitespace.

    A blank string still counts as one (empty) word.
    """
    return len(text.split()) or 1


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character, in first-seen order"""
    return dict(Counter(text))


def analyze_string(value: str) -> Dict:
    """Analyze a string and return all computed properties"""
    return {
        "length": utf16_length(value),
        "is_palindrome": is_palindrome(value),
        "unique_characters": count_unique_characters(value),
        "word_count": count_words(value),
        "sha256_hash": compute_sha256(value),
        "character_frequency_map": get_character_frequency(value),
    }
