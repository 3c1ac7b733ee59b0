"""
Translate a constrained natural language phrase into a FilterSpec.

Examples:
- "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
- "strings longer than 10 characters" -> {min_length: 11}
- "strings shorter than 5 characters" -> {max_length: 4}
- "palindromes" -> {is_palindrome: true}
- "strings containing the letter z" -> {contains_character: "z"}

Rules are tried top to bottom and the first match wins. The order matters:
"single word palindromes" would otherwise be read as plain "palindromes".
"""
import logging
import re
from typing import Callable, Dict, List, Optional, Tuple

from string_analyzer.errors import UnparseableQueryError
from string_analyzer.schemas import FilterSpec

logger = logging.getLogger(__name__)

SINGLE_WORD_PATTERN = re.compile(
    r"\b(?:single|one)[\s-]+word\b|\bword[_\s]?count\s*(?:=|of|is)\s*1\b", re.IGNORECASE
)
PALINDROME_PATTERN = re.compile(r"palindrom", re.IGNORECASE)
LONGER_THAN_PATTERN = re.compile(r"longer than\s+(\d+)", re.IGNORECASE)
SHORTER_THAN_PATTERN = re.compile(r"shorter than\s+(\d+)", re.IGNORECASE)
CONTAINS_PATTERN = re.compile(
    r"\bcontain(?:s|ing)?\s+(?:(?:the\s+)?(?:letter|character)\s+)?"
    r"[\"']?([^\s\"'])[\"']?(?=$|[\s.,;:!?])",
    re.IGNORECASE,
)

Rule = Callable[[str], Optional[Dict]]


def _single_word_palindrome(query: str) -> Optional[Dict]:
    if SINGLE_WORD_PATTERN.search(query) and PALINDROME_PATTERN.search(query):
        return {"word_count": 1, "is_palindrome": True}
    return None


def _longer_than(query: str) -> Optional[Dict]:
    match = LONGER_THAN_PATTERN.search(query)
    if match:
        return {"min_length": int(match.group(1)) + 1}
    return None


def _shorter_than(query: str) -> Optional[Dict]:
    match = SHORTER_THAN_PATTERN.search(query)
    if match:
        return {"max_length": int(match.group(1)) - 1}
    return None


def _palindrome(query: str) -> Optional[Dict]:
    if PALINDROME_PATTERN.search(query):
        return {"is_palindrome": True}
    return None


def _contains_character(query: str) -> Optional[Dict]:
    match = CONTAINS_PATTERN.search(query)
    if match:
        return {"contains_character": match.group(1)}
    return None


RULES: List[Tuple[str, Rule]] = [
    ("single_word_palindrome", _single_word_palindrome),
    ("longer_than", _longer_than),
    ("shorter_than", _shorter_than),
    ("palindrome", _palindrome),
    ("contains_character", _contains_character),
]


def parse_natural_language_query(query: str) -> FilterSpec:
    """Interpret a query; raises UnparseableQueryError when no rule matches"""
    for name, rule in RULES:
        filters = rule(query)
        if filters is not None:
            logger.info(f"Query {query!r} matched rule '{name}': {filters}")
            return FilterSpec(**filters)

    logger.warning(f"Unable to parse natural language query: {query!r}")
    raise UnparseableQueryError(query)
