import logging
import re
from typing import Iterable, List, Optional

from string_analyzer.errors import InvalidParameterError
from string_analyzer.schemas import FilterSpec, StringRecord

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("true", "1")
_FALSE_VALUES = ("false", "0")
_INTEGER_PATTERN = re.compile(r"-?[0-9]+")


def _parse_int(name: str, raw: Optional[str]) -> Optional[int]:
    if raw is None or raw == "":
        return None
    if not _INTEGER_PATTERN.fullmatch(raw):
        raise InvalidParameterError(f"Invalid value for '{name}': expected an integer")
    return int(raw)


def _parse_bool(name: str, raw: Optional[str]) -> Optional[bool]:
    if raw is None or raw == "":
        return None
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise InvalidParameterError(f"Invalid value for '{name}': expected true or false")


def parse_filter_params(
    is_palindrome: Optional[str] = None,
    min_length: Optional[str] = None,
    max_length: Optional[str] = None,
    word_count: Optional[str] = None,
    contains_character: Optional[str] = None,
) -> FilterSpec:
    """Turn raw query-string values into a FilterSpec"""
    if contains_character == "":
        contains_character = None
    if contains_character is not None and len(contains_character) != 1:
        raise InvalidParameterError(
            "Invalid value for 'contains_character': expected a single character"
        )

    return FilterSpec(
        is_palindrome=_parse_bool("is_palindrome", is_palindrome),
        min_length=_parse_int("min_length", min_length),
        max_length=_parse_int("max_length", max_length),
        word_count=_parse_int("word_count", word_count),
        contains_character=contains_character,
    )


def matches(record: StringRecord, spec: FilterSpec) -> bool:
    props = record.properties

    if spec.is_palindrome is not None and props.is_palindrome != spec.is_palindrome:
        return False
    if spec.min_length is not None and props.length < spec.min_length:
        return False
    if spec.max_length is not None and props.length > spec.max_length:
        return False
    if spec.word_count is not None and props.word_count != spec.word_count:
        return False
    if spec.contains_character is not None and spec.contains_character not in record.value:
        return False

    return True


def apply_filters(records: Iterable[StringRecord], spec: FilterSpec) -> List[StringRecord]:
    """Keep the records matching every populated filter, preserving order"""
    results = [record for record in records if matches(record, spec)]
    logger.debug(f"Filters {spec.applied()} matched {len(results)} strings")
    return results
