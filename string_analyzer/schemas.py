from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError
from typing import Any, Dict, Optional, List
from datetime import datetime

from string_analyzer.errors import InvalidTypeError, MissingFieldError


class StringCreate(BaseModel):
    value: StrictStr = Field(..., description="String to analyze")


class StringProperties(BaseModel):
    model_config = ConfigDict(frozen=True)

    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    value: str
    properties: StringProperties
    created_at: datetime


class FilterSpec(BaseModel):
    """Conjunctive filters over stored strings; unset fields do not filter"""

    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = Field(None, min_length=1, max_length=1)

    def applied(self) -> Dict[str, Any]:
        """Populated filters only, as echoed back to clients"""
        return self.model_dump(exclude_none=True)

    def is_empty(self) -> bool:
        return not self.applied()


class StringListResponse(BaseModel):
    data: List[StringRecord]
    count: int
    filters_applied: Dict[str, Any] = {}


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[StringRecord]
    count: int
    interpreted_query: InterpretedQuery


def parse_string_create(payload: Any) -> StringCreate:
    """
    Validate a raw POST /strings body.

    Raises MissingFieldError when there is no 'value' key to read and
    InvalidTypeError when 'value' is present but not a string.
    """
    if not isinstance(payload, dict) or "value" not in payload:
        raise MissingFieldError("Missing 'value' field")

    try:
        return StringCreate.model_validate(payload)
    except ValidationError:
        raise InvalidTypeError("Invalid data type for 'value', must be a string")
