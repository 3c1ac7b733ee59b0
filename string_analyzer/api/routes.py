from fastapi import APIRouter, Depends, Query, Request, status
from typing import Optional
import json
import logging

from string_analyzer.errors import InvalidParameterError, MissingFieldError
from string_analyzer.filters import apply_filters, parse_filter_params
from string_analyzer.nl_query import parse_natural_language_query
from string_analyzer.schemas import (
    InterpretedQuery,
    NaturalLanguageResponse,
    StringListResponse,
    StringRecord,
    parse_string_create,
)
from string_analyzer.responses import AsciiJSONResponse
from string_analyzer.store import StringStore, get_store

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/strings", response_model=StringRecord, status_code=status.HTTP_201_CREATED)
async def create_string(request: Request, store: StringStore = Depends(get_store)):
    """
    Analyze and store a string.
    Returns 400 if 'value' is missing, 422 if it is not a string
    and 409 if the string already exists.
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise MissingFieldError("Invalid request body or missing 'value' field")

    string_data = parse_string_create(payload)
    record = store.create(string_data.value)
    return AsciiJSONResponse(content=record.model_dump(), status_code=status.HTTP_201_CREATED)


@router.get("/strings", response_model=StringListResponse)
def get_all_strings(
    is_palindrome: Optional[str] = Query(None, description="Filter by palindrome (true/false)"),
    min_length: Optional[str] = Query(None, description="Minimum string length"),
    max_length: Optional[str] = Query(None, description="Maximum string length"),
    word_count: Optional[str] = Query(None, description="Exact word count"),
    contains_character: Optional[str] = Query(None, description="Single character the string must contain"),
    store: StringStore = Depends(get_store),
):
    """
    Get all strings with optional filtering.
    """
    spec = parse_filter_params(
        is_palindrome=is_palindrome,
        min_length=min_length,
        max_length=max_length,
        word_count=word_count,
        contains_character=contains_character,
    )
    data = apply_filters(store.list_all(), spec)

    response = StringListResponse(
        data=data,
        count=len(data),
        filters_applied=spec.applied(),
    )
    return AsciiJSONResponse(content=response.model_dump())


@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
def filter_by_natural_language(
    query: Optional[str] = Query(None, description="Natural language query"),
    store: StringStore = Depends(get_store),
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    if not query:
        raise InvalidParameterError("Missing 'query' parameter")

    spec = parse_natural_language_query(query)
    data = apply_filters(store.list_all(), spec)

    response = NaturalLanguageResponse(
        data=data,
        count=len(data),
        interpreted_query=InterpretedQuery(original=query, parsed_filters=spec.applied()),
    )
    return AsciiJSONResponse(content=response.model_dump())


@router.get("/strings/{string_value:path}", response_model=StringRecord)
def get_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    record = store.get_by_value(string_value)
    return AsciiJSONResponse(content=record.model_dump())


@router.delete("/strings/{string_value:path}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    store.delete_by_value(string_value)
    return None
