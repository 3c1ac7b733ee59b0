import json
from datetime import datetime
from typing import Any

from fastapi.responses import JSONResponse


def _encode_default(obj: Any) -> Any:
    if isinstance(obj, datetime):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class AsciiJSONResponse(JSONResponse):
    """
    JSONResponse that escapes non-ASCII characters.

    Stored values may hold lone surrogates, which cannot be encoded as UTF-8
    but can be written as \\uXXXX escapes.
    """

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=True,
            allow_nan=False,
            separators=(",", ":"),
            default=_encode_default,
        ).encode("utf-8")
