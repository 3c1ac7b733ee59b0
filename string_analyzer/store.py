import logging
import threading
from datetime import datetime, timezone
from typing import Dict, List

from fastapi import Request

from string_analyzer.errors import ConflictError, NotFoundError
from string_analyzer.schemas import StringProperties, StringRecord
from string_analyzer.utils import analyze_string, compute_sha256

logger = logging.getLogger(__name__)


class StringStore:
    """
    In-memory, content-addressed store of analyzed strings.

    Records are keyed by the SHA-256 of their value, so a value can be
    stored at most once. All access goes through a single lock; a failed
    create never leaves a partial record behind.
    """

    def __init__(self):
        self._records: Dict[str, StringRecord] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def create(self, value: str) -> StringRecord:
        """Analyze and store a string; raises ConflictError if it already exists"""
        string_id = compute_sha256(value)

        with self._lock:
            if string_id in self._records:
                logger.info(f"Rejected duplicate string {string_id}")
                raise ConflictError("String already exists in the system")

            record = StringRecord(
                id=string_id,
                value=value,
                properties=StringProperties(**analyze_string(value)),
                created_at=datetime.now(timezone.utc),
            )
            self._records[string_id] = record

        logger.info(f"Stored string {string_id}")
        return record

    def get_by_value(self, value: str) -> StringRecord:
        """Look up a string by its exact value"""
        string_id = compute_sha256(value)
        with self._lock:
            record = self._records.get(string_id)
        if record is None:
            raise NotFoundError("String does not exist in the system")
        return record

    def list_all(self) -> List[StringRecord]:
        """All stored strings in insertion order"""
        with self._lock:
            return list(self._records.values())

    def delete_by_value(self, value: str) -> None:
        string_id = compute_sha256(value)
        with self._lock:
            if self._records.pop(string_id, None) is None:
                raise NotFoundError("String does not exist in the system")
        logger.info(f"Deleted string {string_id}")


def init_store(app) -> StringStore:
    """Attach a fresh, empty store to the application (runs on startup)"""
    store = StringStore()
    app.state.store = store
    logger.info("String store initialized")
    return store


def get_store(request: Request) -> StringStore:
    """Dependency to provide the application's string store."""
    return request.app.state.store
