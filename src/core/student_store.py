"""
Persistence of submitted student registrations.

Records are kept as a JSON array under a single key of an opaque key-value
store. The store is read in full, appended to and written back in full on
every submission. Unreadable data reads as an empty sequence; malformed
records inside an otherwise readable sequence are skipped.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any, Protocol

import jsonschema
from PySide6.QtCore import QSettings

from .config import SENSITIVE_FIELDS, STUDENT_RECORDS_JSON_SCHEMA, STUDENTS_STORAGE_KEY
from .error_handler import get_error_handler
from .errors import ErrorCode, StorageError

logger = logging.getLogger(__name__)

SUBMITTED_AT_KEY = "submittedAt"


class StorageBackend(Protocol):
    """Opaque key-value blob store."""

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """In-process storage backend, used by tests and previews."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class QSettingsStorage:
    """Storage backend persisting blobs through QSettings."""

    def __init__(self, settings: QSettings | None = None) -> None:
        self._settings = settings if settings is not None else QSettings()

    def get(self, key: str) -> str | None:
        if not self._settings.contains(key):
            return None
        value = self._settings.value(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        self._settings.setValue(key, value)
        self._settings.sync()
        if self._settings.status() != QSettings.Status.NoError:
            raise OSError(f"QSettings could not write '{key}': {self._settings.status()}")


def build_snapshot(
    values: Mapping[str, Any],
    submitted_at: datetime | None = None,
    sensitive_fields: Iterable[str] = SENSITIVE_FIELDS,
) -> dict[str, Any]:
    """
    Build the record for one submission.

    Sensitive fields are dropped and the submission timestamp is added.
    """
    excluded = set(sensitive_fields)
    record = {key: value for key, value in values.items() if key not in excluded}
    record[SUBMITTED_AT_KEY] = (submitted_at or datetime.now()).isoformat(timespec="seconds")
    return record


def serialize_records(records: list[dict[str, Any]]) -> str:
    """Serialize a record sequence to its stored JSON text."""
    return json.dumps(records, ensure_ascii=False)


def deserialize_records(text: str) -> list[dict[str, Any]]:
    """
    Parse stored JSON text into a record sequence.

    Raises:
        json.JSONDecodeError: If the text is not JSON
        jsonschema.ValidationError: If the JSON is not a record sequence
    """
    records = json.loads(text)
    jsonschema.validate(records, STUDENT_RECORDS_JSON_SCHEMA)
    return records


def readable_records(data: Any) -> list[dict[str, Any]]:
    """Keep the items of a parsed sequence that are well-formed records."""
    if not isinstance(data, list):
        return []
    validator = jsonschema.Draft7Validator(STUDENT_RECORDS_JSON_SCHEMA["items"])
    return [item for item in data if validator.is_valid(item)]


class StudentRecordStore:
    """
    Append-only sequence of submitted registrations.

    Reads and writes go through an injected StorageBackend.
    """

    def __init__(self, backend: StorageBackend, key: str = STUDENTS_STORAGE_KEY) -> None:
        self._backend = backend
        self._key = key
        self._error_handler = get_error_handler()

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[dict[str, Any]]:
        """
        Read the full record sequence.

        Returns an empty list when nothing is stored yet or when the stored
        data cannot be read. Malformed records are left out, so the next
        append drops them from storage.
        """
        try:
            raw = self._backend.get(self._key)
        except (OSError, RuntimeError) as e:
            self._report(ErrorCode.STORAGE_READ_FAILED, "Stored registrations could not be read", e)
            return []

        if raw is None:
            return []

        try:
            return deserialize_records(raw)
        except json.JSONDecodeError as e:
            self._report(
                ErrorCode.STORAGE_CORRUPT,
                "Stored registrations are not valid JSON and will be replaced on the next save",
                e,
            )
            return []
        except jsonschema.ValidationError as e:
            kept = readable_records(json.loads(raw))
            self._report(
                ErrorCode.STORAGE_CORRUPT,
                f"Stored registrations have an unexpected shape; keeping {len(kept)} readable records, "
                "the rest will be replaced on the next save",
                e,
            )
            return kept

    def append(self, record: dict[str, Any]) -> bool:
        """
        Append one record and write the sequence back.

        Returns:
            True if the write succeeded, False otherwise
        """
        leaked = SENSITIVE_FIELDS.intersection(record)
        if leaked:
            raise ValueError(f"Refusing to store sensitive fields: {', '.join(sorted(leaked))}")

        records = self.load()
        records.append(record)

        try:
            self._backend.set(self._key, serialize_records(records))
        except (OSError, RuntimeError) as e:
            self._report(ErrorCode.STORAGE_WRITE_FAILED, "Registration could not be saved", e)
            return False

        logger.info(f"Stored registration #{len(records)} under '{self._key}'")
        return True

    def count(self) -> int:
        return len(self.load())

    def _report(self, code: ErrorCode, message: str, cause: Exception) -> None:
        error = StorageError(
            code=code,
            user_message=message,
            technical_message=f"{type(cause).__name__}: {cause}",
            context={"key": self._key},
        )
        self._error_handler.handle(error, level=logging.WARNING)
