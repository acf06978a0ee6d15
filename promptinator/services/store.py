"""
In-memory record stores for saved prompts and scene presets.

Records live in a per-process dictionary guarded by a lock and are always
scoped by user id: a record owned by someone else behaves exactly like a
missing one. Callers receive copies, never the stored dictionaries.
"""

from __future__ import annotations

import itertools
import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .errors import RecordNotFoundError

logger = logging.getLogger(__name__)

VALID_PRESET_CATEGORIES = ("action", "wardrobe", "environment", "subjects")

_RESERVED_FIELDS = ("id", "user_id", "created_at", "updated_at")


def _now() -> datetime:
    return datetime.now(timezone.utc)


class RecordStore:
    """Thread-safe user-scoped key-value store."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._records: Dict[str, Dict[str, Any]] = {}
        self._order: Dict[str, int] = {}
        self._sequence = itertools.count()
        self._lock = threading.Lock()

    def _clean(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return {k: v for k, v in payload.items() if k not in _RESERVED_FIELDS}

    def _owned(self, user_id: str, record_id: str) -> Dict[str, Any]:
        record = self._records.get(record_id)
        if record is None or record["user_id"] != user_id:
            raise RecordNotFoundError(f"{self.name} record {record_id} not found")
        return record

    def validate(self, payload: Dict[str, Any]) -> None:
        """Hook for subclasses; raise ValueError to reject a payload."""

    def list_by_user(self, user_id: str, **filters: Any) -> List[Dict[str, Any]]:
        """
        List a user's records, newest first.

        Args:
            user_id: Owner id
            **filters: Field equality filters; None values are ignored

        Returns:
            Copies of matching records
        """
        active = {k: v for k, v in filters.items() if v is not None}
        with self._lock:
            records = [
                record
                for record in self._records.values()
                if record["user_id"] == user_id
                and all(record.get(k) == v for k, v in active.items())
            ]
            records.sort(key=lambda r: self._order[r["id"]], reverse=True)
            return [dict(record) for record in records]

    def get(self, user_id: str, record_id: str) -> Dict[str, Any]:
        with self._lock:
            return dict(self._owned(user_id, record_id))

    def create(self, user_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        data = self._clean(payload)
        self.validate(data)
        timestamp = _now()
        record = {
            **data,
            "id": str(uuid.uuid4()),
            "user_id": user_id,
            "created_at": timestamp,
            "updated_at": timestamp,
        }
        with self._lock:
            self._records[record["id"]] = record
            self._order[record["id"]] = next(self._sequence)
        logger.info(f"✅ [{self.name}] Created {record['id']} for user {user_id}")
        return dict(record)

    def update(self, user_id: str, record_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply field changes to an owned record.

        Raises:
            RecordNotFoundError: If the record is missing or owned by another user
            ValueError: If the resulting record fails validation
        """
        data = self._clean(changes)
        with self._lock:
            record = self._owned(user_id, record_id)
            merged = {**record, **data}
            self.validate(self._clean(merged))
            merged["updated_at"] = _now()
            self._records[record_id] = merged
            return dict(merged)

    def delete(self, user_id: str, record_id: str) -> None:
        with self._lock:
            self._owned(user_id, record_id)
            del self._records[record_id]
            del self._order[record_id]
        logger.info(f"🗑️ [{self.name}] Deleted {record_id} for user {user_id}")

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
            self._order.clear()


class ScenePresetStore(RecordStore):
    """Presets need a name, a known category and a value."""

    def validate(self, payload: Dict[str, Any]) -> None:
        for field in ("name", "category", "value"):
            value = payload.get(field)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"Preset {field} is required")
        if payload["category"] not in VALID_PRESET_CATEGORIES:
            raise ValueError(
                f"Invalid category '{payload['category']}'. "
                f"Valid options: {', '.join(VALID_PRESET_CATEGORIES)}"
            )


prompt_store = RecordStore("prompts")
preset_store = ScenePresetStore("scene_presets")


def get_prompt_store() -> RecordStore:
    return prompt_store


def get_preset_store() -> ScenePresetStore:
    return preset_store


def reset_stores(stores: Optional[List[RecordStore]] = None) -> None:
    """Drop every record (used on shutdown and by tests)."""
    for store in stores or [prompt_store, preset_store]:
        store.clear()
