"""Keyed activity collection stored in a single text slot."""

import json
import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from activity_journal.domain.activities import Activity

_logger = logging.getLogger(__name__)

_COLLECTION = TypeAdapter(list[Activity])


class KeyValueStorage(Protocol):
    """Persistence medium holding text values under named slots."""

    def get_item(self, key: str) -> str | None:
        """Return the text stored under ``key``, if present."""

    def set_item(self, key: str, value: str) -> None:
        """Replace the text stored under ``key``."""


@dataclass
class ActivityStore:
    """Activity collection read and written as one serialized JSON array."""

    storage: KeyValueStorage
    key: str = "activities"

    def load_all(self) -> list[Activity]:
        """Return every stored activity, or an empty list when none can be read."""
        try:
            raw = self.storage.get_item(self.key)
        except UnicodeDecodeError as exc:
            _logger.warning(
                "Discarding undecodable activity collection: key=%s position=%s",
                self.key,
                exc.start,
            )
            return []
        if raw is None:
            return []
        try:
            return _COLLECTION.validate_json(raw)
        except ValidationError as exc:
            _logger.warning(
                "Discarding unreadable activity collection: key=%s errors=%s",
                self.key,
                exc.error_count(),
            )
            return []

    def find_by_id(self, activity_id: int) -> Activity | None:
        """Return the activity with the given id, if stored."""
        for activity in self.load_all():
            if activity.id == activity_id:
                return activity
        return None

    def upsert(self, activity: Activity) -> bool:
        """Replace the stored activity with a matching id.

        Returns False without writing when no activity has that id.
        """
        activities = self.load_all()
        replaced = False
        updated: list[Activity] = []
        for current in activities:
            if current.id == activity.id:
                updated.append(activity)
                replaced = True
            else:
                updated.append(current)
        if not replaced:
            _logger.info("Upsert skipped, no stored activity: id=%s", activity.id)
            return False
        self.storage.set_item(self.key, _serialize(updated))
        _logger.info("Activity saved: id=%s", activity.id)
        return True


def _serialize(activities: list[Activity]) -> str:
    payload = []
    for activity in activities:
        row = activity.model_dump(mode="json")
        if row.get("photo") is None:
            row.pop("photo", None)
        payload.append(row)
    return json.dumps(payload, ensure_ascii=False)
