"""Shared test fixtures."""

import json
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from activity_journal.config import Settings
from activity_journal.domain.activities import ImageUpload
from activity_journal.domain.notifications import Notification, Severity
from activity_journal.services.edit_session import EditSession
from activity_journal.services.images import ImageIngestor
from activity_journal.services.notifications import Navigator, Notifier
from activity_journal.services.records import ActivityStore, KeyValueStorage

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"png-body"
JPEG_BYTES = b"\xff\xd8\xff" + b"jpeg-body"


@dataclass
class InMemoryKeyValueStorage(KeyValueStorage):
    """In-memory key/value slots for tests."""

    items: dict[str, str] = field(default_factory=dict)
    writes: list[str] = field(default_factory=list)

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.writes.append(key)
        self.items[key] = value

    def seed(self, key: str, rows: list[dict[str, object]]) -> None:
        self.items[key] = json.dumps(rows)

    def rows(self, key: str = "activities") -> list[dict[str, object]]:
        return json.loads(self.items[key])


@dataclass
class RecordingNotifier(Notifier):
    """Notifier that keeps every notification."""

    notifications: list[Notification] = field(default_factory=list)

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    def of(self, severity: Severity) -> list[str]:
        return [n.message for n in self.notifications if n.severity is severity]


@dataclass
class RecordingNavigator(Navigator):
    """Navigator that counts listing requests."""

    listing_requests: int = 0

    def go_to_listing(self) -> None:
        self.listing_requests += 1


def png_upload(name: str = "photo.png") -> ImageUpload:
    return ImageUpload(filename=name, content_type="image/png", content=PNG_BYTES)


def jpeg_upload(name: str = "photo.jpg") -> ImageUpload:
    return ImageUpload(filename=name, content_type="image/jpeg", content=JPEG_BYTES)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(data_dir=tmp_path / "data", redirect_delay_seconds=0.0)


@pytest.fixture
def storage() -> InMemoryKeyValueStorage:
    storage = InMemoryKeyValueStorage()
    storage.seed(
        "activities",
        [
            {
                "id": 1,
                "title": "A",
                "description": "d",
                "date": "2024-01-01",
            },
            {
                "id": 2,
                "title": "Run",
                "description": "Morning run",
                "date": "2024-02-03",
            },
        ],
    )
    return storage


@pytest.fixture
def store(storage: InMemoryKeyValueStorage) -> ActivityStore:
    return ActivityStore(storage)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def session(
    store: ActivityStore,
    notifier: RecordingNotifier,
    navigator: RecordingNavigator,
) -> EditSession:
    return EditSession(
        store=store,
        ingestor=ImageIngestor(notifier),
        notifier=notifier,
        navigator=navigator,
        redirect_delay_seconds=0.0,
    )
