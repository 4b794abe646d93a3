"""Domain models for activity records and edit drafts."""

from dataclasses import dataclass, field
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, field_validator

ACCEPTED_IMAGE_TYPES: frozenset[str] = frozenset({"image/jpeg", "image/png"})


class Activity(BaseModel):
    """Persisted activity entry.

    Unknown keys written by other workflows are kept so that an edit never
    drops them from the stored collection.
    """

    model_config = ConfigDict(extra="allow")

    id: int
    title: str
    description: str
    date: str
    photo: str | None = None

    @field_validator("photo")
    @classmethod
    def _check_photo_prefix(cls, value: str | None) -> str | None:
        if value and photo_mime_type(value) not in ACCEPTED_IMAGE_TYPES:
            raise ValueError("photo must be a JPEG or PNG data URI")
        return value


@dataclass
class ActivityDraft:
    """Mutable working copy of an activity owned by one edit session."""

    id: int
    title: str
    description: str
    date: str
    photo: str | None = None
    photo_generation: int = 0
    extra: dict[str, object] = field(default_factory=dict)

    @classmethod
    def from_activity(cls, activity: Activity) -> "ActivityDraft":
        """Copy a stored activity into a fresh draft."""
        return cls(
            id=activity.id,
            title=activity.title,
            description=activity.description,
            date=activity.date,
            photo=activity.photo,
            extra=dict(activity.model_extra or {}),
        )

    def to_activity(self) -> Activity:
        """Build the record that replaces the stored activity on commit."""
        return Activity(
            id=self.id,
            title=self.title,
            description=self.description,
            date=self.date,
            photo=self.photo,
            **self.extra,
        )


@dataclass(frozen=True)
class ImageUpload:
    """A user-selected file offered for the activity photo."""

    filename: str
    content_type: str
    content: bytes


def photo_mime_type(data_uri: str) -> str | None:
    """Return the MIME type declared by a data URI, if any."""
    header, separator, _ = data_uri.partition(",")
    if not separator:
        return None
    header = header.removeprefix("data:")
    mime_type, _, encoding = header.partition(";")
    if encoding != "base64":
        return None
    return mime_type


def normalize_date(value: date | datetime | str | None) -> str:
    """Return a ``YYYY-MM-DD`` string, or an empty string when cleared."""
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value.strip()
