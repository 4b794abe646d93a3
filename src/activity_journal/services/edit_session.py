"""Edit session state machine for a single activity."""

import asyncio
import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import Enum

from activity_journal.domain.activities import (
    ActivityDraft,
    ImageUpload,
    normalize_date,
)
from activity_journal.domain.notifications import Notification, Severity
from activity_journal.services.images import ImageIngestor
from activity_journal.services.notifications import Navigator, Notifier
from activity_journal.services.records import ActivityStore
from activity_journal.services.validation import FieldErrors, validate_draft

_logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Activity updated successfully!"
EDITABLE_FIELDS: frozenset[str] = frozenset({"title", "description", "date"})


class EditState(Enum):
    """Lifecycle states of an edit session."""

    LOADING = "LOADING"
    READY = "READY"
    SUBMITTING = "SUBMITTING"
    COMMITTED = "COMMITTED"
    ABANDONED = "ABANDONED"


class InvalidSessionStateError(RuntimeError):
    """Raised when an operation is not allowed in the current state."""


@dataclass(frozen=True)
class EditSnapshot:
    """Read-only view of the session for rendering."""

    state: EditState
    draft: ActivityDraft | None
    errors: FieldErrors

    @property
    def is_submitting(self) -> bool:
        """True while a validated draft is waiting to navigate away."""
        return self.state is EditState.SUBMITTING


@dataclass
class EditSession:
    """Load, edit, validate and commit one activity."""

    store: ActivityStore
    ingestor: ImageIngestor
    notifier: Notifier
    navigator: Navigator
    redirect_delay_seconds: float = 1.0
    notification_duration_seconds: float = 5.0
    state: EditState = EditState.LOADING
    _draft: ActivityDraft | None = field(default=None, repr=False)
    _errors: FieldErrors = field(default_factory=dict, repr=False)

    def start(self, raw_id: str | int) -> bool:
        """Load the activity to edit; abandon and redirect when it is missing."""
        self._require(EditState.LOADING)
        activity_id = _parse_id(raw_id)
        activity = (
            self.store.find_by_id(activity_id) if activity_id is not None else None
        )
        if activity is None:
            _logger.info("Activity not found, leaving editor: raw_id=%s", raw_id)
            self._abandon()
            return False
        self._draft = ActivityDraft.from_activity(activity)
        self.state = EditState.READY
        return True

    def edit_field(self, name: str, value: str | date | datetime | None) -> None:
        """Set a text field on the draft."""
        draft = self._ready_draft()
        if name not in EDITABLE_FIELDS:
            raise ValueError(f"Unknown field: {name}")
        if name == "date":
            draft.date = normalize_date(value)
            return
        setattr(draft, name, "" if value is None else str(value))

    async def attach_photo(self, uploads: Sequence[ImageUpload]) -> bool:
        """Attach the first upload as the draft photo."""
        draft = self._ready_draft()
        return await self.ingestor.attach(draft, uploads)

    def detach_photo(self) -> None:
        """Remove the draft photo."""
        self.ingestor.detach(self._ready_draft())

    async def submit(self) -> FieldErrors:
        """Validate and persist the draft.

        Returns the field errors; an empty mapping means the draft was saved
        and the session has navigated back to the listing.
        """
        draft = self._ready_draft()
        self.state = EditState.SUBMITTING
        errors = validate_draft(draft)
        self._errors = errors
        if errors:
            self.state = EditState.READY
            return dict(errors)

        draft.photo_generation += 1
        self.store.upsert(draft.to_activity())
        self.notifier.notify(
            Notification(
                severity=Severity.SUCCESS,
                message=SUCCESS_MESSAGE,
                duration_seconds=self.notification_duration_seconds,
            )
        )
        if self.redirect_delay_seconds > 0:
            await asyncio.sleep(self.redirect_delay_seconds)
        self.state = EditState.COMMITTED
        self._draft = None
        self.navigator.go_to_listing()
        return {}

    def cancel(self) -> None:
        """Discard the draft and return to the listing."""
        self._require(EditState.READY)
        self._abandon()

    def snapshot(self) -> EditSnapshot:
        """Return the current state, a copy of the draft and the field errors."""
        draft = replace(self._draft) if self._draft is not None else None
        if draft is not None:
            draft.extra = dict(draft.extra)
        return EditSnapshot(state=self.state, draft=draft, errors=dict(self._errors))

    def _abandon(self) -> None:
        if self._draft is not None:
            self._draft.photo_generation += 1
        self._draft = None
        self._errors = {}
        self.state = EditState.ABANDONED
        self.navigator.go_to_listing()

    def _ready_draft(self) -> ActivityDraft:
        self._require(EditState.READY)
        if self._draft is None:
            raise InvalidSessionStateError("No draft loaded")
        return self._draft

    def _require(self, expected: EditState) -> None:
        if self.state is not expected:
            raise InvalidSessionStateError(
                f"Expected {expected.value} state, got {self.state.value}"
            )


def _parse_id(raw_id: str | int) -> int | None:
    """Parse a route identifier into an activity id."""
    if isinstance(raw_id, bool):
        return None
    if isinstance(raw_id, int):
        return raw_id
    try:
        value = float(str(raw_id).strip())
    except ValueError:
        return None
    if not math.isfinite(value) or not value.is_integer():
        return None
    return int(value)
