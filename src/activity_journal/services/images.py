"""Photo validation and inline encoding for activity drafts."""

import asyncio
import base64
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from activity_journal.domain.activities import (
    ACCEPTED_IMAGE_TYPES,
    ActivityDraft,
    ImageUpload,
)
from activity_journal.domain.notifications import Notification, Severity
from activity_journal.services.notifications import Notifier

_logger = logging.getLogger(__name__)

INVALID_FORMAT_MESSAGE = "Only PNG, JPEG, and JPG images are allowed!"
PHOTO_REMOVED_MESSAGE = "Photo deleted successfully!"


class InvalidImageFormatError(ValueError):
    """Raised when an upload is not a JPEG or PNG image."""


@dataclass
class ImageIngestor:
    """Attach uploaded images to a draft as base64 data URIs."""

    notifier: Notifier
    notification_duration_seconds: float = 5.0

    async def attach(
        self, draft: ActivityDraft, uploads: Sequence[ImageUpload]
    ) -> bool:
        """Encode the first upload into ``draft.photo``.

        Returns True when the photo was assigned. A detach issued while the
        encoding is pending wins over the late result.
        """
        if not uploads:
            return False
        upload = uploads[0]
        try:
            _check_format(upload)
        except InvalidImageFormatError:
            _logger.info(
                "Rejected photo upload: filename=%s content_type=%s",
                upload.filename,
                upload.content_type,
            )
            self._notify(Severity.ERROR, INVALID_FORMAT_MESSAGE)
            return False

        draft.photo_generation += 1
        generation = draft.photo_generation
        data_uri = await encode_data_uri(upload)
        if draft.photo_generation != generation:
            _logger.debug(
                "Dropped stale photo encoding: activity_id=%s generation=%s",
                draft.id,
                generation,
            )
            return False
        draft.photo = data_uri
        return True

    def detach(self, draft: ActivityDraft) -> None:
        """Clear the draft photo and invalidate pending encodings."""
        draft.photo_generation += 1
        draft.photo = None
        self._notify(Severity.INFO, PHOTO_REMOVED_MESSAGE)

    def _notify(self, severity: Severity, message: str) -> None:
        self.notifier.notify(
            Notification(
                severity=severity,
                message=message,
                duration_seconds=self.notification_duration_seconds,
            )
        )


async def encode_data_uri(upload: ImageUpload) -> str:
    """Encode upload bytes as a base64 data URI off the event loop."""
    return await asyncio.to_thread(_to_data_uri, upload.content_type, upload.content)


def _to_data_uri(mime_type: str, content: bytes) -> str:
    encoded = base64.b64encode(content).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _check_format(upload: ImageUpload) -> None:
    if upload.content_type not in ACCEPTED_IMAGE_TYPES:
        raise InvalidImageFormatError(upload.content_type)
