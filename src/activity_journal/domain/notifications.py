"""Models for user-facing notifications."""

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Notification severity."""

    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class Notification:
    """Fire-and-forget message for the presentation layer."""

    severity: Severity
    message: str
    duration_seconds: float
