"""Outbound interfaces to the presentation layer."""

from typing import Protocol

from activity_journal.domain.notifications import Notification


class Notifier(Protocol):
    """Channel for transient user notifications."""

    def notify(self, notification: Notification) -> None:
        """Display a notification without waiting for a response."""


class Navigator(Protocol):
    """Requests view transitions from the presentation layer."""

    def go_to_listing(self) -> None:
        """Leave the edit view for the activity listing."""
