"""Presentation stand-ins that report through the application logger."""

import logging
from dataclasses import dataclass

from activity_journal.domain.notifications import Notification, Severity
from activity_journal.services.notifications import Navigator, Notifier

_logger = logging.getLogger(__name__)

_LEVELS: dict[Severity, int] = {
    Severity.SUCCESS: logging.INFO,
    Severity.INFO: logging.INFO,
    Severity.ERROR: logging.WARNING,
}


@dataclass
class LoggingNotifier(Notifier):
    """Writes notifications to the log instead of a toast."""

    def notify(self, notification: Notification) -> None:
        """Log the notification at a level matching its severity."""
        _logger.log(
            _LEVELS[notification.severity],
            "Notification %s: %s",
            notification.severity.value,
            notification.message,
        )


@dataclass
class LoggingNavigator(Navigator):
    """Records navigation requests in the log."""

    listing_route: str = "/recent-activities"

    def go_to_listing(self) -> None:
        """Log the requested route."""
        _logger.info("Navigate: route=%s", self.listing_route)
