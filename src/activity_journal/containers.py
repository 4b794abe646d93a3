"""Dependency container wiring for the application."""

from dataclasses import dataclass

from activity_journal.adapters.file_storage import FileKeyValueStorage
from activity_journal.adapters.logging_presenter import (
    LoggingNavigator,
    LoggingNotifier,
)
from activity_journal.app_logging import configure_logging
from activity_journal.config import Settings
from activity_journal.services.edit_session import EditSession
from activity_journal.services.images import ImageIngestor
from activity_journal.services.notifications import Navigator, Notifier
from activity_journal.services.records import ActivityStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: ActivityStore
    notifier: Notifier
    navigator: Navigator
    ingestor: ImageIngestor

    def new_edit_session(self) -> EditSession:
        """Create an edit session bound to the shared collaborators."""
        return EditSession(
            store=self.store,
            ingestor=self.ingestor,
            notifier=self.notifier,
            navigator=self.navigator,
            redirect_delay_seconds=self.settings.redirect_delay_seconds,
            notification_duration_seconds=self.settings.notification_duration_seconds,
        )


def build_container(
    settings: Settings | None = None,
    notifier: Notifier | None = None,
    navigator: Navigator | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging()
    store = ActivityStore(
        storage=FileKeyValueStorage(resolved_settings.data_dir),
        key=resolved_settings.storage_key,
    )
    resolved_notifier = notifier or LoggingNotifier()
    resolved_navigator = navigator or LoggingNavigator(
        listing_route=resolved_settings.listing_route
    )
    ingestor = ImageIngestor(
        notifier=resolved_notifier,
        notification_duration_seconds=resolved_settings.notification_duration_seconds,
    )
    return AppContainer(
        settings=resolved_settings,
        store=store,
        notifier=resolved_notifier,
        navigator=resolved_navigator,
        ingestor=ingestor,
    )
