"""Application context for in-process wiring.

Gives the controller and views one place to reach the shared model and the
active settings.
"""

import logging
from typing import Optional

from expense_tracker.config.settings import Settings, set_settings, get_settings
from expense_tracker.config.logging_config import setup_logging
from expense_tracker.domain.models import ListenerErrorPolicy
from expense_tracker.model import ExpenseTrackerModel

logger = logging.getLogger(__name__)


class AppContext:
    """
    Application context owning the expense tracker model.

    The model is created lazily on first access and lives as long as the
    context does.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize application context.

        Args:
            settings: Optional settings. If not provided, the global settings
                are used.
        """
        self._settings = settings
        self._initialized = False
        self._model: Optional[ExpenseTrackerModel] = None

    def initialize(self, settings: Optional[Settings] = None) -> None:
        """
        Initialize or reinitialize the application.

        Installs the settings globally, configures logging and drops any
        existing model.
        """
        if settings is not None:
            self._settings = settings
        if self._settings is not None:
            set_settings(self._settings)

        setup_logging()

        self._model = None
        self._initialized = True
        logger.info("Initialized %s %s", self.settings.app_name, self.settings.app_version)

    @property
    def is_initialized(self) -> bool:
        """Check if context is initialized."""
        return self._initialized

    @property
    def settings(self) -> Settings:
        """Get the active settings."""
        return self._settings or get_settings()

    @property
    def listener_error_policy(self) -> ListenerErrorPolicy:
        return self.settings.listener_error_policy

    @property
    def model(self) -> ExpenseTrackerModel:
        """Get the shared ExpenseTrackerModel instance."""
        if self._model is None:
            self._model = ExpenseTrackerModel(
                listener_error_policy=self.listener_error_policy,
            )
        return self._model

    def reset(self) -> None:
        """Discard the current model; the next access starts empty."""
        self._model = None


# Global application context (singleton for the desktop app)
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
    return _app_context


def set_app_context(context: AppContext) -> None:
    """Set the global application context."""
    global _app_context
    _app_context = context
