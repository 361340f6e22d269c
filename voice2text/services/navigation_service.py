"""Login stub and screen navigation."""

import logging
from typing import Optional

from ..models.actions import LoggedIn, LoggedOut, LoginFormChanged, Navigated
from ..models.state import Screen
from ..state.store import AppStore
from .alert_publisher import AlertPublisher

logger = logging.getLogger(__name__)


class NavigationService:
    """Moves the app between screens.

    Login only checks that email and password are non-empty. It is a
    placeholder, not a security boundary.
    """

    def __init__(self, store: AppStore, alerts: AlertPublisher):
        self.store = store
        self.alerts = alerts

    def update_login_form(self, email: Optional[str] = None, password: Optional[str] = None) -> None:
        self.store.dispatch(LoginFormChanged(email=email, password=password))

    def login(self) -> bool:
        """Log in with the current form values.

        Returns:
            True if the dashboard is now showing
        """
        form = self.store.state.login
        if not form.email or not form.password:
            self.alerts.validation_error("Login", "Enter email and password (any values for demo).")
            return False

        self.store.dispatch(LoggedIn())
        logger.info(f"Logged in as {form.email}")
        return True

    def logout(self) -> None:
        self.store.dispatch(LoggedOut())
        logger.info("Logged out")

    def navigate(self, screen: Screen) -> bool:
        """Switch to screen.

        Returns:
            True if the screen changed
        """
        state = self.store.state
        if screen is not Screen.LOGIN and not state.is_authenticated:
            self.alerts.validation_error("Login", "Log in before opening other screens.")
            return False

        self.store.dispatch(Navigated(screen))
        return self.store.state.screen is screen
