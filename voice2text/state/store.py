"""Application store holding the single AppState."""

import logging
from typing import Any, Optional

from pubsub import pub

from ..models.state import AppState
from .reducer import reduce

logger = logging.getLogger(__name__)

STATE_TOPIC = "app.state"


class AppStore:
    """Owns the current AppState and publishes every transition."""

    def __init__(self, initial_state: Optional[AppState] = None, topic: str = STATE_TOPIC):
        """Initialize the store.

        Args:
            initial_state: Starting state (defaults to the login screen)
            topic: Pub/sub topic that receives every new state
        """
        self._state = initial_state or AppState()
        self.topic = topic
        logger.info(f"AppStore initialized on screen: {self._state.screen.value}")

    @property
    def state(self) -> AppState:
        return self._state

    def dispatch(self, action: Any) -> AppState:
        """Apply an action and publish the resulting state.

        Args:
            action: One of the dataclasses in models.actions

        Returns:
            The new state
        """
        previous = self._state
        self._state = reduce(previous, action)
        logger.debug(f"Dispatched {type(action).__name__}: screen {previous.screen.value} -> {self._state.screen.value}")
        pub.sendMessage(self.topic, state=self._state, action=action)
        return self._state
