"""Alert publisher module for pub/sub user notifications."""

import logging

from pubsub import pub

from ..models.alerts import Alert, AlertKind

logger = logging.getLogger(__name__)

ALERT_TOPIC = "app.alert"


class AlertPublisher:
    """Publishes user-facing alerts using pubsub.pub."""

    def __init__(self, topic: str = ALERT_TOPIC):
        """Initialize alert publisher.

        Args:
            topic: Pub/sub topic name for alerts
        """
        self.topic = topic
        logger.info(f"AlertPublisher initialized with topic: {topic}")

    def publish(self, alert: Alert) -> None:
        """Publish an alert to the pub/sub topic."""
        pub.sendMessage(self.topic, alert=alert)
        logger.debug(f"Published {alert.kind.value} alert: {alert.title}")

    def info(self, title: str, message: str) -> None:
        self.publish(Alert(AlertKind.INFO, title, message))

    def configuration_error(self, title: str, message: str) -> None:
        self.publish(Alert(AlertKind.CONFIGURATION, title, message))

    def validation_error(self, title: str, message: str) -> None:
        self.publish(Alert(AlertKind.VALIDATION, title, message))

    def remote_error(self, title: str, body: str) -> None:
        self.publish(Alert(AlertKind.REMOTE, title, body))

    def transport_error(self, title: str, message: str) -> None:
        self.publish(Alert(AlertKind.TRANSPORT, title, message))
