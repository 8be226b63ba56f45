"""Kafka writer for normalized observation updates."""

import json
import logging
from typing import Callable, Protocol

from confluent_kafka import KafkaError, Message, Producer

from ..config import KafkaConfig
from ..schemas import NormalizedUpdate

logger = logging.getLogger(__name__)

# Type alias for delivery callback
DeliveryCallback = Callable[[KafkaError | None, Message], None]


class KafkaProducerProtocol(Protocol):
    """Protocol for Kafka producer to allow mocking."""

    def produce(
        self,
        topic: str,
        key: str | bytes | None = None,
        value: str | bytes | None = None,
        callback: DeliveryCallback | None = None,
    ) -> None:
        """Produce a message to a topic."""
        ...

    def flush(self, timeout: float = -1) -> int:
        """Flush pending messages."""
        ...

    def poll(self, timeout: float = 0) -> int:
        """Poll for delivery callbacks."""
        ...


class KafkaWriter:
    """Publishes normalized updates to a Kafka topic."""

    def __init__(
        self,
        config: KafkaConfig,
        producer: KafkaProducerProtocol | None = None,
    ) -> None:
        """Initialize Kafka writer.

        Args:
            config: Kafka configuration settings.
            producer: Optional Kafka producer for testing.
        """
        self.config = config
        self._producer: KafkaProducerProtocol | None = producer

    @property
    def producer(self) -> KafkaProducerProtocol:
        """Lazy-initialize Kafka producer."""
        if self._producer is None:
            self._producer = Producer(  # type: ignore[assignment]
                {
                    "bootstrap.servers": self.config.bootstrap_servers,
                }
            )
        assert self._producer is not None
        return self._producer

    def _delivery_callback(self, err: KafkaError | None, msg: Message) -> None:
        """Callback for Kafka delivery reports."""
        if err is not None:
            logger.error("Kafka delivery failed: %s", err)
        else:
            logger.debug("Delivered to %s [%s]", msg.topic(), msg.partition())

    def publish(self, update: NormalizedUpdate) -> None:
        """Publish update to Kafka topic, keyed by provider and station."""
        self.producer.produce(
            topic=self.config.update_topic,
            key=update.key(),
            value=json.dumps(update.to_message()),
            callback=self._delivery_callback,
        )
        self.producer.poll(0)

    def flush(self, timeout: float = 10.0) -> None:
        """Flush pending Kafka messages.

        Args:
            timeout: Maximum time to wait in seconds.
        """
        remaining = self.producer.flush(timeout)
        if remaining > 0:
            logger.warning("Failed to flush %d Kafka messages", remaining)

    def close(self) -> None:
        """Clean up Kafka producer."""
        if self._producer is not None:
            self.flush()
