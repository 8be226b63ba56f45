"""Output manager that routes updates to enabled writers."""

import logging
from typing import Sequence

from ..config import JSONLConfig, KafkaConfig
from ..schemas import NormalizedUpdate
from .jsonl_writer import JSONLinesWriter
from .kafka_writer import KafkaWriter
from .protocols import MessageBus

logger = logging.getLogger(__name__)


class OutputManager:
    """Manages multiple output writers (JSON lines, Kafka).

    Routes publish calls to all enabled outputs.
    """

    def __init__(
        self,
        jsonl_config: JSONLConfig | None = None,
        kafka_config: KafkaConfig | None = None,
        writers: Sequence[MessageBus] | None = None,
    ) -> None:
        """Initialize output manager.

        Args:
            jsonl_config: JSON-lines configuration (creates JSONLinesWriter if enabled).
            kafka_config: Kafka configuration (creates KafkaWriter if enabled).
            writers: Optional list of writers for testing (overrides configs).
        """
        self._writers: list[MessageBus] = []

        if writers is not None:
            self._writers = list(writers)
        else:
            if jsonl_config and jsonl_config.enabled:
                self._writers.append(JSONLinesWriter(jsonl_config))
                logger.info("JSON-lines output enabled: %s", jsonl_config.path)

            if kafka_config and kafka_config.enabled:
                self._writers.append(KafkaWriter(kafka_config))
                logger.info("Kafka output enabled: %s", kafka_config.bootstrap_servers)

        if not self._writers:
            logger.warning("No output writers enabled")

    @property
    def writers(self) -> list[MessageBus]:
        """Get list of active writers."""
        return self._writers

    def publish(self, update: NormalizedUpdate) -> None:
        """Publish update to all enabled outputs.

        A failing writer does not keep the update from the others.

        Args:
            update: Update to publish.

        Raises:
            Exception: The last writer error, if no writer accepted the update.
        """
        errors: list[Exception] = []
        for writer in self._writers:
            try:
                writer.publish(update)
            except Exception as e:
                logger.error(
                    "%s failed to publish %s: %s", type(writer).__name__, update.key(), e
                )
                errors.append(e)

        if errors and len(errors) == len(self._writers):
            raise errors[-1]

    def flush(self) -> None:
        """Flush all output buffers."""
        for writer in self._writers:
            writer.flush()

    def close(self) -> None:
        """Close all writers."""
        for writer in self._writers:
            writer.close()
