"""Protocols for message bus outputs."""

from typing import Protocol

from ..schemas import NormalizedUpdate


class MessageBus(Protocol):
    """Protocol for anything normalized updates can be published to."""

    def publish(self, update: NormalizedUpdate) -> None:
        """Publish an update. No delivery confirmation is returned."""
        ...

    def flush(self) -> None:
        """Flush any buffered data."""
        ...

    def close(self) -> None:
        """Close the output and clean up resources."""
        ...
