"""Normalized update schema published to the message bus."""

from typing import Any

from pydantic import BaseModel


class PathValue(BaseModel):
    """A single leaf value addressed by a dot-delimited path."""

    path: str
    value: Any = None


class NormalizedUpdate(BaseModel):
    """Normalized values of one station observation.

    Key format: `{provider}.{station_id}`
    """

    source: str
    provider: str
    station_id: str
    values: list[PathValue]

    def key(self) -> str:
        """Generate message key for this update."""
        return f"{self.provider}.{self.station_id}"

    def to_message(self) -> dict[str, Any]:
        """Render the update as a delta message."""
        return {
            "updates": [
                {
                    "source": {"label": self.source},
                    "values": [v.model_dump() for v in self.values],
                }
            ]
        }
