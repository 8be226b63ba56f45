"""Error types raised while collecting observations."""


class NOAAObservationsError(Exception):
    """Base class for all errors in this package."""


class TransportError(NOAAObservationsError):
    """The weather provider could not be reached or returned unreadable data."""


class ProviderError(NOAAObservationsError):
    """The weather provider answered with a non-success status."""

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"HTTP {status_code} from {url}")
        self.status_code = status_code
        self.url = url


class MissingPositionError(NOAAObservationsError):
    """No current position is available."""
