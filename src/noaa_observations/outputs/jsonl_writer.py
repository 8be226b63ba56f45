"""JSON-lines writer for normalized observation updates."""

import json
import logging
from pathlib import Path
from typing import TextIO

from ..config import JSONLConfig
from ..schemas import NormalizedUpdate

logger = logging.getLogger(__name__)


class JSONLinesWriter:
    """Appends one delta message per line to a file."""

    def __init__(self, config: JSONLConfig) -> None:
        """Initialize JSON-lines writer.

        Args:
            config: JSON-lines configuration settings.
        """
        self.config = config
        self.path = Path(config.path)
        self._file: TextIO | None = None

    def _ensure_open(self) -> TextIO:
        """Open the output file for appending, creating parent directories."""
        if self._file is None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._file = self.path.open("a", encoding="utf-8")
            logger.debug("Opened %s for appending", self.path)
        return self._file

    def publish(self, update: NormalizedUpdate) -> None:
        """Append update as a single JSON line.

        Args:
            update: Update to write.
        """
        f = self._ensure_open()
        f.write(json.dumps(update.to_message()) + "\n")

    def flush(self) -> None:
        """Flush buffered lines to disk."""
        if self._file is not None:
            self._file.flush()

    def close(self) -> None:
        """Close the output file."""
        if self._file is not None:
            self._file.close()
            self._file = None
