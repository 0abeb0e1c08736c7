"""File handler writing every event to one file"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, TYPE_CHECKING, Optional, Union

from tracer_module.errors import ResourceError
from tracer_module.handlers.base_handler import BaseHandler
from tracer_module.handlers.file_lock import lock_file, unlock_file

if TYPE_CHECKING:
    from tracer_module.core.log_event import LogEvent

logger = logging.getLogger(__name__)


class FileHandler(BaseHandler):
    """
    Write events to a single file.

    The file is opened once at construction and stays open, optionally
    under an exclusive OS lock, until the handler is disposed. Each event
    is written as ``generated_message`` plus a newline.
    """

    def __init__(
        self,
        filepath: Union[str, Path],
        append: bool = True,
        lock: bool = True,
        encoding: str = "utf-8"
    ):
        """
        Initialize file handler.

        Args:
            filepath: Path to log file
            append: Keep existing content. If False, the file is emptied
                    once, before the first write.
            lock: Hold an exclusive OS lock on the file
            encoding: File encoding (default: 'utf-8')

        Raises:
            ResourceError: If the file cannot be opened or locked
        """
        self.filepath = Path(filepath)
        self.append = append
        self.lock = lock
        self.encoding = encoding
        self._file: Optional[IO[str]] = None
        self._locked = False
        self._open()

    def _open(self):
        """Open, lock and optionally truncate the log file."""
        try:
            self.filepath.parent.mkdir(parents=True, exist_ok=True)
            handle = open(self.filepath, "a", encoding=self.encoding)
        except OSError as e:
            raise ResourceError(
                f"Cannot open log file {self.filepath}: {e}", self.filepath
            ) from e

        try:
            if self.lock:
                lock_file(handle)
                self._locked = True
            # Truncate only once the lock is held
            if not self.append:
                handle.truncate(0)
        except OSError as e:
            self._locked = False
            handle.close()
            raise ResourceError(
                f"Cannot lock or truncate log file {self.filepath}: {e}", self.filepath
            ) from e

        self._file = handle

    @property
    def file(self) -> Optional[IO[str]]:
        return self._file

    def handle(self, event: "LogEvent") -> None:
        """Append the event's plain message to the file."""
        if self._file is None:
            raise ResourceError(
                f"Log file {self.filepath} is closed", self.filepath
            )
        try:
            self._file.write(event.generated_message + "\n")
            self._file.flush()
        except (OSError, ValueError) as e:
            raise ResourceError(
                f"Cannot write log file {self.filepath}: {e}", self.filepath
            ) from e

    def flush(self) -> None:
        """Flush file buffer."""
        if self._file:
            self._file.flush()

    def _dispose(self) -> None:
        """Unlock and close the file, best effort."""
        handle, self._file = self._file, None
        if handle is None:
            return
        try:
            handle.flush()
            if self._locked:
                unlock_file(handle)
        except OSError as e:
            logger.debug("Failed to release log file %s: %s", self.filepath, e)
        finally:
            self._locked = False
            try:
                handle.close()
            except OSError as e:
                logger.debug("Failed to close log file %s: %s", self.filepath, e)

    def close(self) -> None:
        """Close file; same as dispose."""
        self.dispose()

    def __enter__(self) -> "FileHandler":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.dispose()

    def __repr__(self) -> str:
        return f"FileHandler(filepath='{self.filepath}', append={self.append})"
