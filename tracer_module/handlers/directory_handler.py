"""Directory-based file handler with per-day or fixed file names"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from tracer_module.errors import ConfigurationError, ResourceError
from tracer_module.handlers.base_handler import BaseHandler

if TYPE_CHECKING:
    from tracer_module.core.log_event import LogEvent

LATEST_NAME = "latest.log"
DATE_FORMAT = "%Y-%m-%d"


class DirectoryFileHandler(BaseHandler):
    """
    Write events to log files inside a directory.

    With ``use_date`` a file named ``yyyy-MM-dd.log`` is used per calendar
    day of the event timestamp, otherwise ``latest.log``. Unless
    ``share_file`` is set, the name gets the section as prefix, e.g.
    ``app.latest.log``. ``custom_name`` overrides all of this.
    """

    def __init__(
        self,
        directory: Union[str, Path],
        append: bool = True,
        share_file: bool = True,
        use_date: bool = True,
        custom_name: Optional[str] = None,
        encoding: str = "utf-8"
    ):
        """
        Initialize directory file handler.

        Args:
            directory: Directory to create the log files in
            append: Keep existing content. If False, the first file written
                    by this handler is emptied once.
            share_file: Share one file between all sections
            use_date: Name files after the event's date
            custom_name: Fixed file name, including its extension
            encoding: File encoding (default: 'utf-8')

        Raises:
            ConfigurationError: If share_file is set while append is not
            ResourceError: If the directory cannot be created
        """
        if share_file and not append:
            raise ConfigurationError(
                "A shared log file cannot be truncated; use append=True "
                "or share_file=False"
            )

        self.directory = Path(directory)
        self.append = append
        self.share_file = share_file
        self.use_date = use_date
        self.custom_name = custom_name
        self.encoding = encoding
        self._handled_overwrite = False

        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ResourceError(
                f"Cannot create log directory {self.directory}: {e}", self.directory
            ) from e

    def file_name(self, event: "LogEvent") -> str:
        """Name of the file ``event`` is written to."""
        if self.custom_name is not None:
            return self.custom_name

        name = LATEST_NAME
        if self.use_date:
            name = f"{event.timestamp.strftime(DATE_FORMAT)}.log"
        if not self.share_file:
            name = f"{event.section}.{name}"
        return name

    def file_path(self, event: "LogEvent") -> Path:
        return self.directory / self.file_name(event)

    def handle(self, event: "LogEvent") -> None:
        """Append the event's plain message to its file."""
        path = self.file_path(event)
        mode = "a"
        if not self._handled_overwrite and not self.append:
            mode = "w"

        try:
            with open(path, mode, encoding=self.encoding) as f:
                f.write(event.generated_message + "\n")
        except OSError as e:
            raise ResourceError(f"Cannot write log file {path}: {e}", path) from e

        # Truncation counts as done only once a write went through
        self._handled_overwrite = True

    def __repr__(self) -> str:
        return f"DirectoryFileHandler(directory='{self.directory}')"
