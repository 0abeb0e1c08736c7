"""Logger builder pattern"""

from pathlib import Path
from typing import Optional, Union

from tracer_module.core.log_level import LogLevel
from tracer_module.core.logger import Logger
from tracer_module.core.logger_config import LoggerConfig
from tracer_module.handlers.console_handler import ConsoleHandler
from tracer_module.handlers.directory_handler import DirectoryFileHandler
from tracer_module.handlers.file_handler import FileHandler


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._section = "app"
        self._min_level: Union[LogLevel, str] = LogLevel.INFO
        self._indentation = True
        self._force_utc = False
        self._console: Optional[dict] = None
        self._file: Optional[dict] = None
        self._directory: Optional[dict] = None
        self._custom_handlers = []
        self._custom_filters = []

    def with_section(self, section: str) -> "LoggerBuilder":
        """Set logger section."""
        self._section = section
        return self

    def with_level(self, level: Union[LogLevel, str]) -> "LoggerBuilder":
        """Set minimum log level."""
        self._min_level = level
        return self

    def with_indentation(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable continuation line indentation."""
        self._indentation = enabled
        return self

    def with_utc(self, enabled: bool = True) -> "LoggerBuilder":
        """Use UTC timestamps."""
        self._force_utc = enabled
        return self

    def with_console(self, colored: bool = True, use_stderr: bool = False) -> "LoggerBuilder":
        """Enable console output."""
        self._console = {"use_colors": colored, "use_stderr": use_stderr}
        return self

    def with_file(
        self,
        filepath: Union[str, Path],
        append: bool = True,
        lock: bool = True
    ) -> "LoggerBuilder":
        """Enable single-file output."""
        self._file = {"filepath": filepath, "append": append, "lock": lock}
        return self

    def with_directory(
        self,
        directory: Union[str, Path],
        append: bool = True,
        share_file: bool = True,
        use_date: bool = True,
        custom_name: Optional[str] = None
    ) -> "LoggerBuilder":
        """
        Enable output to per-day or ``latest.log`` files in a directory.

        Example:
            logger = (LoggerBuilder()
                .with_section("worker")
                .with_directory("logs", share_file=False, use_date=False)
                .build())
            # writes logs/worker.latest.log
        """
        self._directory = {
            "directory": directory,
            "append": append,
            "share_file": share_file,
            "use_date": use_date,
            "custom_name": custom_name,
        }
        return self

    def add_handler(self, handler) -> "LoggerBuilder":
        """
        Add a custom handler.

        Args:
            handler: Handler instance

        Returns:
            Self for method chaining
        """
        self._custom_handlers.append(handler)
        return self

    def with_filter(self, log_filter) -> "LoggerBuilder":
        """
        Add a log filter.

        Args:
            log_filter: Filter instance (BaseFilter subclass) or callable

        Returns:
            Self for method chaining

        Example:
            from tracer_module.filters import LevelFilter, PatternFilter

            logger = (LoggerBuilder()
                .with_filter(LevelFilter(max_level=LogLevel.WARN))
                .with_filter(PatternFilter(r"heartbeat", exclude=True))
                .build())
        """
        self._custom_filters.append(log_filter)
        return self

    def build_config(self) -> LoggerConfig:
        """Validate and return the configuration collected so far."""
        return LoggerConfig(
            section=self._section,
            min_level=self._min_level,
            indentation=self._indentation,
            force_utc=self._force_utc,
        )

    def build(self) -> Logger:
        """Build and return configured logger."""
        config = self.build_config()
        handlers = []

        try:
            if self._console is not None:
                handlers.append(ConsoleHandler(**self._console))
            if self._file is not None:
                handlers.append(FileHandler(**self._file))
            if self._directory is not None:
                handlers.append(DirectoryFileHandler(**self._directory))
            return Logger.from_config(
                config,
                handlers=handlers + self._custom_handlers,
                filters=self._custom_filters,
            )
        except Exception:
            # Built-in handlers are owned by the builder until attached
            for handler in handlers:
                handler.dispose()
            raise
