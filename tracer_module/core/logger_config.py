"""
Logger configuration management
"""

import re
from dataclasses import dataclass
from typing import Union

from tracer_module.core.log_level import LogLevel
from tracer_module.errors import ConfigurationError

SECTION_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def validate_section(section: str) -> str:
    """
    Trim and validate a section identifier.

    Returns:
        The trimmed section

    Raises:
        ConfigurationError: If the section is empty or not an identifier
    """
    if not isinstance(section, str):
        raise ConfigurationError(f"section must be a string, got {type(section).__name__}")
    section = section.strip()
    if not section:
        raise ConfigurationError("section must not be empty")
    if not SECTION_PATTERN.fullmatch(section):
        raise ConfigurationError(
            f"Invalid section {section!r}: must match {SECTION_PATTERN.pattern}"
        )
    return section


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    ``force_utc`` is fixed for a logger's lifetime; ``min_level`` and
    ``indentation`` can be changed on the logger afterwards.
    """

    section: str = "app"
    min_level: Union[LogLevel, str] = LogLevel.INFO
    indentation: bool = True
    force_utc: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.section = validate_section(self.section)

        # Accept level names, e.g. from environment or config files
        if isinstance(self.min_level, str):
            try:
                self.min_level = LogLevel.from_string(self.min_level)
            except ValueError as e:
                raise ConfigurationError(str(e)) from e
        elif not isinstance(self.min_level, LogLevel):
            raise ConfigurationError("min_level must be LogLevel or level name")

    @classmethod
    def default(cls, section: str = "app") -> "LoggerConfig":
        """Create default configuration."""
        return cls(section=section)

    @classmethod
    def debug_config(cls, section: str = "app") -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(section=section, min_level=LogLevel.DEBUG)

    @classmethod
    def production_config(cls, section: str = "app") -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            section=section,
            min_level=LogLevel.WARN,
            force_utc=True,
        )
