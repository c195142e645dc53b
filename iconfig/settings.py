"""
Settings for the iconfig package itself.
"""

from dataclasses import dataclass
from typing import Optional

from iconfig.core.configuration import Configuration

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


def parse_bool(value: str) -> bool:
    """
    Parse a configuration flag.

    Raises
    ------
    ValueError
        If ``value`` is not a recognised boolean spelling
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: '{value}'")


@dataclass
class LoggingSettings:
    """
    Logging configuration for the package.

    Can be read from any configuration section, so the package logging can
    be driven by the same sources as the application::

        config = ConfigurationBuilder().add_environment_variables(prefix='ICONFIG_').build()
        init_logger(LoggingSettings.from_configuration(config.get_section('logging')))
    """

    level: str = "INFO"
    json_logs: bool = False

    def __post_init__(self):
        self.level = self.level.upper()

    @classmethod
    def from_configuration(cls, section: Configuration) -> "LoggingSettings":
        settings = cls()

        level: Optional[str] = section["level"]
        if level:
            settings.level = level.upper()

        json_logs = section["json_logs"] or section["jsonlogs"]
        if json_logs:
            settings.json_logs = parse_bool(json_logs)

        return settings
