"""
Configuration Management Module
Handles loading and validation of environment variables and settings
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from lexutil.modules.char_class import is_print

LOG_FORMATS = ("text", "json")


@dataclass
class LoggingConfig:
    """Configuration for log output"""
    log_level: str
    log_format: str
    log_file: Optional[str]
    use_color: bool


def check_pointer_char(pointer: str) -> None:
    """
    Raise ValueError unless pointer is one visible ASCII character.

    The pointer line is padded to the column with spaces, so the pointer must
    occupy exactly one printable, non-blank position.
    """
    if not isinstance(pointer, str) or len(pointer) != 1 or not is_print(pointer) or pointer == " ":
        raise ValueError(
            f"Diagnostic pointer must be one visible ASCII character, got {pointer!r}"
        )


@dataclass
class DiagnosticsConfig:
    """Configuration for caret diagnostics"""
    pointer_char: str = "^"
    show_line_numbers: bool = True

    def __post_init__(self):
        check_pointer_char(self.pointer_char)


class Config:
    """Main configuration class"""

    def __init__(self, env_file: str = ".env"):
        """
        Initialize configuration from environment file

        Args:
            env_file: Path to environment file (default: .env). A missing
                      file is not an error; process environment and
                      defaults apply.
        """
        load_dotenv(env_file)

        self.logging = self._load_logging_config()
        self.diagnostics = self._load_diagnostics_config()

    def _load_logging_config(self) -> LoggingConfig:
        """Load logging configuration"""
        return LoggingConfig(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "text").lower(),
            log_file=os.getenv("LOG_FILE") or None,
            use_color=self._get_bool("LOG_COLOR", True)
        )

    def _load_diagnostics_config(self) -> DiagnosticsConfig:
        """Load diagnostics configuration"""
        return DiagnosticsConfig(
            pointer_char=os.getenv("DIAG_POINTER", "^"),
            show_line_numbers=self._get_bool("DIAG_LINE_NUMBERS", True)
        )

    @staticmethod
    def _get_bool(key: str, default: bool = False) -> bool:
        """Convert environment variable to boolean"""
        value = os.getenv(key, str(default)).lower()
        return value in ('true', '1', 'yes', 'on')

    def validate(self) -> bool:
        """
        Validate configuration

        Returns:
            True if configuration is valid

        Raises:
            ValueError: If configuration is invalid
        """
        if self.logging.log_format not in LOG_FORMATS:
            raise ValueError(
                f"Unknown log format '{self.logging.log_format}'; "
                f"expected one of {', '.join(LOG_FORMATS)}"
            )

        if str(self.logging.log_level).upper() not in logging._nameToLevel:
            raise ValueError(f"Unknown log level '{self.logging.log_level}'")

        check_pointer_char(self.diagnostics.pointer_char)

        return True
