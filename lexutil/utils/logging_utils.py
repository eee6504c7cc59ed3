import copy
import logging
import sys
from pathlib import Path
from typing import List

from lexutil.utils.colors import Colors
from lexutil.utils.config import LoggingConfig
from lexutil.utils.structured_logging import JSONFormatter

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ColoredFormatter(logging.Formatter):
    """
    Custom formatter to add colors to log levels and caret diagnostics.
    The pointer line of a diagnostic is highlighted so it stands out from
    the rendered source line above it.
    """

    LEVEL_COLORS = {
        logging.DEBUG: Colors.GREY,
        logging.INFO: Colors.BLUE,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED
    }

    def format(self, record):
        # Create a copy of the record to avoid side effects on other handlers
        # (e.g., file logging shouldn't have ANSI codes)
        record = copy.copy(record)

        # Colorize level name
        color = self.LEVEL_COLORS.get(record.levelno, Colors.RESET)
        record.levelname = f"{color}{record.levelname}{Colors.RESET}"

        # Diagnostics carry their location in extra_fields; the last line of
        # the message is the pointer line
        extra = getattr(record, "extra_fields", None)
        if isinstance(extra, dict) and "column" in extra:
            message = record.getMessage()
            head, sep, pointer_line = message.rpartition("\n")
            if sep:
                record.msg = head + sep + Colors.colorize(
                    pointer_line, Colors.BOLD + color
                )
                record.args = ()

        return super().format(record)


def _resolve_level(level_name: str) -> int:
    return logging._nameToLevel.get(str(level_name).upper(), logging.INFO)


def setup_logging(config: LoggingConfig) -> None:
    """
    Setup logging configuration

    Installs a stdout handler (colored, plain or JSON) and, when log_file is
    set, a file handler that never receives ANSI codes.

    Args:
        config: Logging section of Config
    """
    json_output = config.log_format == "json"

    stream_handler = logging.StreamHandler(sys.stdout)
    if json_output:
        stream_handler.setFormatter(JSONFormatter())
    elif config.use_color:
        stream_handler.setFormatter(ColoredFormatter(LOG_FORMAT))
    else:
        stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    handlers: List[logging.Handler] = [stream_handler]

    if config.log_file:
        # Create logs directory if needed
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(config.log_file)
        file_handler.setFormatter(
            JSONFormatter() if json_output else logging.Formatter(LOG_FORMAT)
        )
        handlers.append(file_handler)

    level_name = str(config.log_level).upper()
    logging.basicConfig(level=_resolve_level(level_name), handlers=handlers, force=True)

    if level_name not in logging._nameToLevel:
        logging.getLogger("lexutil").warning(
            "Invalid log level '%s'; defaulting to INFO",
            config.log_level
        )
