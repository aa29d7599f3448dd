"""This module configures logging for the extended package."""

import logging
from logging import Logger, StreamHandler

xlogger: Logger = logging.getLogger("extended_logger")
xlogger.setLevel(logging.INFO)

# Colors keyed by level number
LEVEL_COLORS: dict[int, str] = {
    logging.DEBUG: "\033[94m",  # Blue
    logging.INFO: "\033[92m",  # Green
    logging.WARNING: "\033[93m",  # Yellow
    logging.ERROR: "\033[91m",  # Red
    logging.CRITICAL: "\033[41m" + "\033[97m",  # Red background with white text
}
RESET_COLOR: str = "\033[0m"


class ColoredFormatter(logging.Formatter):
    """Colors each formatted line by level without touching the record itself."""

    def format(self, record: logging.LogRecord) -> str:
        line: str = super().format(record)
        color: str | None = LEVEL_COLORS.get(record.levelno)
        if color is None:
            return line
        return color + line + RESET_COLOR


def set_log_level(level: str) -> None:
    xlogger.setLevel(logging.getLevelName(level))


console_handler: StreamHandler = logging.StreamHandler()
console_handler.setFormatter(
    ColoredFormatter(
        fmt="%(asctime)s.%(msecs)03d - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
)
xlogger.addHandler(console_handler)
