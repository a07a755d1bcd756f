"""
This file configures the logger for the application.
"""

import logging


class ColoredFormatter(logging.Formatter):
    """
    Formatter that tints each log line with the ANSI colour of its level.

    Alerts raised by the engine are logged at WARNING or above, so a dry run
    on a terminal shows them in yellow or red.
    """

    COLORS = {
        "DEBUG": "\033[0;96m",  # Cyan
        "INFO": "",
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[1;31m",  # Bold Red
    }
    RESET = "\033[0m"

    def format(self, record):
        log_color = self.COLORS.get(record.levelname, self.RESET)
        message = super().format(record)
        return f"{log_color}{message}{self.RESET}"


def config_logger(debug: bool = False) -> None:
    """
    Route the root logger through a single coloured stream handler.

    Args:
        debug (bool, optional): If True, log at DEBUG level; otherwise INFO.
    """
    logger = logging.getLogger()

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(
        ColoredFormatter("[%(asctime)s] %(levelname)s %(module)s: %(message)s")
    )

    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.addHandler(handler)
