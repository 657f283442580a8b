"""
Logging Configuration
Sets up the package logger so log lines go through the same rich console as
the live table instead of tearing it.
"""
import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None,
                  console: Optional[Console] = None) -> logging.Logger:
    """
    Configures the logger for the 'vatsim_online' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also save logs to a file.
        console: The rich console the dashboard renders to.
    """
    logger = logging.getLogger("vatsim_online")
    logger.setLevel(level)
    logger.propagate = False

    # Avoid duplicate handlers when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_file:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
