"""Logging setup shared by the API app and the CLI.

Both entry points hand over the loaded Settings, so level, log file and file
rotation come from MARATHON_* environment variables or .env.
"""

import sys
from pathlib import Path

from loguru import logger

from marathon_trainer.config.settings import Settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{file.name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(config: Settings, level: str | None = None) -> None:
    """Send loguru output to stderr and, if config.log_file is set, a rotating file.

    Replaces any sinks added earlier, so calling it again reconfigures logging.

    Args:
        config: Loaded settings (log_level, log_file, log_rotation, log_retention)
        level: Overrides config.log_level, e.g. DEBUG for a --debug flag
    """
    level = level or config.log_level
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=config.log_rotation,
            retention=config.log_retention,
            compression="zip",
        )

    logger.debug(f"Logging configured: level={level} file={config.log_file or '-'}")
