"""Logger configuration for FitTrain.

Engine modules log with keyword context (``client_id=...``,
``unknown_days=...``), which loguru stores in ``record["extra"]``. Both
sinks append that context to the message when there is any.
"""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def _with_extra(base: str):
    def formatter(record) -> str:
        if record["extra"]:
            return base + " | {extra}\n{exception}"
        return base + "\n{exception}"

    return formatter


def setup_logger(
    level: str = "INFO",
    log_file: str | Path | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    compression: str | None = "zip",
) -> None:
    """Configure loguru with a console sink and an optional file sink.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to a log file; parent directories are created
        rotation: Log rotation size (e.g., "10 MB", "1 day")
        retention: Log retention period (e.g., "7 days", "1 month")
        compression: Archive format for rotated files, None to keep them plain
    """
    logger.remove()

    logger.add(sys.stderr, format=_with_extra(CONSOLE_FORMAT), level=level, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path,
            format=_with_extra(FILE_FORMAT),
            level=level,
            rotation=rotation,
            retention=retention,
            compression=compression,
            encoding="utf-8",
        )

    logger.debug("Logger initialized", level=level, log_file=str(log_file) if log_file else None)
