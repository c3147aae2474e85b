"""Logging configuration for termkanban."""

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path


def setup_logging(
    verbose: int = 0,
    log_file: Path | None = None,
    board_file: Path | None = None,
) -> None:
    """Configure logging based on verbosity level and optional file output.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG)
        log_file: Optional path to write logs to file
        board_file: Board file reported in the startup banner
    """
    if verbose == 0 and log_file is None:
        return

    # A log file alone logs at INFO
    level = logging.DEBUG if verbose >= 2 else logging.INFO

    logger = logging.getLogger("termkanban")
    logger.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # stderr shares the terminal with the TUI, so only when asked for
    if verbose > 0:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(level)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
    board = board_file.resolve() if board_file is not None else "-"
    logger.info("")
    logger.info("=" * 60)
    logger.info(
        "termkanban starting | %s | level=%s | board=%s",
        timestamp,
        logging.getLevelName(level),
        board,
    )
    logger.info("=" * 60)
