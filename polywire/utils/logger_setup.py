from datetime import datetime, timezone
from pathlib import Path
import sys

from loguru import logger

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"
_COLOR_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | <level>{message}</level>"
)


def setup_logger(
    log_dir: str | Path | None = "logs",
    level: str = "INFO",
    rotation: str = "50 MB",
    retention: str = "30 days",
    enable_colors: bool = True,
) -> Path | None:
    """Route loguru output of a search run to stderr and, optionally, a file.

    Existing sinks are removed so repeated calls do not duplicate lines. The
    file sink is skipped when ``log_dir`` is None; otherwise a timestamped
    ``search_*.log`` is created under it and rotated per ``rotation``.

    Returns the log file path, or None without a file sink.
    """
    logger.remove()

    colorize = enable_colors and sys.stderr.isatty()
    logger.add(
        sys.stderr,
        level=level,
        format=_COLOR_FORMAT if colorize else _FORMAT,
        colorize=colorize,
    )

    if log_dir is None:
        return None

    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    log_file = directory / f"search_{stamp}.log"
    logger.add(
        log_file,
        level=level,
        format=_FORMAT,
        rotation=rotation,
        retention=retention,
        compression="zip",
        encoding="utf-8",
        backtrace=True,
        diagnose=False,
    )
    logger.debug(f"[setup_logger] level={level} file={log_file}")
    return log_file
