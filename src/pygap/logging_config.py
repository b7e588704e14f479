"""
Logging configuration for PyGap.

All modules obtain their logger through get_logger() so that output is
routed through the single 'pygap' logger hierarchy.
"""
import logging
from pathlib import Path
from typing import Optional, Union

__all__ = [
    'LOGGER_NAME',
    'setup_logging',
    'get_logger',
    'log_year_summary',
    'log_run_summary',
]

LOGGER_NAME = 'pygap'

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Union[int, str] = logging.INFO,
                  log_file: Optional[Union[str, Path]] = None,
                  fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """Configure the package logger.

    Replaces any handlers previously installed by this function, so calling
    it twice does not duplicate output.

    Args:
        level: Logging level (name or number)
        log_file: Optional path of a file that also receives log records
        fmt: Log record format string

    Returns:
        The configured 'pygap' logger
    """
    if isinstance(level, str):
        level_number = logging.getLevelName(level.strip().upper())
        if not isinstance(level_number, int):
            raise ValueError(f"Unknown log level: '{level}'")
        level = level_number

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, '_pygap_handler', False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(fmt)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    stream_handler._pygap_handler = True
    logger.addHandler(stream_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setFormatter(formatter)
        file_handler._pygap_handler = True
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the package hierarchy.

    Args:
        name: Module name, usually __name__

    Returns:
        Logger instance
    """
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + '.'):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def log_year_summary(logger: logging.Logger, year: int, plot_index: int,
                     recruited: int, died: int, trees: int) -> None:
    """Log the demographic events of one plot-year at DEBUG level."""
    logger.debug(
        f"Year {year} plot {plot_index}: +{recruited} recruited, "
        f"-{died} died, {trees} live trees"
    )


def log_run_summary(logger: logging.Logger, years: int, n_plots: int,
                    mean_trees: float, mean_weight: float) -> None:
    """Log the end-of-run ensemble summary at INFO level."""
    logger.info(
        f"Simulated {years} years on {n_plots} plots: "
        f"mean {mean_trees:.1f} trees, mean weight {mean_weight:.3f}"
    )
