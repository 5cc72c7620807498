"""Shared configuration for the freehand stroke pipeline.

This module centralizes the default option values and geometric constants
used by:
    - freehand.domain.options (StrokeOptions defaults)
    - freehand.stroke (normalizer, resampler, tracer)
    - freehand.cli (command-line defaults and logging setup)

Having these values in one place keeps the library, the service layer and
the command line consistent.
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path

logger = logging.getLogger(__name__)

# Default stroke options
DEFAULT_SIZE = 8.0
DEFAULT_THINNING = 0.5
DEFAULT_SMOOTHING = 0.5
DEFAULT_STREAMLINE = 0.5
DEFAULT_SIMULATE_PRESSURE = True

# Pressure assigned to points that do not report one
DEFAULT_PRESSURE = 0.5

# Thinning magnitude is kept inside this band so widths never reach zero
MIN_THINNING = 0.05
MAX_THINNING = 0.95

# Number of steps in a half-turn cap (start, end and dot caps)
CAP_STEPS = 10
# Number of steps in a sharp-corner cap
CORNER_STEPS = 4

# A stroke shorter than size * MIN_LENGTH_RATIO is drawn as a dot
MIN_LENGTH_RATIO = 0.25

# Angular deltas above these thresholds are sharp / dull turns
SHARP_TURN = math.pi / 2
DULL_TURN = SHARP_TURN / 2

# Options used by the drawing demo application
APP_DEFAULTS = {
    'size': 16,
    'thinning': 0.75,
    'smoothing': 0.5,
    'streamline': 0.5,
    'simulate_pressure': True,
    'clip': False,
    'easing': 'linear',
}

# Decimal places used when writing SVG path data
PATH_PRECISION = 2


# Log record layout for the command line and embedding applications
LOG_FORMAT = '%(asctime)s %(levelname)-8s [%(name)s] %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Third-party loggers kept at WARNING whatever the requested level
QUIET_LOGGERS = ('shapely',)


def _log_handlers(log_file: str | None) -> list[logging.Handler]:
    """Stderr handler, plus a file handler when a log file is given."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
    return handlers


def configure_logging(level: str = 'INFO', log_file: str | None = None) -> None:
    """Send log records from every freehand module to stderr and a file.

    Library modules only create ``logging.getLogger(__name__)`` loggers;
    applications call this once at startup. Any handlers already on the
    root logger are replaced.

    Args:
        level: Level name such as 'DEBUG' or 'warning'. Unknown names
            mean INFO.
        log_file: Optional file that receives a copy of every record.
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    formatter = logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)
    handlers = _log_handlers(log_file)
    for handler in handlers:
        handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers[:] = handlers
    root.setLevel(log_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.debug("Logging to %s at %s", log_file or 'stderr', logging.getLevelName(log_level))


def load_options(path: str | Path, base=None):
    """Load stroke options from a JSON file.

    The file holds a single JSON object. Keys may be snake_case or the
    camelCase names used by browser-side settings (``simulatePressure``).
    Missing keys keep the values of ``base`` and unknown keys are ignored.

    Args:
        path: Path to the JSON options file.
        base: StrokeOptions to overlay onto. Defaults to StrokeOptions().

    Returns:
        A StrokeOptions instance.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is not valid JSON or not a JSON object.
    """
    from .domain.options import StrokeOptions  # Local import to avoid cycles

    with open(path, encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Options file {path} must contain a JSON object")

    logger.debug("Loaded options from %s: %s", path, sorted(data))
    return StrokeOptions.from_dict(data, base=base)
