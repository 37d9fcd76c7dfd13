"""
Package settings and configuration.

This module contains defaults for window hulls and series aggregation, and
the logging configuration used by scripts and notebooks.
For algorithmic constants, see gazehull.constants module.
"""

import logging
from typing import Dict, Any, Optional

# Import algorithmic constants from the constants module
from gazehull.constants import DEFAULT_WINDOW_PERIOD, DEFAULT_WINDOW_TIMESTEP

# Package information
APP_NAME = "gazehull"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "Convex hull coverage metrics over windows of timestamped points"

# Stimulus defaults (0 means coverage is only defined for area-less hulls)
DEFAULT_STIMULUS_WIDTH = 0
DEFAULT_STIMULUS_HEIGHT = 0

# Series aggregation defaults
DEFAULT_PERIOD = DEFAULT_WINDOW_PERIOD  # From gazehull.constants
DEFAULT_TIMESTEP = DEFAULT_WINDOW_TIMESTEP  # From gazehull.constants
DEFAULT_INCLUDE_INCOMPLETE = False  # Skip windows shorter than a full period

# Logging configuration
LOGGING_CONFIG = {
    "level": logging.INFO,
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


def configure_logging(level: Optional[int] = None) -> None:
    """
    Apply LOGGING_CONFIG to the root logger.

    Args:
        level: Logging level overriding the configured one
    """
    config = dict(LOGGING_CONFIG)
    if level is not None:
        config["level"] = level
    logging.basicConfig(handlers=[logging.StreamHandler()], **config)


# =============== Configuration Classes ===============
# These classes provide typed access to configuration sections

class HullConfig:
    """Configuration parameters for window hulls and series aggregation."""
    WIDTH = DEFAULT_STIMULUS_WIDTH
    HEIGHT = DEFAULT_STIMULUS_HEIGHT
    PERIOD = DEFAULT_PERIOD
    TIMESTEP = DEFAULT_TIMESTEP
    INCLUDE_INCOMPLETE = DEFAULT_INCLUDE_INCOMPLETE

    @classmethod
    def as_dict(cls) -> Dict[str, Any]:
        """Get hull configuration as a dictionary."""
        return {
            'width': cls.WIDTH,
            'height': cls.HEIGHT,
            'period': cls.PERIOD,
            'timestep': cls.TIMESTEP,
            'include_incomplete': cls.INCLUDE_INCOMPLETE,
        }
