"""Logging utilities for Mission Control.

Provides color-coded output to distinguish geometry work, search progress and
failures. Library code only logs through ``log_debug`` so that queries stay
silent unless ``MISSIONCONTROL_VERBOSE`` is enabled.
"""

import os
from enum import Enum

from .config import Config


class Color(Enum):
    """ANSI color codes for terminal output."""

    # Colors for operation types
    BLUE = "\033[94m"      # Geometry (footprints, grid assignment)
    YELLOW = "\033[93m"    # Search progress
    RED = "\033[91m"       # Errors and rejected input
    GREEN = "\033[92m"     # Path found
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


# Markers for operation types (color-blind accessible)
LOG_TAG_GEOMETRY = "[•]"
LOG_TAG_SEARCH = "[A*]"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text if MISSIONCONTROL_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("MISSIONCONTROL_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def verbose_enabled() -> bool:
    """Return True when diagnostic output was requested."""
    return Config.VERBOSE


def log_debug(message: str, color: Color = Color.CYAN) -> None:
    """Print a diagnostic line only when verbose output is enabled."""
    if not verbose_enabled():
        return
    print(colored(message, color))
