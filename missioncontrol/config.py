"""
Mission Control Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from typing import Optional

from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes", "on"}


def _env_optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


class Config:
    """Application configuration loaded from environment variables."""

    # Pathfinding
    # Upper bound on A* node expansions; the map itself is unbounded.
    MAX_SEARCH_STEPS: int = int(os.getenv("MISSIONCONTROL_MAX_SEARCH_STEPS", "250000"))

    # Obstacles
    # Seed for quicksand splatter generation when no rng is injected.
    QUICKSAND_SEED: Optional[int] = _env_optional_int("MISSIONCONTROL_QUICKSAND_SEED")

    # Logging
    VERBOSE: bool = _env_flag("MISSIONCONTROL_VERBOSE")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.MAX_SEARCH_STEPS <= 0:
            raise ValueError(
                "MISSIONCONTROL_MAX_SEARCH_STEPS must be a positive integer "
                f"(got {cls.MAX_SEARCH_STEPS})."
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        seed = cls.QUICKSAND_SEED if cls.QUICKSAND_SEED is not None else "random"
        lines = [
            "Mission Control Configuration:",
            f"  Max Search Steps: {cls.MAX_SEARCH_STEPS}",
            f"  Quicksand Seed: {seed}",
            f"  Verbose: {cls.VERBOSE}",
        ]
        return "\n".join(lines)
