"""
Configuration settings for sequtils.

**Conceptual**: This module provides strongly-typed configuration objects that
load from environment variables (via .env files). Settings are validated when
they are constructed, so a bad value fails fast with a clear message instead
of surfacing later as odd random output.

The only configurable concern is the default random source used by the
sampling helpers in sequtils.utils.randomness:
  - which backend generates uniform floats (numpy or Python's random module);
  - an optional seed, so whole programs can be made reproducible without
    threading a source through every call.

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)


RANDOM_BACKENDS = ("numpy", "python")


@dataclass(frozen=True)
class RandomSettings:
    """
    Configuration for the default random source.

    Attributes:
        backend: "numpy" (numpy.random.default_rng) or "python" (random.Random).
                 Defaults to "numpy".
        seed: Optional non-negative integer seed. None means the backend seeds
              itself from OS entropy (non-reproducible).
    """
    backend: str = "numpy"
    seed: Optional[int] = None

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.backend not in RANDOM_BACKENDS:
            raise ValueError(
                f"SEQUTILS_RANDOM_BACKEND must be one of {', '.join(RANDOM_BACKENDS)}, "
                f"got: {self.backend}"
            )
        if self.seed is not None and self.seed < 0:
            raise ValueError(
                f"SEQUTILS_RANDOM_SEED must be a non-negative integer, got: {self.seed}"
            )

    @classmethod
    def from_env(cls) -> "RandomSettings":
        """
        Load random settings from environment variables.

        **Environment variables**:
          - SEQUTILS_RANDOM_BACKEND (optional): "numpy" or "python".
            Defaults to "numpy" if not set.
          - SEQUTILS_RANDOM_SEED (optional): integer seed.
            Unset or empty means unseeded.
        Values are also read from a .env file found in the current working
        directory or one of its parents; variables already set take precedence.

        Returns:
            RandomSettings object with values loaded from environment.

        Raises:
            ValueError: If the backend is unknown or the seed is not a
                        non-negative integer.

        Usage example:
            >>> # In .env file:
            >>> # SEQUTILS_RANDOM_SEED=1234
            >>>
            >>> settings = RandomSettings.from_env()
            >>> print(settings.seed)  # 1234
        """
        # .env in the working directory (or a parent); real environment variables win
        dotenv_path = find_dotenv(usecwd=True)
        if dotenv_path:
            load_dotenv(dotenv_path)

        backend = os.getenv("SEQUTILS_RANDOM_BACKEND", "numpy").strip().lower() or "numpy"
        seed_str = os.getenv("SEQUTILS_RANDOM_SEED", "").strip()

        seed = None
        if seed_str:
            try:
                seed = int(seed_str)
            except ValueError:
                raise ValueError(
                    f"SEQUTILS_RANDOM_SEED must be an integer, got: {seed_str}"
                )

        return cls(backend=backend, seed=seed)


@dataclass(frozen=True)
class Settings:
    """
    Global settings for sequtils.

    Aggregates all subsystem settings so there is a single entrypoint for
    configuration. Tests can construct Settings(random=RandomSettings(...))
    directly instead of going through the environment.

    Attributes:
        random: Settings for the default random source.
    """
    random: RandomSettings = field(default_factory=RandomSettings)

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load global settings from environment variables.

        Returns:
            Settings object with all subsystem settings loaded from environment.

        Raises:
            ValueError: If any subsystem setting is invalid.
        """
        return cls(random=RandomSettings.from_env())


# Lazily loaded on first get_settings() call. For testing, inject custom settings
# or call reset_settings() after changing the environment.
_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from the environment on first call, then cached for
    reuse. Code that needs different settings (tests, embedding applications)
    should build its own Settings object and pass the relevant pieces in
    explicitly.

    Returns:
        Global Settings singleton.

    Raises:
        ValueError: If the environment holds invalid settings.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()
        logger.debug(
            "Loaded settings: random backend=%s seed=%s",
            _default_settings.random.backend,
            _default_settings.random.seed,
        )

    return _default_settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _default_settings
    _default_settings = None
