"""
Generation configuration.

Holds the knobs consumers of the engine share: the seed used to build the
default random source, the default size for sized generators and the default
number of samples drawn by the sampling utilities.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

from ..utilities.constants import (
    DEFAULT_SAMPLE_COUNT,
    DEFAULT_SIZE,
    ENV_SAMPLES,
    ENV_SEED,
    ENV_SIZE,
)
from ..utilities.validators import validate_non_negative, validate_positive

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationConfig:
    """Immutable generation settings."""

    seed: int | None = None
    default_size: int = DEFAULT_SIZE
    sample_count: int = DEFAULT_SAMPLE_COUNT

    def __post_init__(self) -> None:
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise TypeError(f"Seed must be an integer or None, got {type(self.seed).__name__}")
        validate_non_negative(self.default_size, "Default size")
        validate_positive(self.sample_count, "Sample count")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GenerationConfig:
        """
        Build a config from environment variables.

        Unset variables keep their defaults; malformed values raise ValueError.
        """
        env = os.environ if environ is None else environ
        config = cls(
            seed=_read_int(env, ENV_SEED),
            default_size=_read_int(env, ENV_SIZE, DEFAULT_SIZE),
            sample_count=_read_int(env, ENV_SAMPLES, DEFAULT_SAMPLE_COUNT),
        )
        logger.debug(f"Loaded generation config from environment: {config}")
        return config

    def with_seed(self, seed: int | None) -> GenerationConfig:
        """Return a copy with a different seed."""
        return replace(self, seed=seed)

    def with_size(self, size: int) -> GenerationConfig:
        """Return a copy with a different default size."""
        return replace(self, default_size=size)


def _read_int(env: Mapping[str, str], name: str, default: int | None = None) -> int | None:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip(), 0)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got: {raw!r}") from e


_config: GenerationConfig | None = None


def get_config() -> GenerationConfig:
    """Return the process-wide config, loading it from the environment on first use."""
    global _config
    if _config is None:
        _config = GenerationConfig.from_env()
    return _config


def set_config(config: GenerationConfig | None) -> None:
    """Replace the process-wide config; ``None`` reloads from the environment on next use."""
    global _config
    _config = config
