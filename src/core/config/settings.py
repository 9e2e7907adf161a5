"""Normalizer configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping

from src.core.domain.target import (
    SCALE_MAX_DEFAULT,
    SCALE_MIN_DEFAULT,
    TARGET_HEIGHT_DEFAULT_M,
    TARGET_WIDTH_DEFAULT_M,
    InvalidTargetSpec,
    TargetSpec,
)

ENV_PREFIX = "NORMALIZER_"


def _read_float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(ENV_PREFIX + key)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise InvalidTargetSpec(f"{ENV_PREFIX}{key} must be a number, got {raw!r}") from e


@dataclass(frozen=True, slots=True)
class Settings:
    """Snapshot of normalizer settings, read once and never mutated."""

    target_height_m: float = TARGET_HEIGHT_DEFAULT_M
    target_width_m: float = TARGET_WIDTH_DEFAULT_M
    scale_min: float = SCALE_MIN_DEFAULT
    scale_max: float = SCALE_MAX_DEFAULT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from ``NORMALIZER_*`` variables."""

        env = os.environ if env is None else env
        return cls(
            target_height_m=_read_float(env, "TARGET_HEIGHT_M", TARGET_HEIGHT_DEFAULT_M),
            target_width_m=_read_float(env, "TARGET_WIDTH_M", TARGET_WIDTH_DEFAULT_M),
            scale_min=_read_float(env, "SCALE_MIN", SCALE_MIN_DEFAULT),
            scale_max=_read_float(env, "SCALE_MAX", SCALE_MAX_DEFAULT),
            log_level=env.get(ENV_PREFIX + "LOG_LEVEL", "INFO"),
        )

    def to_target_spec(self) -> TargetSpec:
        """Validated target spec; raises InvalidTargetSpec."""

        return TargetSpec(
            target_height_m=self.target_height_m,
            target_width_m=self.target_width_m,
            scale_min=self.scale_min,
            scale_max=self.scale_max,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings.from_env()
