"""Runtime configuration for the resampling engine."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import InvalidParameter
from .filters.kernels import get_filter


def _default_workers() -> int:
    return max(1, os.cpu_count() or 1)


def _parse_workers(value) -> int:
    try:
        workers = int(value)
    except (TypeError, ValueError):
        raise InvalidParameter(f"worker count must be an integer, got {value!r}")
    if workers < 1:
        raise InvalidParameter(f"worker count must be >= 1, got {workers}")
    return workers


@dataclass(frozen=True)
class EngineConfig:
    """Engine configuration."""

    workers: int = _default_workers()
    default_filter: str = "lanczos"

    def __post_init__(self):
        _parse_workers(self.workers)
        try:
            get_filter(self.default_filter)
        except (TypeError, ValueError) as exc:
            raise InvalidParameter(f"invalid default filter {self.default_filter!r}: {exc}") from None

    @classmethod
    def load(cls) -> EngineConfig:
        """Load from environment variables."""
        workers = os.getenv("PYFASTRESAMPLE_WORKERS")
        return cls(
            workers=_parse_workers(workers) if workers else _default_workers(),
            default_filter=os.getenv("PYFASTRESAMPLE_FILTER") or "lanczos",
        )


_config: EngineConfig | None = None


def get_config() -> EngineConfig:
    """Return the process configuration, loading it from the environment once."""
    global _config
    if _config is None:
        _config = EngineConfig.load()
    return _config


def set_config(config: EngineConfig | None) -> None:
    """Replace the process configuration. ``None`` reloads from the environment."""
    global _config
    _config = config


def resolve_workers(workers: int | None) -> int:
    """Worker count to use for one call: the explicit value or the configured one."""
    if workers is None:
        return get_config().workers
    return _parse_workers(workers)


__all__ = ["EngineConfig", "get_config", "set_config", "resolve_workers"]
