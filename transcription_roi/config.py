"""Environment-driven settings for the page and the CLI."""

import logging
import os
from dataclasses import dataclass

from .scenarios import SCENARIOS

_TRUE = {'1', 'true', 'yes', 'on'}
_FALSE = {'0', 'false', 'no', 'off'}


class ConfigError(RuntimeError):
    """Raised when an environment setting cannot be used."""


@dataclass(frozen=True)
class AppConfig:
    default_scenario: str = 'consulting'
    animate: bool = True
    animation_ms: int = 600
    animation_frames: int = 20
    log_level: str = 'WARNING'


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean flag, got {raw!r}")


def _env_int(name: str, default: int, minimum: int = 0) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc
    if value < minimum:
        raise ConfigError(f"{name} must be >= {minimum}, got {value}")
    return value


def load_config() -> AppConfig:
    scenario = os.getenv('ROI_DEFAULT_SCENARIO', AppConfig.default_scenario).strip()
    if scenario not in SCENARIOS:
        raise ConfigError(
            f"ROI_DEFAULT_SCENARIO={scenario!r} is not a known scenario ({', '.join(SCENARIOS)})"
        )
    level = os.getenv('ROI_LOG_LEVEL', AppConfig.log_level).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"ROI_LOG_LEVEL={level!r} is not a logging level")
    return AppConfig(
        default_scenario=scenario,
        animate=_env_bool('ROI_ANIMATE', AppConfig.animate),
        animation_ms=_env_int('ROI_ANIMATION_MS', AppConfig.animation_ms),
        animation_frames=_env_int('ROI_ANIMATION_FRAMES', AppConfig.animation_frames, minimum=1),
        log_level=level,
    )


def configure_logging(level: str = 'WARNING') -> None:
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
