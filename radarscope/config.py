"""
radarscope.config
=================

Tiny helper that loads *radarscope_config.json* and injects sensible
defaults for any missing keys.  The file is optional and never written:
a missing file simply means "all defaults".
"""

from __future__ import annotations
import json
import logging
from pathlib import Path

from radarscope import constants as C

MOTION_MODES = ("targeted", "lockstep")

_DEFAULT = {
    # window
    "width": C.DEFAULT_SIZE[0],
    "height": C.DEFAULT_SIZE[1],
    "title": C.DEFAULT_TITLE,

    # simulation
    "num_blips": C.NUM_BLIPS,
    "motion_mode": "targeted",        # "targeted"  or  "lockstep"
    "seed": None,                     # None → seeded from wall clock

    # visuals / pacing
    "mask_ring": True,
    "frame_delay_ms": C.FRAME_DELAY_MS,

    # diagnostics
    "log_level": "INFO",
}


class ConfigError(ValueError):
    """Raised when the config file is unreadable or holds bad values."""


def defaults() -> dict:
    return dict(_DEFAULT)


def load(path: str | Path | None = None) -> dict:
    path = Path(path) if path is not None else C.CFG_PATH
    try:
        with open(path) as fh:
            cfg = {**_DEFAULT, **json.load(fh)}
    except FileNotFoundError:
        cfg = dict(_DEFAULT)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path}: malformed JSON ({exc})") from exc
    validate(cfg)
    return cfg


def validate(cfg: dict) -> None:
    """Reject values the scope cannot run with."""
    for key in ("width", "height", "num_blips"):
        if not _is_int(cfg[key]) or cfg[key] <= 0:
            raise ConfigError(f"{key} must be a positive integer, got {cfg[key]!r}")
    if cfg["motion_mode"] not in MOTION_MODES:
        raise ConfigError(f"motion_mode must be one of {MOTION_MODES}, "
                          f"got {cfg['motion_mode']!r}")
    delay = cfg["frame_delay_ms"]
    if isinstance(delay, bool) or not isinstance(delay, (int, float)) or delay < 0:
        raise ConfigError(f"frame_delay_ms must be >= 0, got {cfg['frame_delay_ms']!r}")
    if cfg["seed"] is not None and not _is_int(cfg["seed"]):
        raise ConfigError(f"seed must be an integer or null, got {cfg['seed']!r}")
    if not isinstance(logging.getLevelName(str(cfg["log_level"]).upper()), int):
        raise ConfigError(f"unknown log_level {cfg['log_level']!r}")


def _is_int(v) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)
