# config_manager.py - JSON config manager

import json
import logging
import os
from typing import Any, Optional

from typing_extensions import TypedDict

from weighted_autocompleter.core.registry import ENGINES

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigData(TypedDict, total=False):
    engine: str           # key into core.registry.ENGINES
    max_suggestions: int  # default k
    log_level: str        # stdlib logging level for the core modules
    log_path: Optional[str]
    bench_runs: int
    bench_warmup: int


DEFAULTS: ConfigData = {
    "engine": "trie",
    "max_suggestions": 5,
    "log_level": "WARNING",
    "log_path": None,
    "bench_runs": 200,
    "bench_warmup": 20,
}


def _count(key: str, val: Any, minimum: int) -> int:
    # bool is an int subclass, reject it explicitly
    if isinstance(val, bool) or not isinstance(val, int):
        raise ValueError(f"{key} must be an integer, got {val!r}")
    if val < minimum:
        raise ValueError(f"{key} must be >= {minimum}, got {val}")
    return val


def check_value(key: str, val: Any) -> Any:
    """Validate one setting and return it in normalised form; raises ValueError."""
    if key == "engine":
        if val not in ENGINES:
            raise ValueError(f"unknown engine {val!r}, choose from: {', '.join(sorted(ENGINES))}")
        return val
    if key in ("max_suggestions", "bench_warmup"):
        return _count(key, val, 0)
    if key == "bench_runs":
        return _count(key, val, 1)
    if key == "log_level":
        if not isinstance(val, str) or val.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {val!r}")
        return val.upper()
    if key == "log_path":
        if val is not None and not isinstance(val, str):
            raise ValueError(f"log_path must be a string, got {val!r}")
        return val or None
    raise KeyError(f"no such option: {key}")


class Config:
    """
    Settings backed by an optional JSON file.
    path=None keeps everything in memory (tests, one-off runs).
    A readable file with an invalid value raises ValueError.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.data: ConfigData = dict(DEFAULTS)  # type: ignore[assignment]
        self._load()

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("could not read config %s (%s), using defaults", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("config %s is not a JSON object, using defaults", self.path)
            return
        for key, val in loaded.items():
            if key in DEFAULTS:
                try:
                    self.data[key] = check_value(key, val)
                except ValueError as e:
                    raise ValueError(f"config {self.path}: {e}") from None
            else:
                logger.warning("ignoring unknown config key %r", key)

    def save(self):
        if not self.path:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def items(self):
        return self.data.items()

    def set(self, key, val):
        """
        Set `key` from a user-supplied value, coercing it to the type of its
        default, then save. Raises KeyError for unknown keys, ValueError for
        values that do not convert or validate.
        """
        if key not in DEFAULTS:
            raise KeyError(f"no such option: {key}")
        default = DEFAULTS[key]
        if default is not None and val is not None and not isinstance(val, type(default)):
            try:
                val = type(default)(val)
            except (TypeError, ValueError):
                raise ValueError(f"{key} must be {type(default).__name__}, got {val!r}") from None
        self.data[key] = check_value(key, val)
        self.save()
