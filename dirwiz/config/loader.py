from __future__ import annotations

import json
from enum import Enum
from typing import Any

from result import Err, Ok, Result

from dirwiz.config.defaults import default_config
from dirwiz.config.schema import AppConfig
from dirwiz.models.enums import ErrorPolicy, SplitPolicy
from dirwiz.services.fs import DEFAULT_FS, FileSystem

CONFIG_PATH = "~/.config/dirwiz/config.json"

_CHOICE_KEYS: tuple[tuple[str, type[Enum]], ...] = (
    ("splitPolicy", SplitPolicy),
    ("onError", ErrorPolicy),
)
_INT_KEYS = ("splitThreshold", "topCount")
_BOOL_KEYS = ("autoInterleave",)


def _check_walk_keys(payload: dict[str, Any]) -> str | None:
    """Return a message naming the first malformed walk setting, if any."""
    for key, choices in _CHOICE_KEYS:
        if key not in payload:
            continue
        allowed = [member.value for member in choices]
        if str(payload[key]).lower() not in allowed:
            return f"{key} must be one of {', '.join(allowed)}, got {payload[key]!r}"
    for key in _INT_KEYS:
        value = payload.get(key, 0)
        # bool is an int subclass; true/false is not a count.
        if isinstance(value, bool) or not isinstance(value, int):
            return f"{key} must be an integer, got {value!r}"
    for key in _BOOL_KEYS:
        if key in payload and not isinstance(payload[key], bool):
            return f"{key} must be true or false, got {payload[key]!r}"
    return None


def load_config(path: str | None = None, fs: FileSystem = DEFAULT_FS) -> Result[AppConfig, str]:
    resolved = fs.expanduser(path or CONFIG_PATH)
    if not fs.exists(resolved):
        return Ok(default_config())

    try:
        payload = json.loads(fs.read_text(resolved))
    except Exception as exc:  # noqa: BLE001
        return Err(f"Failed reading config at {resolved}: {exc}.")
    if not isinstance(payload, dict):
        return Err(f"Config at {resolved} must be a JSON object.")
    problem = _check_walk_keys(payload)
    if problem is not None:
        return Err(f"Invalid config at {resolved}: {problem}.")
    return Ok(AppConfig.from_dict(payload, default_config()))


def sample_config_json() -> str:
    return json.dumps(default_config().to_dict(), indent=2)
