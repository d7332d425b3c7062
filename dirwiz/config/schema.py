from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from dirwiz.models.enums import ErrorPolicy, SplitPolicy
from dirwiz.models.walk import WalkOptions

# (json_key, attr_name, minimum)
_INT_FIELDS: tuple[tuple[str, str, int], ...] = (
    ("splitThreshold", "split_threshold", 1),
    ("topCount", "top_count", 1),
)


def _get_int(data: dict[str, Any], json_key: str, default: int, minimum: int) -> int:
    return max(minimum, int(data.get(json_key, default)))


def _get_bool(data: dict[str, Any], json_key: str, default: bool) -> bool:
    value = data.get(json_key, default)
    if not isinstance(value, bool):
        msg = f"{json_key} must be true or false, got {value!r}"
        raise ValueError(msg)
    return value


@dataclass(slots=True)
class AppConfig:
    split_policy: SplitPolicy = SplitPolicy.DEPTH
    split_threshold: int = 1
    on_error: ErrorPolicy = ErrorPolicy.ABORT
    auto_interleave: bool = False
    top_count: int = 15

    def to_options(self) -> WalkOptions:
        return WalkOptions(
            split_policy=self.split_policy,
            split_threshold=self.split_threshold,
            on_error=self.on_error,
            auto_interleave=self.auto_interleave,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "splitPolicy": self.split_policy.value,
            "splitThreshold": self.split_threshold,
            "onError": self.on_error.value,
            "autoInterleave": self.auto_interleave,
            "topCount": self.top_count,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], defaults: AppConfig) -> AppConfig:
        int_kwargs: dict[str, int] = {}
        for json_key, attr, minimum in _INT_FIELDS:
            int_kwargs[attr] = _get_int(data, json_key, getattr(defaults, attr), minimum)

        return cls(
            split_policy=SplitPolicy.from_str(data.get("splitPolicy", defaults.split_policy.value)),
            on_error=ErrorPolicy.from_str(data.get("onError", defaults.on_error.value)),
            auto_interleave=_get_bool(data, "autoInterleave", defaults.auto_interleave),
            **int_kwargs,
        )
