from __future__ import annotations

from dirwiz.config.schema import AppConfig


def default_config() -> AppConfig:
    return AppConfig()
