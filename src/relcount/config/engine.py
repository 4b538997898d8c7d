"""Engine identity used when dispatching notifications."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

DEFAULT_ENGINE_KEY: Final[str] = "default"
ENGINE_KEY_ENV: Final[str] = "RELCOUNT_ENGINE_KEY"


@dataclass(frozen=True, slots=True)
class EngineConfig:
    engine_key: str = DEFAULT_ENGINE_KEY


def get_engine_config() -> EngineConfig:
    value = os.getenv(ENGINE_KEY_ENV)
    if value and value.strip():
        return EngineConfig(engine_key=value.strip())
    return EngineConfig()
