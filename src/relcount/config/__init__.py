"""Application configuration helpers."""

from __future__ import annotations

from .counting import CountingPolicy, get_counting_policy
from .engine import DEFAULT_ENGINE_KEY, EngineConfig, get_engine_config
from .env import env_flag
from .errors import ConfigurationError, InvalidConfigurationError
from .logging import configure_logging
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "DEFAULT_ENGINE_KEY",
    "ConfigurationError",
    "CountingPolicy",
    "DatabaseConfig",
    "EngineConfig",
    "InvalidConfigurationError",
    "StorageConfig",
    "configure_logging",
    "env_flag",
    "get_counting_policy",
    "get_database_config",
    "get_engine_config",
    "get_storage_config",
]
