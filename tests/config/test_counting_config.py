from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from relcount.config import (
    DEFAULT_ENGINE_KEY,
    CountingPolicy,
    InvalidConfigurationError,
    env_flag,
    get_counting_policy,
    get_database_config,
    get_engine_config,
)
from relcount.config.counting import EXECUTION_COUNTS_ENV, TASK_COUNTS_ENV

if TYPE_CHECKING:
    from pathlib import Path


def test_counting_policy_defaults_to_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(EXECUTION_COUNTS_ENV, raising=False)
    monkeypatch.delenv(TASK_COUNTS_ENV, raising=False)

    assert get_counting_policy() == CountingPolicy()


def test_counting_policy_reads_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(EXECUTION_COUNTS_ENV, "true")
    monkeypatch.setenv(TASK_COUNTS_ENV, "0")

    policy = get_counting_policy()

    assert policy.execution_counting_enabled is True
    assert policy.task_counting_enabled is False


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("YES", True), (" on ", True), ("false", False), ("No", False), ("off", False)],
)
def test_env_flag_spellings(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("EXAMPLE_FLAG", raw)

    assert env_flag("EXAMPLE_FLAG") is expected


def test_env_flag_blank_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_FLAG", "  ")

    assert env_flag("EXAMPLE_FLAG", default=True) is True


def test_env_flag_rejects_unknown_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_FLAG", "maybe")

    with pytest.raises(InvalidConfigurationError, match="EXAMPLE_FLAG"):
        env_flag("EXAMPLE_FLAG")


def test_policy_is_immutable() -> None:
    policy = CountingPolicy(execution_counting_enabled=True)

    with pytest.raises(AttributeError):
        policy.execution_counting_enabled = False  # pyright: ignore[reportAttributeAccessIssue]


def test_engine_key_defaults_and_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RELCOUNT_ENGINE_KEY", raising=False)
    assert get_engine_config().engine_key == DEFAULT_ENGINE_KEY

    monkeypatch.setenv("RELCOUNT_ENGINE_KEY", "billing")
    assert get_engine_config().engine_key == "billing"


def test_database_uri_prefers_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URI", "sqlite+pysqlite:///:memory:")

    assert get_database_config().uri == "sqlite+pysqlite:///:memory:"


def test_database_uri_falls_back_to_data_dir(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("DATABASE_URI", raising=False)
    monkeypatch.setenv("RELCOUNT_DATA_DIR", str(tmp_path))

    uri = get_database_config().uri

    assert uri.startswith("sqlite+pysqlite:///")
    assert uri.endswith("relcount.db")
