"""Global relationship-counting switches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import env_flag

EXECUTION_COUNTS_ENV: Final[str] = "RELCOUNT_ENABLE_EXECUTION_RELATIONSHIP_COUNTS"
TASK_COUNTS_ENV: Final[str] = "RELCOUNT_ENABLE_TASK_RELATIONSHIP_COUNTS"


@dataclass(frozen=True, slots=True)
class CountingPolicy:
    """Process-wide counting flags.

    The flags may differ between restarts, but one policy instance never changes.
    Entities created while a flag was off never receive increments, so their own
    snapshot flag keeps them untrusted even after the global flag is switched on.
    """

    execution_counting_enabled: bool = False
    task_counting_enabled: bool = False


def get_counting_policy() -> CountingPolicy:
    return CountingPolicy(
        execution_counting_enabled=env_flag(EXECUTION_COUNTS_ENV),
        task_counting_enabled=env_flag(TASK_COUNTS_ENV),
    )
