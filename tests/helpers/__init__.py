"""Test helpers package."""

from tests.helpers.config import write_test_config
from tests.helpers.schedulers import LeakyScheduler
from tests.helpers.wait import wait_for_screen, wait_until

__all__ = [
    "LeakyScheduler",
    "wait_for_screen",
    "wait_until",
    "write_test_config",
]
