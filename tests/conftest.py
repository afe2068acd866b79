"""Pytest configuration and helpers for refreshable list tests."""

from __future__ import annotations

from typing import Iterable, List, Sequence

import pytest
from loguru import logger


class ScriptedGenerator:
    """Generator stub returning prepared batches in order."""

    def __init__(self, batches: Iterable[Sequence[str]]) -> None:
        self._batches: List[List[str]] = [list(batch) for batch in batches]
        self.calls: List[int] = []

    def __call__(self, count: int) -> List[str]:
        self.calls.append(count)
        if not self._batches:
            raise AssertionError("generator called more often than scripted")
        return self._batches.pop(0)


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep loguru output out of test runs."""
    logger.remove()
    yield
    logger.remove()


@pytest.fixture
def scripted():
    """Factory for ScriptedGenerator instances."""
    return ScriptedGenerator
