from __future__ import annotations

import random

import pytest


@pytest.fixture
def rng() -> random.Random:
    return random.Random(2024)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("GIFT_EXCHANGE_SEED", "GIFT_EXCHANGE_VERIFY_PROGRESS", "GIFT_EXCHANGE_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
