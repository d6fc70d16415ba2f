import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

TRUTHY = {"true", "1", "yes"}
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass
class DrawSettings:
    seed: int | None = None
    verify_progress: bool = False
    log_level: str = "WARNING"

    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)


def load_draw_settings_from_env() -> DrawSettings:
    load_dotenv()  # loads .env into process env; no-op if already loaded

    raw_seed = os.getenv("GIFT_EXCHANGE_SEED", "").strip()
    verify_progress = os.getenv("GIFT_EXCHANGE_VERIFY_PROGRESS", "").lower() in TRUTHY
    log_level = os.getenv("GIFT_EXCHANGE_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"

    seed = None
    if raw_seed:
        try:
            seed = int(raw_seed)
        except ValueError:
            raise RuntimeError(f"GIFT_EXCHANGE_SEED must be an integer, got {raw_seed!r}") from None
    if log_level not in LOG_LEVELS:
        raise RuntimeError(f"GIFT_EXCHANGE_LOG_LEVEL must be one of {', '.join(sorted(LOG_LEVELS))}")

    return DrawSettings(seed=seed, verify_progress=verify_progress, log_level=log_level)
