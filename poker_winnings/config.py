from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ConfigError(ValueError):
    """Raised when an environment setting cannot be parsed."""


@dataclass(frozen=True)
class Settings:
    chips_per_dollar: Decimal = Decimal("100")
    default_buy_in: int = 0
    epsilon: Decimal = Decimal("0.000001")
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.chips_per_dollar <= 0:
            raise ConfigError("POKER_CHIPS_PER_DOLLAR must be positive")
        if self.default_buy_in < 0:
            raise ConfigError("POKER_DEFAULT_BUY_IN must be non-negative")
        if self.epsilon <= 0:
            raise ConfigError("POKER_SETTLEMENT_EPSILON must be positive")


def _decimal_setting(env: Mapping[str, str], name: str, default: str) -> Decimal:
    raw = env.get(name, default)
    try:
        value = Decimal(raw)
    except InvalidOperation as exc:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from exc
    if not value.is_finite():
        raise ConfigError(f"{name} must be finite, got {raw!r}")
    return value


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if env is None else env

    raw_buy_in = env.get("POKER_DEFAULT_BUY_IN", "0")
    try:
        default_buy_in = int(raw_buy_in)
    except ValueError as exc:
        raise ConfigError(f"POKER_DEFAULT_BUY_IN must be an integer, got {raw_buy_in!r}") from exc

    log_level = env.get("POKER_LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"unknown POKER_LOG_LEVEL: {log_level}")

    return Settings(
        chips_per_dollar=_decimal_setting(env, "POKER_CHIPS_PER_DOLLAR", "100"),
        default_buy_in=default_buy_in,
        epsilon=_decimal_setting(env, "POKER_SETTLEMENT_EPSILON", "0.000001"),
        log_level=log_level,
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
