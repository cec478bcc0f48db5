from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from poker_winnings.config import Settings
from poker_winnings.domain import (
    DomainValidationError,
    PlayerBalance,
    PlayerResult,
    Transfer,
    UnbalancedInput,
    build_transfers,
    calculate_balances,
    format_balance,
    format_transfer,
    parse_rate,
)

logger = logging.getLogger("poker_winnings.service")


@dataclass(frozen=True)
class PlayerEntry:
    name: str | None
    final_score: int
    buy_in: int | None = None


@dataclass(frozen=True)
class SettlementReport:
    chips_per_dollar: Decimal
    balances: list[PlayerBalance]
    transfers: list[Transfer]

    @property
    def lines(self) -> list[str]:
        return [format_transfer(transfer) for transfer in self.transfers]

    @property
    def balance_lines(self) -> list[str]:
        return [format_balance(balance) for balance in self.balances]


class SettlementService:
    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def settle(
        self,
        players: Sequence[PlayerEntry],
        chips_per_dollar: object | None = None,
    ) -> SettlementReport:
        """Run the calculator and the engine for one game.

        A missing rate or buy-in falls back to the configured defaults.
        """
        rate = self.settings.chips_per_dollar if chips_per_dollar is None else chips_per_dollar
        try:
            rate = parse_rate(rate)
            results = [
                PlayerResult(
                    identifier=entry.name or "",
                    buy_in=self.settings.default_buy_in if entry.buy_in is None else entry.buy_in,
                    final_score=entry.final_score,
                )
                for entry in players
            ]
            balances = calculate_balances(rate, results)
        except DomainValidationError as exc:
            logger.warning("rejected settlement input: %s", exc)
            raise

        try:
            transfers = build_transfers(balances, epsilon=self.settings.epsilon)
        except UnbalancedInput:
            logger.exception("settlement engine left unbalanced residue for %d players", len(balances))
            raise

        logger.info("settled %d players with %d transfers", len(balances), len(transfers))
        return SettlementReport(chips_per_dollar=rate, balances=balances, transfers=transfers)
