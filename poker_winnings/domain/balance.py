"""Conversion of chip results into per-player net balances."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation


class DomainValidationError(ValueError):
    """Raised when settlement input violates a game rule."""


class InvalidRate(DomainValidationError):
    def __init__(self, rate: object) -> None:
        self.rate = rate
        super().__init__(f"chip-to-dollar rate must be a positive number, got {rate!r}")


class UnbalancedGame(DomainValidationError):
    """Chips paid in do not match chips on the table at the end."""

    def __init__(self, total_buy_in: int, total_final_score: int) -> None:
        self.total_buy_in = total_buy_in
        self.total_final_score = total_final_score
        super().__init__(
            f"total buy-in {total_buy_in} does not match total final score {total_final_score}"
        )


class UnbalancedInput(DomainValidationError):
    """Balances handed to the settlement engine do not sum to zero."""

    def __init__(self, residue: Decimal) -> None:
        self.residue = residue
        super().__init__(f"balances do not sum to zero, residue {residue}")


@dataclass(frozen=True)
class PlayerResult:
    identifier: str
    buy_in: int
    final_score: int

    def __post_init__(self) -> None:
        if self.buy_in < 0:
            raise DomainValidationError(f"buy-in must be non-negative for {self.identifier}")
        if self.final_score < 0:
            raise DomainValidationError(f"final score must be non-negative for {self.identifier}")


@dataclass(frozen=True)
class PlayerBalance:
    identifier: str
    net_balance: Decimal

    @property
    def is_creditor(self) -> bool:
        return self.net_balance > 0

    @property
    def is_debtor(self) -> bool:
        return self.net_balance < 0


def default_identifier(position: int) -> str:
    return f"Player {position + 1}"


def normalize_player(name: str | None, position: int) -> str:
    value = (name or "").strip()
    return value or default_identifier(position)


def to_decimal(value: object) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)  # type: ignore[arg-type]


def parse_rate(rate: object) -> Decimal:
    if isinstance(rate, bool):
        raise InvalidRate(rate)
    try:
        value = to_decimal(rate)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidRate(rate) from exc
    if not value.is_finite() or value <= 0:
        raise InvalidRate(rate)
    return value


def coerce_results(players: Iterable[PlayerResult | Sequence[int]]) -> list[PlayerResult]:
    """Accept ready ``PlayerResult`` values or bare ``(buy_in, final_score)`` pairs."""
    results: list[PlayerResult] = []
    seen: set[str] = set()
    for position, player in enumerate(players):
        if isinstance(player, PlayerResult):
            result = PlayerResult(
                identifier=normalize_player(player.identifier, position),
                buy_in=player.buy_in,
                final_score=player.final_score,
            )
        else:
            buy_in, final_score = player
            result = PlayerResult(
                identifier=default_identifier(position),
                buy_in=buy_in,
                final_score=final_score,
            )
        if result.identifier in seen:
            raise DomainValidationError(f"duplicate player: {result.identifier}")
        seen.add(result.identifier)
        results.append(result)
    return results


def chip_totals(players: Iterable[PlayerResult]) -> tuple[int, int]:
    total_buy_in = 0
    total_final_score = 0
    for player in players:
        total_buy_in += player.buy_in
        total_final_score += player.final_score
    return total_buy_in, total_final_score


def calculate_balances(
    rate: object,
    players: Iterable[PlayerResult | Sequence[int]],
) -> list[PlayerBalance]:
    """Convert chip results into currency balances, one per player in input order.

    The rate is validated before anything else so a bad rate never yields
    partial output. The chip economy must be closed: every chip bought in has to
    be on the table at the end.
    """
    chips_per_unit = parse_rate(rate)
    results = coerce_results(players)

    total_buy_in, total_final_score = chip_totals(results)
    if total_buy_in != total_final_score:
        raise UnbalancedGame(total_buy_in, total_final_score)

    return [
        PlayerBalance(
            identifier=result.identifier,
            net_balance=Decimal(result.final_score - result.buy_in) / chips_per_unit,
        )
        for result in results
    ]
