from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from .balance import PlayerBalance
from .settlement import Transfer

CENT = Decimal("0.01")


def quantize_amount(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_transfer(transfer: Transfer) -> str:
    return f"{transfer.payer} pays {transfer.payee}: ${quantize_amount(transfer.amount)}"


def format_balance(balance: PlayerBalance) -> str:
    return f"{balance.identifier}: ${quantize_amount(balance.net_balance)}"
