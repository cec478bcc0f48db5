from .balance import (
    DomainValidationError,
    InvalidRate,
    PlayerBalance,
    PlayerResult,
    UnbalancedGame,
    UnbalancedInput,
    calculate_balances,
    chip_totals,
    default_identifier,
    normalize_player,
    parse_rate,
)
from .presentation import format_balance, format_transfer, quantize_amount
from .settlement import DEFAULT_EPSILON, Transfer, build_transfers, settlement_deltas

__all__ = [
    "DEFAULT_EPSILON",
    "DomainValidationError",
    "InvalidRate",
    "PlayerBalance",
    "PlayerResult",
    "Transfer",
    "UnbalancedGame",
    "UnbalancedInput",
    "build_transfers",
    "calculate_balances",
    "chip_totals",
    "default_identifier",
    "format_balance",
    "format_transfer",
    "normalize_player",
    "parse_rate",
    "quantize_amount",
    "settlement_deltas",
]
