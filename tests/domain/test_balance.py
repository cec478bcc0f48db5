from decimal import Decimal

import pytest

from poker_winnings.domain import (
    DomainValidationError,
    InvalidRate,
    PlayerResult,
    UnbalancedGame,
    calculate_balances,
    chip_totals,
)


def test_three_player_game_balances() -> None:
    balances = calculate_balances(400, [(2000, 3000), (2000, 1500), (2000, 1500)])

    assert [b.identifier for b in balances] == ["Player 1", "Player 2", "Player 3"]
    assert [b.net_balance for b in balances] == [Decimal("2.5"), Decimal("-1.25"), Decimal("-1.25")]
    assert balances[0].is_creditor
    assert balances[1].is_debtor


def test_named_players_keep_order_and_blank_names_get_position() -> None:
    balances = calculate_balances(
        Decimal("100"),
        [
            PlayerResult(identifier=" alice ", buy_in=500, final_score=0),
            PlayerResult(identifier="", buy_in=500, final_score=1000),
        ],
    )

    assert [(b.identifier, b.net_balance) for b in balances] == [
        ("alice", Decimal("-5")),
        ("Player 2", Decimal("5")),
    ]


def test_unbalanced_game_reports_both_totals() -> None:
    with pytest.raises(UnbalancedGame) as exc_info:
        calculate_balances(400, [(1000, 1500), (2000, 1400)])

    assert exc_info.value.total_buy_in == 3000
    assert exc_info.value.total_final_score == 2900
    assert "3000" in str(exc_info.value)
    assert "2900" in str(exc_info.value)


@pytest.mark.parametrize(
    "rate",
    [0, -1, "-0.5", "abc", None, float("nan"), float("inf"), True],
    ids=["zero", "negative", "negative_str", "text", "none", "nan", "inf", "bool"],
)
def test_invalid_rate_is_rejected(rate) -> None:
    with pytest.raises(InvalidRate):
        calculate_balances(rate, [(100, 100)])


def test_invalid_rate_checked_before_chip_totals() -> None:
    with pytest.raises(InvalidRate):
        calculate_balances(0, [(100, 50)])


def test_fractional_rate_from_float() -> None:
    balances = calculate_balances(0.5, [(10, 11), (10, 9)])

    assert [b.net_balance for b in balances] == [Decimal("2"), Decimal("-2")]


def test_negative_chips_rejected() -> None:
    with pytest.raises(DomainValidationError):
        PlayerResult(identifier="alice", buy_in=-1, final_score=0)


def test_duplicate_players_rejected() -> None:
    with pytest.raises(DomainValidationError):
        calculate_balances(
            100,
            [
                PlayerResult(identifier="alice", buy_in=100, final_score=50),
                PlayerResult(identifier="alice", buy_in=100, final_score=150),
            ],
        )


def test_chip_totals() -> None:
    results = [PlayerResult("a", 100, 20), PlayerResult("b", 50, 130)]

    assert chip_totals(results) == (150, 150)
