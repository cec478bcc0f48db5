import logging
from decimal import Decimal

import pytest

from poker_winnings.config import Settings
from poker_winnings.domain import InvalidRate, UnbalancedGame, UnbalancedInput
from poker_winnings.service import PlayerEntry, SettlementService


@pytest.fixture
def service() -> SettlementService:
    return SettlementService(Settings(chips_per_dollar=Decimal("400"), default_buy_in=2000))


def test_default_rate_and_buy_in_are_applied(service: SettlementService) -> None:
    report = service.settle(
        [
            PlayerEntry(name="alice", final_score=3000),
            PlayerEntry(name="bob", final_score=1500),
            PlayerEntry(name="charlie", final_score=1500),
        ]
    )

    assert report.chips_per_dollar == Decimal("400")
    assert [b.net_balance for b in report.balances] == [Decimal("2.5"), Decimal("-1.25"), Decimal("-1.25")]
    assert report.lines == ["bob pays alice: $1.25", "charlie pays alice: $1.25"]
    assert report.balance_lines == ["alice: $2.50", "bob: $-1.25", "charlie: $-1.25"]


def test_explicit_values_override_defaults(service: SettlementService) -> None:
    report = service.settle(
        [
            PlayerEntry(name=None, final_score=0, buy_in=100),
            PlayerEntry(name=None, final_score=200, buy_in=100),
        ],
        chips_per_dollar=10,
    )

    assert report.lines == ["Player 1 pays Player 2: $10.00"]
    assert report.balance_lines == ["Player 1: $-10.00", "Player 2: $10.00"]


def test_rejected_input_is_logged_and_raised(service: SettlementService, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="poker_winnings.service"):
        with pytest.raises(UnbalancedGame):
            service.settle([PlayerEntry(name="a", final_score=1500, buy_in=1000)])

    assert "rejected settlement input" in caplog.text


def test_invalid_rate(service: SettlementService) -> None:
    with pytest.raises(InvalidRate):
        service.settle([PlayerEntry(name="a", final_score=0, buy_in=0)], chips_per_dollar=-5)


def test_engine_failure_is_logged_as_error(service: SettlementService, caplog, monkeypatch) -> None:
    def broken(balances, epsilon):
        raise UnbalancedInput(Decimal("1"))

    monkeypatch.setattr("poker_winnings.service.build_transfers", broken)

    with caplog.at_level(logging.ERROR, logger="poker_winnings.service"):
        with pytest.raises(UnbalancedInput):
            service.settle([PlayerEntry(name="a", final_score=0, buy_in=0)])

    assert any(record.levelno == logging.ERROR for record in caplog.records)
