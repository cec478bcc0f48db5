from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, model_validator


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: Any | None = None


class ErrorEnvelope(BaseModel):
    detail: ErrorResponse


class PlayerInput(BaseModel):
    name: str | None = Field(default=None, description="Player name, defaults to its position", examples=["alice"])
    buy_in: int | None = Field(
        default=None,
        ge=0,
        description="Chips bought in; the configured default buy-in is used when omitted",
        examples=[2000],
    )
    final_score: int = Field(..., ge=0, description="Chips held at the end of the game", examples=[3000])


class SettlementRequest(BaseModel):
    chips_per_dollar: Decimal | None = Field(
        default=None,
        description="Chips per one dollar; the configured default is used when omitted",
        examples=[400],
    )
    players: list[PlayerInput] = Field(..., description="Per-player chip results in display order")

    @model_validator(mode="after")
    def validate_players(self) -> "SettlementRequest":
        if not self.players:
            raise ValueError("at least one player is required")
        return self

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "chips_per_dollar": 400,
                    "players": [
                        {"name": "alice", "buy_in": 2000, "final_score": 3000},
                        {"name": "bob", "buy_in": 2000, "final_score": 1500},
                        {"name": "charlie", "buy_in": 2000, "final_score": 1500},
                    ],
                }
            ]
        }
    }


class BalanceResponse(BaseModel):
    player: str
    net: Decimal


class TransferResponse(BaseModel):
    payer: str
    payee: str
    amount: Decimal


class SettlementResponse(BaseModel):
    chips_per_dollar: Decimal
    balances: list[BalanceResponse]
    transfers: list[TransferResponse]
    lines: list[str]
    balance_lines: list[str]

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "chips_per_dollar": "400",
                    "balances": [
                        {"player": "alice", "net": "2.50"},
                        {"player": "bob", "net": "-1.25"},
                        {"player": "charlie", "net": "-1.25"},
                    ],
                    "transfers": [
                        {"payer": "bob", "payee": "alice", "amount": "1.25"},
                        {"payer": "charlie", "payee": "alice", "amount": "1.25"},
                    ],
                    "lines": ["bob pays alice: $1.25", "charlie pays alice: $1.25"],
                    "balance_lines": ["alice: $2.50", "bob: $-1.25", "charlie: $-1.25"],
                }
            ]
        }
    }


class DefaultsResponse(BaseModel):
    chips_per_dollar: Decimal
    default_buy_in: int
    epsilon: Decimal
