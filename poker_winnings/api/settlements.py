from __future__ import annotations

from fastapi import APIRouter, Depends, status

from poker_winnings.api.errors import domain_error
from poker_winnings.api.schemas import (
    BalanceResponse,
    DefaultsResponse,
    ErrorEnvelope,
    SettlementRequest,
    SettlementResponse,
    TransferResponse,
)
from poker_winnings.domain import DomainValidationError, quantize_amount
from poker_winnings.runtime import get_service
from poker_winnings.service import PlayerEntry, SettlementService

router = APIRouter(tags=["settlements"])


@router.get(
    "/settings/defaults",
    response_model=DefaultsResponse,
    summary="Configured defaults for a new game",
)
def get_defaults(service: SettlementService = Depends(get_service)) -> DefaultsResponse:
    settings = service.settings
    return DefaultsResponse(
        chips_per_dollar=settings.chips_per_dollar,
        default_buy_in=settings.default_buy_in,
        epsilon=settings.epsilon,
    )


@router.post(
    "/settlements",
    response_model=SettlementResponse,
    status_code=status.HTTP_200_OK,
    summary="Convert chip results into money transfers",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorEnvelope, "description": "Invalid rate, players or chip totals"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorEnvelope, "description": "Balances could not be settled"},
    },
)
def create_settlement(
    payload: SettlementRequest,
    service: SettlementService = Depends(get_service),
) -> SettlementResponse:
    entries = [
        PlayerEntry(name=player.name, final_score=player.final_score, buy_in=player.buy_in)
        for player in payload.players
    ]
    try:
        report = service.settle(entries, chips_per_dollar=payload.chips_per_dollar)
    except DomainValidationError as exc:
        raise domain_error(exc) from exc

    return SettlementResponse(
        chips_per_dollar=report.chips_per_dollar,
        balances=[
            BalanceResponse(player=balance.identifier, net=quantize_amount(balance.net_balance))
            for balance in report.balances
        ],
        transfers=[
            TransferResponse(
                payer=transfer.payer,
                payee=transfer.payee,
                amount=quantize_amount(transfer.amount),
            )
            for transfer in report.transfers
        ],
        lines=report.lines,
        balance_lines=report.balance_lines,
    )
