from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status

from poker_winnings.domain import DomainValidationError, InvalidRate, UnbalancedGame, UnbalancedInput


def api_error(
    *,
    code: str,
    message: str,
    details: Any | None = None,
    status_code: int = status.HTTP_400_BAD_REQUEST,
) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={
            "code": code,
            "message": message,
            "details": details,
        },
    )


def domain_error(exc: DomainValidationError) -> HTTPException:
    if isinstance(exc, InvalidRate):
        return api_error(code="invalid_rate", message=str(exc), details={"chips_per_dollar": str(exc.rate)})
    if isinstance(exc, UnbalancedGame):
        return api_error(
            code="unbalanced_game",
            message=str(exc),
            details={
                "total_buy_in": exc.total_buy_in,
                "total_final_score": exc.total_final_score,
            },
        )
    if isinstance(exc, UnbalancedInput):
        return api_error(
            code="unbalanced_input",
            message="settlement could not be balanced",
            details={"residue": str(exc.residue)},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return api_error(code="invalid_player", message=str(exc))
