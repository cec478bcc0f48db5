from __future__ import annotations

from poker_winnings.config import load_settings
from poker_winnings.service import SettlementService

settings = load_settings()
service = SettlementService(settings)


def get_service() -> SettlementService:
    return service
