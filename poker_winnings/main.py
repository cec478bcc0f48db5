from __future__ import annotations

from fastapi import FastAPI

from poker_winnings.api.settlements import router as settlements_router
from poker_winnings.config import configure_logging
from poker_winnings.runtime import settings

configure_logging(settings.log_level)

app = FastAPI(title="Poker Winnings API")
app.include_router(settlements_router)
