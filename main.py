"""
Homebase — Entry Point.

Single entry point: `python main.py` seeds the store on first run and prints
today's leaderboard and agenda.
"""

import asyncio
import logging

from homebase.config import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

from homebase.adapters.store_factory import create_document_store
from homebase.core.bootstrap import safe_bootstrap
from homebase.core.dashboard_service import load_dashboard


async def run() -> None:
    store = create_document_store()
    await safe_bootstrap(store)
    snapshot = await load_dashboard(store)

    print(f"Leaderboard ({snapshot.day:%A, %B %d, %Y})")
    for ranked in snapshot.leaderboard:
        print(f"  {ranked.rank}. {ranked.member.name} — {ranked.member.points} points")

    print("Today's schedule")
    for item in snapshot.agenda:
        who = f" ({item.assigned_to})" if item.assigned_to else ""
        print(f"  {item.time_key}  [{item.kind}] {item.title}{who}")


if __name__ == "__main__":
    asyncio.run(run())
