"""Example: use the gateway and ledger builders directly (no Flask).

Controllers stay thin; everything they show comes from these calls.
"""

import asyncio
import importlib

from time_ledger.config import get_settings_module
from time_ledger.container import build_container
from time_ledger.ledger.builder import ordered_ledgers
from time_ledger.ledger.calendar import month_total_hours


async def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(store_config=settings.STORE_CONFIG)

    snapshot = await container.mutation_gateway.reload()
    today = snapshot.loaded_at.date()
    for ledger in ordered_ledgers(snapshot.ledger):
        print(f"{ledger.display_name}: {month_total_hours(ledger, today.year, today.month):.1f}h this month")


if __name__ == "__main__":
    asyncio.run(main())
