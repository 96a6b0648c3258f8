# app/adapters/outbound/persistence/seeds/__main__.py

"""
Entry point for running all seeds from the command line:
`python -m app.adapters.outbound.persistence.seeds`
"""

import asyncio
import logging

from app.adapters.outbound.persistence.database import AsyncSessionLocal, create_schema
from app.adapters.outbound.persistence.seeds import run_all_seeds


async def main() -> None:
    await create_schema()
    async with AsyncSessionLocal() as session:
        await run_all_seeds(session)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
