"""The default data seed is idempotent and runnable on its own."""
from sqlalchemy import func, select

from app.adapters.outbound.persistence.models import Group, GroupPermission, Permission
from app.adapters.outbound.persistence.seeds import run_all_seeds


async def _counts(db):
    counts = []
    for model in (Group, Permission, GroupPermission):
        result = await db.execute(select(func.count()).select_from(model))
        counts.append(result.scalar_one())
    return counts


async def test_seed_loads_default_data(db):
    assert await _counts(db) == [4, 8, 17]


async def test_running_seed_again_changes_nothing(db):
    await run_all_seeds(db)

    assert await _counts(db) == [4, 8, 17]


async def test_seed_restores_missing_grant(db):
    grant = await db.get(GroupPermission, (2, 2))
    await db.delete(grant)
    await db.commit()

    await run_all_seeds(db)

    assert await db.get(GroupPermission, (2, 2)) is not None
    assert await _counts(db) == [4, 8, 17]


async def test_module_entry_point_creates_schema_and_seeds():
    from app.adapters.outbound.persistence.database import AsyncSessionLocal, engine
    from app.adapters.outbound.persistence.seeds.__main__ import main

    await main()

    async with AsyncSessionLocal() as session:
        assert await _counts(session) == [4, 8, 17]

    await engine.dispose()
