"""persist_audited — writes reach the store whether or not the entity is attached.

Invariants checked:
    - an update to an entity loaded elsewhere (detached) is written, not dropped
    - the returned instance is the one the session tracks
    - created_at of the stored row survives; updated_at advances
"""

from freight.models import Commodity
from freight.services.persistence import persist_audited


def _naive(value):
    return value.replace(tzinfo=None)


async def test_detached_update_is_written(test_db, test_session_factory, clock):
    created_at = clock.now
    steel = await persist_audited(test_db, Commodity(name="Steel", code="STL"), is_new=True)

    updated_at = clock.advance(hours=1)
    async with test_session_factory() as other:
        edited = Commodity(id=steel.id, name="Iron", code="STL")
        merged = await persist_audited(other, edited, is_new=False)
        assert merged in other
        assert merged.name == "Iron"

    async with test_session_factory() as fresh:
        stored = await fresh.get(Commodity, steel.id)
        assert stored.name == "Iron"
        assert stored.code == "STL"
        assert _naive(stored.created_at) == _naive(created_at)
        assert _naive(stored.updated_at) == _naive(updated_at)


async def test_attached_update_returns_same_instance(test_db, clock):
    steel = await persist_audited(test_db, Commodity(name="Steel", code="STL"), is_new=True)

    steel.code = "STE"
    returned = await persist_audited(test_db, steel, is_new=False)

    assert returned is steel
    assert await test_db.get(Commodity, steel.id) is steel
