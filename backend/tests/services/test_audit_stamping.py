"""Audit Stamper — before_flush timestamps on every AuditMixin entity.

Invariants checked:
    - create: created_at == updated_at == flush instant
    - one flush, one instant: every entity in the unit of work shares it
    - update: updated_at advances, created_at is bit-identical even when the caller
      assigned a different created_at in memory
    - touching only created_at is not a modification (no updated_at bump)
    - stamping is generic: users, commodities and carriers all get it
"""

from datetime import datetime, timezone

from sqlalchemy import select

from freight.models import Carrier, Commodity, User


def _naive(dt: datetime) -> datetime:
    """SQLite hands back naive datetimes; compare in naive UTC."""
    return dt.astimezone(timezone.utc).replace(tzinfo=None) if dt.tzinfo else dt


async def _reload(session_factory, model, entity_id):
    async with session_factory() as fresh:
        return await fresh.get(model, entity_id)


async def test_create_sets_both_timestamps_to_flush_instant(test_db, clock):
    commodity = Commodity(name="Steel", code="STL")
    test_db.add(commodity)
    await test_db.commit()

    assert commodity.created_at == clock.now
    assert commodity.updated_at == commodity.created_at


async def test_caller_supplied_created_at_is_overwritten_on_insert(test_db, clock):
    bogus = datetime(1999, 1, 1, tzinfo=timezone.utc)
    commodity = Commodity(name="Steel", code="STL", created_at=bogus, updated_at=bogus)
    test_db.add(commodity)
    await test_db.commit()

    assert commodity.created_at == clock.now
    assert commodity.updated_at == clock.now


async def test_all_entities_in_one_flush_share_the_instant(test_db, monkeypatch):
    ticks = iter(datetime(2026, 1, 1, 0, 0, s, tzinfo=timezone.utc) for s in range(60))
    monkeypatch.setattr("freight.db.auditing.utc_now", lambda: next(ticks))

    steel = Commodity(name="Steel", code="STL")
    copper = Commodity(name="Copper", code="CPR")
    user = User(full_name="A B", email="a@b.com", password_hash="$2b$04$" + "x" * 53)
    test_db.add_all([steel, copper, user])
    await test_db.commit()

    assert steel.created_at == copper.created_at == user.created_at
    assert steel.updated_at == copper.updated_at == user.updated_at == steel.created_at


async def test_carriers_are_stamped_like_any_other_entity(test_db, clock):
    steel = Commodity(name="Steel", code="STL")
    test_db.add(steel)
    await test_db.flush()
    carrier = Carrier(name="Maersk", logo_url="https://logo/m.png", commodity_id=steel.id)
    test_db.add(carrier)
    await test_db.commit()

    assert carrier.created_at == carrier.updated_at == clock.now


async def test_update_advances_updated_at_only(test_db, test_session_factory, clock):
    commodity = Commodity(name="Steel", code="STL")
    test_db.add(commodity)
    await test_db.commit()
    created = clock.now

    later = clock.advance(minutes=5)
    commodity.name = "Stainless Steel"
    await test_db.commit()

    assert commodity.created_at == created
    assert commodity.updated_at == later

    stored = await _reload(test_session_factory, Commodity, commodity.id)
    assert _naive(stored.created_at) == _naive(created)
    assert _naive(stored.updated_at) == _naive(later)


async def test_update_ignores_caller_created_at(test_db, test_session_factory, clock):
    commodity = Commodity(name="Steel", code="STL")
    test_db.add(commodity)
    await test_db.commit()
    created = clock.now

    later = clock.advance(hours=1)
    commodity.name = "Iron"
    commodity.created_at = datetime(2000, 1, 1, tzinfo=timezone.utc)
    await test_db.commit()

    assert commodity.created_at == created
    assert commodity.updated_at == later
    stored = await _reload(test_session_factory, Commodity, commodity.id)
    assert _naive(stored.created_at) == _naive(created)


async def test_touching_only_created_at_is_not_a_modification(test_db, clock):
    commodity = Commodity(name="Steel", code="STL")
    test_db.add(commodity)
    await test_db.commit()
    created = clock.now

    clock.advance(hours=1)
    commodity.created_at = datetime(2000, 1, 1, tzinfo=timezone.utc)
    await test_db.commit()

    assert commodity.created_at == created
    assert commodity.updated_at == created


async def test_updated_at_is_non_decreasing_across_updates(test_db, clock):
    user = User(full_name="A B", email="a@b.com", password_hash="$2b$04$" + "x" * 53)
    test_db.add(user)
    await test_db.commit()

    seen = [user.updated_at]
    for minutes in (1, 2, 3):
        clock.advance(minutes=minutes)
        user.avatar_url = f"https://cdn/avatar-{minutes}.png"
        await test_db.commit()
        seen.append(user.updated_at)

    assert seen == sorted(seen)
    assert len(set(seen)) == 4


async def test_audited_rows_are_queryable_by_timestamp(test_db, clock):
    test_db.add(Commodity(name="Steel", code="STL"))
    await test_db.commit()
    result = await test_db.scalars(select(Commodity).where(Commodity.created_at.is_not(None)))
    assert len(result.all()) == 1
