"""Domain Types — id wrapper, entity kinds, immutable claim set."""

from dataclasses import FrozenInstanceError

import pytest

from freight.core.domain_types import ClaimSet, EntityKind, IdentityId


def test_identity_id_wraps_int():
    assert IdentityId(3) == 3


def test_entity_kind_has_three_kinds():
    assert {k.value for k in EntityKind} == {"user", "commodity", "carrier"}


def test_claim_set_is_frozen():
    claims = ClaimSet(subject_id=IdentityId(1), email="a@b.com", display_name="A B")
    with pytest.raises(FrozenInstanceError):
        claims.email = "c@d.com"
