"""Registration Service — end-to-end behavior of register, update, and get.

Tests cover:
    - Successful register assigns sequential ids and stamps creator/timestamp
    - Rejected registrations leave the store untouched
    - Duplicate hash, capacity exhaustion, unauthorized caller
    - Update: not found, wrong caller, success replaces only mutable fields,
      single overwritten update-log entry
    - Update may claim another route's hash (documented relaxation)
    - Concurrent registrations keep ids dense
"""

import threading
from dataclasses import asdict

import pytest

from route_registry.core.errors import RouteErrorCode
from route_registry.core.route_store import InMemoryRouteStore
from route_registry.core.route_record import Geolocation, RouteUpdate
from route_registry.services.registration_service import RegistrationService
from tests.route_factory import (
    AUTHORITY, OUTSIDER, HASH_A, HASH_B, HASH_C, StubAuthorities, make_draft,
)


@pytest.fixture
def store():
    return InMemoryRouteStore()


@pytest.fixture
def service(store):
    return RegistrationService(store, StubAuthorities(AUTHORITY))


# ─── register ────────────────────────────────────────────────────

def test_register_valid_route_returns_id_zero(service):
    result = service.register(make_draft(), AUTHORITY, current_time=12)

    assert result.ok
    assert result.value == 0
    route = service.get_route(0).unwrap()
    assert route.description == "Safe path"
    assert route.creator == AUTHORITY
    assert route.timestamp == 12


def test_register_round_trips_every_submitted_field(service):
    draft = make_draft(emergency_status=True, route_type="water", weather_condition="rainy")
    route_id = service.register(draft, AUTHORITY, 3).unwrap()

    route = service.get_route(route_id).unwrap()
    assert route.to_dict() == {
        **asdict(draft),
        "id": 0,
        "timestamp": 3,
        "creator": AUTHORITY,
    }


def test_register_assigns_sequential_ids(service):
    ids = [
        service.register(make_draft(hash=h), AUTHORITY, n).value
        for n, h in enumerate((HASH_A, HASH_B, HASH_C))
    ]
    assert ids == [0, 1, 2]


def test_register_invalid_hash_stores_nothing(service, store):
    result = service.register(make_draft(hash="bad"), AUTHORITY, 1)

    assert not result.ok
    assert result.error == RouteErrorCode.INVALID_HASH
    assert store.count() == 0
    assert store.next_id() == 0


def test_register_invalid_geolocation(service):
    result = service.register(
        make_draft(geolocation=Geolocation(lat=100, lon=0)), AUTHORITY, 1,
    )
    assert result.error == RouteErrorCode.INVALID_GEOLOCATION


def test_register_duplicate_hash_rejected(service, store):
    assert service.register(make_draft(description="desc"), AUTHORITY, 1).ok

    result = service.register(make_draft(description="desc2"), AUTHORITY, 2)

    assert result.error == RouteErrorCode.ROUTE_ALREADY_EXISTS
    assert store.count() == 1
    assert service.get_route(0).unwrap().description == "desc"


def test_register_by_non_authority_rejected(service, store):
    result = service.register(make_draft(), OUTSIDER, 1)
    assert result.error == RouteErrorCode.NOT_AUTHORIZED
    assert store.count() == 0


def test_register_beyond_capacity_always_fails():
    store = InMemoryRouteStore(max_routes=2)
    service = RegistrationService(store, StubAuthorities(AUTHORITY))
    assert service.register(make_draft(hash=HASH_A), AUTHORITY, 1).ok
    assert service.register(make_draft(hash=HASH_B), AUTHORITY, 2).ok

    for attempt in range(3):
        result = service.register(make_draft(hash=HASH_C), AUTHORITY, 3 + attempt)
        assert result.error == RouteErrorCode.MAX_ROUTES_EXCEEDED
    assert store.count() == 2


def test_concurrent_registrations_keep_ids_dense(service, store):
    hashes = [f"{n:064x}" for n in range(40)]
    results = []

    def worker(h):
        results.append(service.register(make_draft(hash=h), AUTHORITY, 1))

    threads = [threading.Thread(target=worker, args=(h,)) for h in hashes]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(r.value for r in results) == list(range(40))
    assert store.count() == 40


# ─── update ──────────────────────────────────────────────────────

def test_update_changes_only_mutable_fields(service, store):
    service.register(make_draft(description="old", safety_level=2), AUTHORITY, 1)
    before = service.get_route(0).unwrap()

    result = service.update(0, HASH_B, "new", 4, AUTHORITY, current_time=9)

    assert result.ok and result.value is True
    after = service.get_route(0).unwrap()
    assert (after.hash, after.description, after.safety_level, after.timestamp) == (
        HASH_B, "new", 4, 9,
    )
    assert after.geolocation == before.geolocation
    assert after.boundaries == before.boundaries
    assert after.creator == before.creator
    assert after.route_type == before.route_type
    assert after.distance == before.distance
    assert after.emergency_status == before.emergency_status
    assert store.get_update(0) == RouteUpdate(HASH_B, "new", 4, 9, AUTHORITY)


def test_update_log_keeps_only_latest_entry(service):
    service.register(make_draft(), AUTHORITY, 1)
    service.update(0, HASH_B, "first", 2, AUTHORITY, 2)
    service.update(0, HASH_C, "second", 5, AUTHORITY, 3)

    latest = service.get_route_update(0).unwrap()
    assert latest.update_description == "second"
    assert latest.update_timestamp == 3


def test_update_nonexistent_route(service, store):
    result = service.update(99, HASH_B, "x", 3, AUTHORITY, 1)
    assert result.error == RouteErrorCode.ROUTE_NOT_FOUND
    assert store.count() == 0
    assert store.get_update(99) is None


def test_update_by_other_caller_rejected(service):
    service.register(make_draft(), AUTHORITY, 1)

    result = service.update(0, HASH_B, "hijack", 1, OUTSIDER, 2)

    assert result.error == RouteErrorCode.NOT_AUTHORIZED
    assert service.get_route(0).unwrap().description == "Safe path"
    assert not service.get_route_update(0).ok


def test_update_creator_need_not_remain_an_authority(store):
    authorities = StubAuthorities(AUTHORITY)
    service = RegistrationService(store, authorities)
    service.register(make_draft(), AUTHORITY, 1)
    authorities.principals.clear()

    assert service.update(0, HASH_B, "still mine", 3, AUTHORITY, 2).ok


def test_update_invalid_hash_leaves_route_unchanged(service):
    service.register(make_draft(), AUTHORITY, 1)

    result = service.update(0, "bad", "new", 4, AUTHORITY, 2)

    assert result.error == RouteErrorCode.INVALID_UPDATE_HASH
    route = service.get_route(0).unwrap()
    assert route.hash == HASH_A and route.timestamp == 1


def test_update_may_claim_another_routes_hash(service, store):
    """Update checks hash shape only; cross-route uniqueness is not enforced."""
    service.register(make_draft(hash=HASH_A), AUTHORITY, 1)
    service.register(make_draft(hash=HASH_B), AUTHORITY, 2)

    assert service.update(1, HASH_A, "same as route 0", 3, AUTHORITY, 3).ok

    assert service.get_route(0).unwrap().hash == HASH_A
    assert service.get_route(1).unwrap().hash == HASH_A
    # HASH_B is free again for a new registration
    assert service.register(make_draft(hash=HASH_B), AUTHORITY, 4).value == 2


# ─── get ─────────────────────────────────────────────────────────

def test_get_unknown_route(service):
    result = service.get_route(0)
    assert not result.ok
    assert result.error == RouteErrorCode.ROUTE_NOT_FOUND


def test_get_route_update_before_any_update(service):
    service.register(make_draft(), AUTHORITY, 1)
    assert service.get_route_update(0).error == RouteErrorCode.ROUTE_NOT_FOUND
