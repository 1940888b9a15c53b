# tests/domain/test_location_store.py
import math

from campus_nav.domain.entities.geography import Location, Point
from campus_nav.domain.store import LocationStore


def test_upsert_and_lookup():
    s = LocationStore()
    s.upsert("Main Gate", "Gate", 0.0, 0.0)
    assert s.exists("Main Gate")
    assert not s.exists("main gate")  # case-sensitive
    loc = s.get("Main Gate")
    assert loc.category == "Gate"
    assert loc.position == Point(0.0, 0.0)
    assert s.get("Nowhere") is None


def test_upsert_replaces_record_but_keeps_slot():
    s = LocationStore()
    s.upsert("A", "Gate", 0.0, 0.0)
    s.upsert("B", "Library", 3.0, 4.0)
    s.upsert("A", "Office", 6.0, 8.0)

    assert len(s) == 2
    assert s.names() == ["A", "B"]
    assert s.get("A").category == "Office"
    assert s.distance_between("A", "B") == 5.0


def test_distance_between_unknown_is_unreachable_sentinel():
    s = LocationStore()
    s.upsert("A", "Gate", 0.0, 0.0)
    assert s.distance_between("A", "Ghost") == math.inf
    assert s.distance_between("Ghost", "A") == math.inf


def test_all_names_is_a_fresh_set():
    s = LocationStore()
    s.upsert("A", "Gate", 0.0, 0.0)
    names = s.all_names()
    names.add("B")
    assert s.all_names() == {"A"}


def test_location_equality_is_by_name_only():
    a1 = Location.at("Great Hall", "Building", 150, 100)
    a2 = Location.at("Great Hall", "Residence", 0, 0)
    b = Location.at("Volta Hall", "Building", 150, 100)
    assert a1 == a2
    assert hash(a1) == hash(a2)
    assert a1 != b
    assert len({a1, a2, b}) == 2


def test_location_distance_and_str():
    a = Location.at("Main Gate", "Gate", 0, 0)
    b = Location.at("Balme Library", "Library", 100, 50)
    assert math.isclose(a.distance_to(b), math.sqrt(100**2 + 50**2))
    assert str(b) == "Balme Library (Library) at coordinates (100.00, 50.00)"
