# tests/test_locations_qr.py

import json
import re

import pytest

from campus_aid.backend.app.errors import NotFound, ValidationFailure
from campus_aid.backend.app.services.locations import (
    LocationService,
    QRService,
    generate_qr_code,
    generate_qr_string,
    parse_qr_data,
)


def _create(locations, name, building=None, type_="academic", description=None):
    return locations.create_location(
        {
            "name": name,
            "type": type_,
            "latitude": 11.02,
            "longitude": 76.96,
            "building": building,
            "description": description,
            "floor": "1",
        }
    )


def test_qr_code_format():
    code = generate_qr_code()
    assert re.fullmatch(r"QR_\d{13}_[0-9a-z]{9}", code)
    assert generate_qr_code() != code


def test_search_is_case_insensitive_over_name_description_building(store):
    locations = LocationService(store)
    _create(locations, "Central Library", building="Block A")
    _create(locations, "Chem Lab", building="Science Block", description="Fume hoods")
    _create(locations, "Canteen", type_="facility")

    assert [l.name for l in locations.search_locations("LIBRARY")] == ["Central Library"]
    assert [l.name for l in locations.search_locations("fume")] == ["Chem Lab"]
    assert {l.name for l in locations.search_locations("block")} == {"Central Library", "Chem Lab"}
    assert len(locations.search_locations("  ")) == 3


def test_filters_by_type_and_building(store):
    locations = LocationService(store)
    _create(locations, "Library", building="A")
    _create(locations, "Canteen", building="A", type_="facility")

    assert [l.name for l in locations.get_locations_by_type("facility")] == ["Canteen"]
    assert len(locations.get_locations_by_building("A")) == 2
    assert [l.name for l in locations.get_all_locations()] == ["Canteen", "Library"]


def test_qr_lifecycle(store):
    locations = LocationService(store)
    qr = QRService(store, locations)
    library = _create(locations, "Library")

    code = qr.create_qr_code(library.id)
    assert code.is_active
    assert locations.get_location_by_id(library.id).qr_code == code.qr_code
    assert qr.get_location_by_qr_code(code.qr_code).id == library.id

    qr.deactivate_qr_code(code.id)
    assert qr.get_location_by_qr_code(code.qr_code) is None
    assert qr.get_all_qr_codes() == []

    qr.activate_qr_code(code.id)
    assert qr.get_location_by_qr_code(code.qr_code).id == library.id
    assert qr.get_location_by_qr_code("QR_0_unknown") is None


def test_qr_for_missing_location(store):
    with pytest.raises(NotFound):
        QRService(store).create_qr_code("no-such-location")


def test_qr_value_is_immutable(store):
    locations = LocationService(store)
    qr = QRService(store, locations)
    code = qr.create_qr_code(_create(locations, "Gym").id)
    with pytest.raises(ValidationFailure):
        qr.update_qr_code(code.id, {"qr_code": "QR_1_aaaaaaaaa"})


def test_deleting_location_removes_its_codes(store):
    locations = LocationService(store)
    qr = QRService(store, locations)
    gym = _create(locations, "Gym")
    code = qr.create_qr_code(gym.id)

    locations.delete_location(gym.id)
    assert qr.get_qr_code_by_code(code.qr_code) is None
    with pytest.raises(NotFound):
        locations.delete_location(gym.id)


def test_qr_payload_round_trip_and_bad_input(store):
    locations = LocationService(store)
    lab = _create(locations, "Physics Lab", building="Science Block", description="Optics")

    raw = generate_qr_string(lab)
    assert json.loads(raw)["type"] == "location"

    payload = parse_qr_data(raw)
    assert payload.location_id == lab.id
    assert payload.coordinates.latitude == pytest.approx(11.02)
    assert payload.metadata.building == "Science Block"

    assert parse_qr_data("not json") is None
    assert parse_qr_data('{"type": "location"}') is None
    assert parse_qr_data("[1, 2]") is None
