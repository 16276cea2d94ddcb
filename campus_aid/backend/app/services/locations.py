# campus_aid/backend/app/services/locations.py

from __future__ import annotations

import json
import logging
import secrets
import string
import time
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from ..db import utcnow
from ..errors import NotFound, ValidationFailure
from ..models import CampusLocation, QRCode
from ..models.enums import LocationType
from ..schemas.location import QRCoordinates, QRMetadata, QRPayload
from .entity_store import EntityStore

logger = logging.getLogger(__name__)

LOCATIONS = "locations"
QR_CODES = "qr_codes"

_BASE36 = string.digits + string.ascii_lowercase


class LocationService:
    def __init__(self, store: EntityStore):
        self.store = store

    def create_location(self, data: Dict[str, Any]) -> CampusLocation:
        location = self.store.create(LOCATIONS, data)
        logger.info("Location %s (%s) created", location.id, location.name)
        return location

    def get_location_by_id(self, location_id: str) -> CampusLocation:
        location = self.store.get_by_id(LOCATIONS, location_id)
        if location is None:
            raise NotFound(f"Location '{location_id}' not found")
        return location

    def get_all_locations(self) -> List[CampusLocation]:
        return self.store.get_all(LOCATIONS, order_field="name", direction="asc")

    def get_locations_by_type(self, location_type: str) -> List[CampusLocation]:
        return self.store.get_where(LOCATIONS, "type", "==", LocationType(location_type).value)

    def get_locations_by_building(self, building: str) -> List[CampusLocation]:
        return self.store.get_where(LOCATIONS, "building", "==", building)

    def update_location(self, location_id: str, updates: Dict[str, Any]) -> CampusLocation:
        self.get_location_by_id(location_id)
        return self.store.update(LOCATIONS, location_id, updates)

    def delete_location(self, location_id: str) -> None:
        self.get_location_by_id(location_id)
        # Codes printed for this location stop resolving with it
        for qr in self.store.get_where(QR_CODES, "location_id", "==", location_id):
            self.store.delete(QR_CODES, qr.id)
        self.store.delete(LOCATIONS, location_id)

    def search_locations(self, term: str) -> List[CampusLocation]:
        """Case-insensitive match on name, description or building."""
        needle = (term or "").strip().lower()
        if not needle:
            return self.get_all_locations()
        return [
            loc for loc in self.get_all_locations()
            if needle in loc.name.lower()
            or needle in (loc.description or "").lower()
            or needle in (loc.building or "").lower()
        ]


def generate_qr_code() -> str:
    suffix = "".join(secrets.choice(_BASE36) for _ in range(9))
    return f"QR_{int(time.time() * 1000)}_{suffix}"


def generate_qr_data(location: CampusLocation) -> QRPayload:
    return QRPayload(
        location_id=location.id,
        type="location",
        coordinates=QRCoordinates(latitude=location.latitude, longitude=location.longitude),
        metadata=QRMetadata(
            building=location.building,
            floor=location.floor,
            description=location.description,
        ),
    )


def generate_qr_string(location: CampusLocation) -> str:
    return generate_qr_data(location).model_dump_json()


def parse_qr_data(raw: str) -> Optional[QRPayload]:
    """Decode a scanned QR payload; None when it is not one of ours."""
    try:
        return QRPayload.model_validate(json.loads(raw))
    except (ValueError, TypeError, ValidationError):
        return None


class QRService:
    def __init__(self, store: EntityStore, locations: Optional[LocationService] = None):
        self.store = store
        self.locations = locations or LocationService(store)

    def create_qr_code(self, location_id: str) -> QRCode:
        location = self.locations.get_location_by_id(location_id)
        code = generate_qr_code()
        qr = self.store.create(
            QR_CODES,
            {"location_id": location.id, "qr_code": code, "created_at": utcnow(), "is_active": True},
        )
        # Keep the location pointing at its latest code
        self.store.update(LOCATIONS, location.id, {"qr_code": code})
        logger.info("QR code %s issued for location %s", code, location.id)
        return qr

    def get_qr_code_by_id(self, qr_id: str) -> QRCode:
        qr = self.store.get_by_id(QR_CODES, qr_id)
        if qr is None:
            raise NotFound(f"QR code '{qr_id}' not found")
        return qr

    def get_qr_code_by_code(self, code: str) -> Optional[QRCode]:
        matches = self.store.get_where(QR_CODES, "qr_code", "==", code)
        return matches[0] if matches else None

    def get_location_by_qr_code(self, code: str) -> Optional[CampusLocation]:
        """The location behind an active code, or None."""
        qr = self.get_qr_code_by_code(code)
        if qr is None or not qr.is_active:
            return None
        return self.store.get_by_id(LOCATIONS, qr.location_id)

    def get_all_qr_codes(self) -> List[QRCode]:
        """Active codes only."""
        return self.store.get_where(QR_CODES, "is_active", "==", True)

    def update_qr_code(self, qr_id: str, updates: Dict[str, Any]) -> QRCode:
        if "qr_code" in updates:
            raise ValidationFailure("QR code values cannot be changed; issue a new code instead")
        self.get_qr_code_by_id(qr_id)
        return self.store.update(QR_CODES, qr_id, updates)

    def activate_qr_code(self, qr_id: str) -> QRCode:
        return self.update_qr_code(qr_id, {"is_active": True})

    def deactivate_qr_code(self, qr_id: str) -> QRCode:
        return self.update_qr_code(qr_id, {"is_active": False})
