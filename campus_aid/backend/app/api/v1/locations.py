# campus_aid/backend/app/api/v1/locations.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ...auth import get_current_user, require_admin
from ...db import get_db
from ...errors import NotFound
from ...models.enums import LocationType
from ...models.user import User
from ...schemas.location import (
    LocationCreate,
    LocationRead,
    LocationUpdate,
    QRCodeCreate,
    QRCodeRead,
    QRPayload,
    QRScan,
)
from ...services.entity_store import EntityStore
from ...services.locations import LocationService, QRService, generate_qr_data, parse_qr_data

router = APIRouter(prefix="/locations", tags=["locations"])
qr_router = APIRouter(prefix="/qr-codes", tags=["qr-codes"])


@router.get("/", response_model=List[LocationRead])
def list_locations(
    location_type: Optional[LocationType] = Query(None, alias="type"),
    building: Optional[str] = None,
    q: Optional[str] = None,
    db: Session = Depends(get_db),
    _user: User = Depends(get_current_user),
):
    service = LocationService(EntityStore(db))
    if q:
        return service.search_locations(q)
    if location_type is not None:
        return service.get_locations_by_type(location_type.value)
    if building:
        return service.get_locations_by_building(building)
    return service.get_all_locations()


@router.post("/", response_model=LocationRead, status_code=status.HTTP_201_CREATED)
def create_location(payload: LocationCreate, db: Session = Depends(get_db), _admin: User = Depends(require_admin)):
    return LocationService(EntityStore(db)).create_location(payload.model_dump())


@router.get("/{location_id}", response_model=LocationRead)
def get_location(location_id: str, db: Session = Depends(get_db), _user: User = Depends(get_current_user)):
    return LocationService(EntityStore(db)).get_location_by_id(location_id)


@router.get("/{location_id}/qr-data", response_model=QRPayload)
def location_qr_data(location_id: str, db: Session = Depends(get_db), _user: User = Depends(get_current_user)):
    """The JSON payload to print on this location's QR code."""
    return generate_qr_data(LocationService(EntityStore(db)).get_location_by_id(location_id))


@router.patch("/{location_id}", response_model=LocationRead)
def update_location(
    location_id: str,
    payload: LocationUpdate,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_admin),
):
    return LocationService(EntityStore(db)).update_location(location_id, payload.model_dump(exclude_unset=True))


@router.delete("/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_location(location_id: str, db: Session = Depends(get_db), _admin: User = Depends(require_admin)):
    LocationService(EntityStore(db)).delete_location(location_id)


# QR codes


@qr_router.get("/", response_model=List[QRCodeRead])
def list_qr_codes(db: Session = Depends(get_db), _user: User = Depends(get_current_user)):
    return QRService(EntityStore(db)).get_all_qr_codes()


@qr_router.post("/", response_model=QRCodeRead, status_code=status.HTTP_201_CREATED)
def create_qr_code(payload: QRCodeCreate, db: Session = Depends(get_db), _admin: User = Depends(require_admin)):
    return QRService(EntityStore(db)).create_qr_code(payload.location_id)


@qr_router.post("/scan", response_model=LocationRead)
def scan_qr_code(payload: QRScan, db: Session = Depends(get_db), _user: User = Depends(get_current_user)):
    """Resolve scanned text, either a printed JSON payload or a bare code, to its location."""
    store = EntityStore(db)
    decoded = parse_qr_data(payload.data)
    if decoded is not None:
        return LocationService(store).get_location_by_id(decoded.location_id)

    location = QRService(store).get_location_by_qr_code(payload.data.strip())
    if location is None:
        raise NotFound("Unknown or inactive QR code")
    return location


@qr_router.get("/{qr_id}", response_model=QRCodeRead)
def get_qr_code(qr_id: str, db: Session = Depends(get_db), _user: User = Depends(get_current_user)):
    return QRService(EntityStore(db)).get_qr_code_by_id(qr_id)


@qr_router.post("/{qr_id}/activate", response_model=QRCodeRead)
def activate_qr_code(qr_id: str, db: Session = Depends(get_db), _admin: User = Depends(require_admin)):
    return QRService(EntityStore(db)).activate_qr_code(qr_id)


@qr_router.post("/{qr_id}/deactivate", response_model=QRCodeRead)
def deactivate_qr_code(qr_id: str, db: Session = Depends(get_db), _admin: User = Depends(require_admin)):
    return QRService(EntityStore(db)).deactivate_qr_code(qr_id)
