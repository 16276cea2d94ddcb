# campus_aid/backend/app/schemas/location.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.enums import LocationType


class LocationCreate(BaseModel):
    name: str = Field(min_length=1)
    type: LocationType
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    description: Optional[str] = None
    qr_code: Optional[str] = None
    building: Optional[str] = None
    floor: Optional[str] = None

    model_config = ConfigDict(use_enum_values=True)


class LocationUpdate(BaseModel):
    name: Optional[str] = None
    type: Optional[LocationType] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    description: Optional[str] = None
    qr_code: Optional[str] = None
    building: Optional[str] = None
    floor: Optional[str] = None

    model_config = ConfigDict(use_enum_values=True)


class LocationRead(BaseModel):
    id: str
    name: str
    type: LocationType
    latitude: float
    longitude: float
    description: Optional[str] = None
    qr_code: Optional[str] = None
    building: Optional[str] = None
    floor: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class QRCodeCreate(BaseModel):
    location_id: str


class QRCodeRead(BaseModel):
    id: str
    location_id: str
    qr_code: str
    created_at: datetime
    is_active: bool

    model_config = ConfigDict(from_attributes=True)


class QRCoordinates(BaseModel):
    latitude: float
    longitude: float


class QRMetadata(BaseModel):
    building: Optional[str] = None
    floor: Optional[str] = None
    description: Optional[str] = None


class QRPayload(BaseModel):
    """What a printed campus QR code encodes (as JSON)."""

    location_id: str
    type: str = "location"
    coordinates: QRCoordinates
    metadata: Optional[QRMetadata] = None


class QRScan(BaseModel):
    """Raw text read off a QR code: a JSON payload or a bare code."""

    data: str = Field(min_length=1)
