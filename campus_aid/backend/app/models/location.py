# campus_aid/backend/app/models/location.py
import uuid

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, String, Text

from ..db import Base, utcnow


class CampusLocation(Base):
    __tablename__ = "locations"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False)
    type = Column(String(50), nullable=False, index=True)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    description = Column(Text, nullable=True)
    qr_code = Column(String(100), nullable=True)
    building = Column(String(255), nullable=True, index=True)
    floor = Column(String(50), nullable=True)


class QRCode(Base):
    __tablename__ = "qr_codes"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    location_id = Column(String(36), ForeignKey("locations.id"), nullable=False)
    qr_code = Column(String(100), unique=True, nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
