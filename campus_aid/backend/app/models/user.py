# campus_aid/backend/app/models/user.py
import uuid

from sqlalchemy import Column, DateTime, String

from ..db import Base, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False, index=True)
    department = Column(String(255), nullable=True, index=True)
    roll_number = Column(String(50), nullable=True)  # students only
    password_hash = Column(String(255), nullable=False)

    created_at = Column(DateTime, default=utcnow, nullable=False)
