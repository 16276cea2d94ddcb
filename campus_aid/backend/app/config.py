# campus_aid/backend/app/config.py
import os
from pathlib import Path

from dotenv import load_dotenv

# Load settings from .env at project root
load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL")

# Token auth
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "campus-aid-secret-key-change-in-production")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24))

# Seeded on startup if no user with this email exists
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@campus.edu")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")

# Blob storage (lectures, syllabus files, ticket attachments)
UPLOAD_DIR = Path(os.getenv("UPLOAD_DIR", "uploads")).resolve()
FILES_BASE_URL = os.getenv("FILES_BASE_URL", "/files").rstrip("/")

TICKET_NUMBER_MAX_ATTEMPTS = int(os.getenv("TICKET_NUMBER_MAX_ATTEMPTS", 10))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
