# campus_aid/backend/app/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from . import config
from .api.v1.assistant import router as assistant_router
from .api.v1.auth import router as auth_router
from .api.v1.dashboard import router as dashboard_router
from .api.v1.lectures import router as lectures_router
from .api.v1.locations import qr_router
from .api.v1.locations import router as locations_router
from .api.v1.notices import router as notices_router
from .api.v1.routing import router as routing_router
from .api.v1.syllabus import router as syllabus_router
from .api.v1.tickets import router as tickets_router
from .api.v1.users import router as users_router
from .auth import get_password_hash
from .db import SessionLocal
from .errors import CampusAidError
from .models.enums import UserRole
from .services.entity_store import EntityStore
from .services.users import UserService

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Campus Aid Buddy")


@app.exception_handler(CampusAidError)
async def campus_aid_error_handler(request: Request, exc: CampusAidError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


#Seed admin

@app.on_event("startup")
def seed_initial_users():
    db = SessionLocal()
    try:
        users = UserService(EntityStore(db))
        if users.get_user_by_email(config.ADMIN_EMAIL) is None:
            users.create_user(
                {
                    "email": config.ADMIN_EMAIL,
                    "name": "Administrator",
                    "role": UserRole.ADMIN.value,
                    "password_hash": get_password_hash(config.ADMIN_PASSWORD),
                }
            )
            logger.info("Seeded admin user %s", config.ADMIN_EMAIL)
    finally:
        db.close()


@app.get("/health")
def health_check():
    return {"status": "ok"}


for _router in (
    auth_router,
    users_router,
    tickets_router,
    routing_router,
    dashboard_router,
    notices_router,
    lectures_router,
    syllabus_router,
    locations_router,
    qr_router,
    assistant_router,
):
    app.include_router(_router, prefix="/api/v1")

# Uploaded blobs (lecture videos, syllabus files, ticket attachments)
config.UPLOAD_DIR.mkdir(parents=True, exist_ok=True)
app.mount(config.FILES_BASE_URL, StaticFiles(directory=config.UPLOAD_DIR), name="files")
