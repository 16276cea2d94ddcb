# campus_aid/backend/app/api/v1/dashboard.py

from dataclasses import asdict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...db import get_db
from ...models.user import User
from ...schemas.dashboard import DashboardRead
from ...services.dashboard import get_dashboard_insights, get_dashboard_modules
from ...services.entity_store import EntityStore
from ...services.tickets import TicketService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/", response_model=DashboardRead)
def dashboard(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    tickets = TicketService(EntityStore(db)).get_visible_tickets(current_user)
    return DashboardRead(
        role=current_user.role,
        modules=[asdict(m) for m in get_dashboard_modules(current_user.role, tickets)],
        insights=[asdict(i) for i in get_dashboard_insights(current_user.role, tickets)],
    )
