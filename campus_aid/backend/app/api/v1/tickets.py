# campus_aid/backend/app/api/v1/tickets.py

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile, status
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...db import get_db
from ...errors import PermissionDenied
from ...models.enums import TicketStatus
from ...models.user import User
from ...schemas.ticket import AttachmentRead, TicketActions, TicketCreate, TicketRead, TicketStatusUpdate
from ...services import routing
from ...services.entity_store import EntityStore
from ...services.storage import BlobStorage, get_storage
from ...services.tickets import TicketService

router = APIRouter(prefix="/tickets", tags=["tickets"])

ATTACHMENT_FOLDER = "attachments"


def _visible_ticket(service: TicketService, ticket_id: str, user: User):
    ticket = service.get_ticket_by_id(ticket_id)
    if not service.can_see(user, ticket):
        raise PermissionDenied("You cannot view this ticket")
    return ticket


@router.post(
    "/",
    response_model=TicketRead,
    status_code=status.HTTP_201_CREATED,
)
def create_ticket(
    payload: TicketCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return TicketService(EntityStore(db)).create_ticket(current_user, payload)


@router.get("/", response_model=List[TicketRead])
def list_tickets(
    status_filter: Optional[TicketStatus] = Query(None, alias="status"),
    department: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    tickets = TicketService(EntityStore(db)).get_visible_tickets(current_user)
    if status_filter is not None:
        tickets = [t for t in tickets if t.status == status_filter.value]
    if department:
        tickets = [t for t in tickets if t.department == department]
    return tickets


@router.get("/mine", response_model=List[TicketRead])
def my_tickets(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return TicketService(EntityStore(db)).get_user_tickets(current_user.id)


@router.post(
    "/attachments",
    response_model=AttachmentRead,
    status_code=status.HTTP_201_CREATED,
)
def upload_attachment(
    file: UploadFile = File(...),
    storage: BlobStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    path = storage.generate_path(f"{ATTACHMENT_FOLDER}/{current_user.id}", file.filename)
    return AttachmentRead(url=storage.upload(path, file.file))


@router.get("/{ticket_id}", response_model=TicketRead)
def get_ticket(ticket_id: str, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return _visible_ticket(TicketService(EntityStore(db)), ticket_id, current_user)


@router.get("/{ticket_id}/actions", response_model=TicketActions)
def ticket_actions(ticket_id: str, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    service = TicketService(EntityStore(db))
    ticket = _visible_ticket(service, ticket_id, current_user)
    can_handle = service.can_handle(current_user, ticket)
    return TicketActions(
        ticket_id=ticket.id,
        status=ticket.status,
        can_handle=can_handle,
        available_actions=routing.get_available_actions(current_user.role, ticket.status) if can_handle else [],
        overdue=service.is_overdue(ticket),
    )


@router.patch("/{ticket_id}/status", response_model=TicketRead)
def update_status(
    ticket_id: str,
    payload: TicketStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return TicketService(EntityStore(db)).update_ticket_status(
        ticket_id, current_user, payload.status, payload.notes
    )
