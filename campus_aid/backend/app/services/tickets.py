# campus_aid/backend/app/services/tickets.py

from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import Callable, List, Optional

from sqlalchemy.exc import IntegrityError

from .. import config
from ..db import utcnow
from ..errors import AuthenticationRequired, Conflict, NotFound, PermissionDenied
from ..models import Ticket, TicketActivity, User
from ..models.enums import TicketPriority, TicketStatus, UserRole
from ..schemas.ticket import TicketCreate
from . import routing
from .entity_store import EntityStore

logger = logging.getLogger(__name__)

COLLECTION = "tickets"
CREATED_ACTION = "Ticket created"


def generate_ticket_number(now: Optional[datetime] = None, rng: Optional[random.Random] = None) -> str:
    """TKT + 2-digit year + 2-digit month + 4-digit random suffix, e.g. TKT24070042."""
    now = now or utcnow()
    rng = rng or random
    return f"TKT{now:%y%m}{rng.randrange(10000):04d}"


def status_change_action(new_status: str, notes: Optional[str] = None) -> str:
    status = TicketStatus(new_status).value
    return f"Status changed to {status}: {notes}" if notes else f"Status changed to {status}"


class TicketService:
    """
    Ticket lifecycle: creation, status transitions and the activity log.

    The acting user is always passed in explicitly; a missing actor is an
    AuthenticationRequired error rather than an anonymous write.
    """

    def __init__(self, store: EntityStore, number_generator: Callable[[], str] = generate_ticket_number):
        self.store = store
        self.number_generator = number_generator

    # Reads

    def get_ticket_by_id(self, ticket_id: str) -> Ticket:
        ticket = self.store.get_by_id(COLLECTION, ticket_id)
        if ticket is None:
            raise NotFound(f"Ticket '{ticket_id}' not found")
        return ticket

    def get_user_tickets(self, user_id: str) -> List[Ticket]:
        return self.store.get_ordered_where(COLLECTION, "submitted_by", "==", user_id, "created_at")

    def get_all_tickets(self) -> List[Ticket]:
        return self.store.get_all(COLLECTION, order_field="created_at")

    def get_tickets_by_status(self, status: str) -> List[Ticket]:
        return self.store.get_where(COLLECTION, "status", "==", TicketStatus(status).value)

    def get_tickets_by_department(self, department: str) -> List[Ticket]:
        return self.store.get_where(COLLECTION, "department", "==", department)

    def can_handle(self, user: User, ticket: Ticket) -> bool:
        """Staff of the routed department, or the role the ticket was assigned to."""
        if routing.can_user_handle_ticket(user.role, ticket.routing_department):
            return True
        return ticket.assigned_role is not None and user.role == ticket.assigned_role

    def can_see(self, user: User, ticket: Ticket) -> bool:
        return routing.can_view_ticket(user, ticket) or self.can_handle(user, ticket)

    def get_visible_tickets(self, user: Optional[User]) -> List[Ticket]:
        """Students get their own tickets; staff get every ticket they may see or work."""
        if user is None:
            raise AuthenticationRequired("Sign in to view tickets")
        if user.role == UserRole.STUDENT.value:
            return self.get_user_tickets(user.id)
        return [t for t in self.get_all_tickets() if self.can_see(user, t)]

    # Live updates

    def subscribe_to_user_tickets(self, user_id: str, callback) -> Callable[[], None]:
        return self.store.subscribe(
            COLLECTION, callback, where=("submitted_by", "==", user_id), order_field="created_at"
        )

    def subscribe_to_all_tickets(self, callback) -> Callable[[], None]:
        return self.store.subscribe(COLLECTION, callback, order_field="created_at")

    # Writes

    def create_ticket(self, submitter: Optional[User], data: TicketCreate) -> Ticket:
        if submitter is None:
            raise AuthenticationRequired("Sign in to submit a ticket")

        category = data.category.value
        routing_department = routing.classify_category(
            routing.routing_tag_for_category(category),
            data.issue_type,
        )
        rule = routing.get_routing(category)
        department = (data.department or "").strip() or routing_department.value
        priority = (data.priority or TicketPriority.MEDIUM).value
        location = data.location.model_dump(mode="json") if data.location else None

        for attempt in range(1, config.TICKET_NUMBER_MAX_ATTEMPTS + 1):
            ticket_number = self.number_generator()
            if self.store.get_where(COLLECTION, "ticket_number", "==", ticket_number):
                logger.warning("Ticket number %s already taken (attempt %d)", ticket_number, attempt)
                continue

            now = utcnow()
            document = {
                "ticket_number": ticket_number,
                "title": data.title,
                "description": data.description,
                "category": category,
                "issue_type": data.issue_type,
                "status": TicketStatus.PENDING.value,
                "priority": priority,
                "department": department,
                "routing_department": routing_department.value,
                "submitted_by": submitter.id,
                "submitter_name": submitter.name,
                "submitter_email": submitter.email,
                "submitter_roll_number": submitter.roll_number,
                "assigned_role": rule.assigned_role.value,
                "location": location,
                "attachments": list(data.attachments) if data.attachments else None,
                "created_at": now,
                "updated_at": now,
                "activity_log": [
                    TicketActivity(
                        position=0,
                        action=CREATED_ACTION,
                        performed_by=submitter.id,
                        performed_by_role=submitter.role,
                        timestamp=now,
                    )
                ],
            }
            try:
                ticket = self.store.create(COLLECTION, document)
            except IntegrityError:
                # Lost a race for the same number between check and insert
                self.store.rollback()
                logger.warning("Ticket number %s collided on insert (attempt %d)", ticket_number, attempt)
                continue

            logger.info(
                "Ticket %s created by %s (%s) category=%s routed_to=%s",
                ticket.ticket_number,
                submitter.id,
                submitter.role,
                category,
                routing_department.value,
            )
            return ticket

        raise Conflict("Could not allocate a unique ticket number, please retry")

    def update_ticket_status(
        self,
        ticket_id: str,
        actor: Optional[User],
        new_status,
        notes: Optional[str] = None,
    ) -> Ticket:
        if actor is None:
            raise AuthenticationRequired("Sign in to update tickets")

        ticket = self.get_ticket_by_id(ticket_id)
        target = TicketStatus(new_status)

        if not self.can_handle(actor, ticket):
            logger.warning(
                "Denied %s (%s) on ticket %s: department %s",
                actor.id, actor.role, ticket.ticket_number, ticket.routing_department,
            )
            raise PermissionDenied(
                f"Role '{actor.role}' cannot handle {ticket.routing_department} tickets"
            )

        if target not in routing.get_available_actions(actor.role, ticket.status):
            logger.warning(
                "Denied %s (%s) on ticket %s: %s -> %s",
                actor.id, actor.role, ticket.ticket_number, ticket.status, target.value,
            )
            raise PermissionDenied(
                f"Role '{actor.role}' cannot move a {ticket.status} ticket to {target.value}"
            )

        now = utcnow()
        entry = TicketActivity(
            position=len(ticket.activity_log),
            action=status_change_action(target.value, notes),
            performed_by=actor.id,
            performed_by_role=actor.role,
            notes=notes,
            timestamp=now,
        )
        updates = {
            "status": target.value,
            "updated_at": max(now, ticket.updated_at),
            "activity_log": list(ticket.activity_log) + [entry],
        }
        # Set on the first move into resolved and kept afterwards
        if target == TicketStatus.RESOLVED and ticket.resolved_at is None:
            updates["resolved_at"] = now

        previous = ticket.status
        ticket = self.store.update(COLLECTION, ticket.id, updates)
        logger.info(
            "Ticket %s: %s -> %s by %s (%s)",
            ticket.ticket_number, previous, target.value, actor.id, actor.role,
        )
        return ticket

    def is_overdue(self, ticket: Ticket, now: Optional[datetime] = None) -> bool:
        """Open tickets past their category's escalation window."""
        if ticket.status in (TicketStatus.RESOLVED.value, TicketStatus.REJECTED.value):
            return False
        return routing.should_escalate(ticket.created_at, ticket.category, now)
