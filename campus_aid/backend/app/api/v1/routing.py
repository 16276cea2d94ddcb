# campus_aid/backend/app/api/v1/routing.py

from fastapi import APIRouter, Depends

from ...auth import get_current_user
from ...models.user import User
from ...schemas.routing import RoutingPreviewRead, RoutingPreviewRequest
from ...services.routing import route_ticket

router = APIRouter(prefix="/routing", tags=["routing"])


@router.post("/preview", response_model=RoutingPreviewRead)
def preview_routing(payload: RoutingPreviewRequest, _user: User = Depends(get_current_user)):
    """Where a ticket with this category/issue type would go, before submitting it."""
    return route_ticket(payload.category, payload.issue_type)
