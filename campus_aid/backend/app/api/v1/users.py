# campus_aid/backend/app/api/v1/users.py

from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ...auth import get_current_user, get_password_hash, require_admin
from ...db import get_db
from ...errors import NotFound
from ...models.enums import UserRole
from ...models.user import User
from ...schemas.user import UserCreate, UserRead, UserUpdate
from ...services.entity_store import EntityStore
from ...services.users import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/", response_model=List[UserRead])
def list_users(
    role: Optional[UserRole] = None,
    department: Optional[str] = None,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_admin),
):
    users = UserService(EntityStore(db))
    if role is not None:
        result = users.get_users_by_role(role.value)
    elif department:
        result = users.get_users_by_department(department)
    else:
        return users.get_all_users()
    if role is not None and department:
        result = [u for u in result if u.department == department]
    return result


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, db: Session = Depends(get_db), _admin: User = Depends(require_admin)):
    data = payload.model_dump(exclude={"password"})
    data["role"] = payload.role.value
    data["password_hash"] = get_password_hash(payload.password)
    return UserService(EntityStore(db)).create_user(data)


@router.patch("/me", response_model=UserRead)
def update_me(payload: UserUpdate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    updates = payload.model_dump(exclude_unset=True)
    if current_user.role != UserRole.STUDENT.value:
        updates.pop("roll_number", None)
    return UserService(EntityStore(db)).update_user(current_user.id, updates)


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: str, db: Session = Depends(get_db), _admin: User = Depends(require_admin)):
    user = UserService(EntityStore(db)).get_user_by_id(user_id)
    if user is None:
        raise NotFound(f"User '{user_id}' not found")
    return user


@router.patch("/{user_id}", response_model=UserRead)
def update_user(
    user_id: str,
    payload: UserUpdate,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_admin),
):
    return UserService(EntityStore(db)).update_user(user_id, payload.model_dump(exclude_unset=True))
