# campus_aid/backend/app/api/v1/auth.py

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ...auth import create_access_token, get_current_user, get_password_hash, verify_password
from ...db import get_db
from ...errors import AuthenticationRequired, PermissionDenied
from ...models.enums import UserRole
from ...models.user import User
from ...schemas.user import LoginRequest, TokenRead, UserCreate, UserRead
from ...services.entity_store import EntityStore
from ...services.users import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _token_for(user: User, response: Response) -> TokenRead:
    token = create_access_token({"sub": user.id, "role": user.role})
    response.set_cookie("access_token", token, httponly=True, samesite="lax")
    return TokenRead(access_token=token, user=UserRead.model_validate(user))


@router.post("/signup", response_model=TokenRead, status_code=status.HTTP_201_CREATED)
def signup(payload: UserCreate, response: Response, db: Session = Depends(get_db)):
    # Admin accounts are seeded or created by other admins, never self-registered
    if payload.role == UserRole.ADMIN:
        raise PermissionDenied("Admin accounts cannot be self-registered")

    data = payload.model_dump(exclude={"password"})
    data["role"] = payload.role.value
    data["password_hash"] = get_password_hash(payload.password)
    user = UserService(EntityStore(db)).create_user(data)
    return _token_for(user, response)


@router.post("/login", response_model=TokenRead)
def login(payload: LoginRequest, response: Response, db: Session = Depends(get_db)):
    user = UserService(EntityStore(db)).get_user_by_email(payload.email)
    if user is None or not verify_password(payload.password, user.password_hash):
        logger.info("Failed login for %s", payload.email)
        raise AuthenticationRequired("Invalid email or password")
    return _token_for(user, response)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(response: Response):
    response.delete_cookie("access_token")


@router.get("/me", response_model=UserRead)
def me(current_user: User = Depends(get_current_user)):
    return current_user
