# campus_aid/backend/app/auth.py

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Depends, Request
from sqlalchemy.orm import Session
from werkzeug.security import check_password_hash, generate_password_hash

from . import config
from .db import get_db
from .errors import AuthenticationRequired, PermissionDenied
from .models.enums import UserRole
from .models.user import User


def get_password_hash(password: str) -> str:
    return generate_password_hash(password, method="pbkdf2:sha256")


def verify_password(password: str, password_hash: str) -> bool:
    return check_password_hash(password_hash, password)


def create_access_token(data: dict, expires_minutes: Optional[int] = None) -> str:
    """Signed JWT carrying `data` plus issue/expiry times."""
    now = datetime.now(timezone.utc)
    payload = dict(data)
    payload["iat"] = now
    payload["exp"] = now + timedelta(minutes=expires_minutes or config.ACCESS_TOKEN_EXPIRE_MINUTES)
    return jwt.encode(payload, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    try:
        return jwt.decode(token, config.JWT_SECRET_KEY, algorithms=[config.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None


def _token_from_request(request: Request) -> Optional[str]:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() == "bearer" and token:
        return token.strip()
    # Browser sessions keep the token in a cookie
    return request.cookies.get("access_token")


def get_current_user(request: Request, db: Session = Depends(get_db)) -> User:
    token = _token_from_request(request)
    if not token:
        raise AuthenticationRequired("Not authenticated")

    payload = decode_access_token(token)
    if not payload or "sub" not in payload:
        raise AuthenticationRequired("Invalid or expired token")

    user = db.get(User, payload["sub"])
    if user is None:
        raise AuthenticationRequired("User no longer exists")
    return user


def require_roles(*roles: UserRole):
    """Dependency factory: the current user must hold one of `roles`."""
    allowed = {r.value for r in roles}

    def dependency(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in allowed:
            raise PermissionDenied(
                f"Role '{current_user.role}' may not do this; needs one of {', '.join(sorted(allowed))}"
            )
        return current_user

    return dependency


require_admin = require_roles(UserRole.ADMIN)
