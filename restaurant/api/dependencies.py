# restaurant/api/dependencies.py
from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from restaurant.data.database import get_db
from restaurant.data.models.user import UserModel
from restaurant.services.user_service import UserService


def get_admin_email(request: Request) -> str:
    return request.app.state.admin_email


def bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    if not authorization or not authorization.lower().startswith("bearer "):
        return None
    return authorization.split(" ", 1)[1].strip() or None


def require_admin(
    token: str | None = Depends(bearer_token),
    admin_email: str = Depends(get_admin_email),
    db: Session = Depends(get_db),
) -> UserModel:
    return UserService(db, admin_email=admin_email).require_admin(token)
