# restaurant/services/user_service.py
from typing import Any, Dict

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from restaurant.data.models.user import UserModel
from restaurant.data.models.user_session import UserSessionModel
from restaurant.domain.errors import (
    AccessDenied,
    DuplicateEmail,
    InvalidCredentials,
    InvalidInput,
    NotAuthenticated,
)
from restaurant.domain.validators import PASSWORD_MIN_LENGTH, is_positive_id, is_valid_email
from restaurant.repos.session_repo import SessionRepo
from restaurant.repos.user_repo import UserRepo
from restaurant.utils.logging import get_logger
from restaurant.utils.security import hash_password, new_session_token, verify_password
from restaurant.utils.settings import ADMIN_EMAIL

logger = get_logger(__name__)


class UserService:
    """
    Rejestracja, logowanie i dziennik sesji.
    Token sesji z logowania autoryzuje endpointy admina dopoki sesja jest aktywna.
    """

    def __init__(self, db: Session, admin_email: str = ADMIN_EMAIL):
        self.repo = UserRepo(db)
        self.sessions = SessionRepo(db)
        self.admin_email = admin_email

    def is_admin(self, user: UserModel) -> bool:
        return user.email == self.admin_email

    def register(self, email: str | None, password: str | None) -> UserModel:
        if not is_valid_email(email):
            raise InvalidInput("Valid email is required.")
        if not password or len(password) < PASSWORD_MIN_LENGTH:
            raise InvalidInput(f"Password must be at least {PASSWORD_MIN_LENGTH} characters.")

        if self.repo.get_by_email(email):
            raise DuplicateEmail()

        user = UserModel(email=email, password_hash=hash_password(password))
        try:
            created = self.repo.create_user(user)
        except IntegrityError:
            # rownolegla rejestracja tego samego maila
            self.repo.rollback()
            raise DuplicateEmail()

        logger.info(f"Registered user {created.id}")
        return created

    def login(self, email: str | None, password: str | None) -> Dict[str, Any]:
        if not is_valid_email(email) or not password:
            raise InvalidInput("Email and password are required.")

        user = self.repo.get_by_email(email)
        # ten sam komunikat dla zlego maila i zlego hasla
        if not user or not verify_password(password, user.password_hash):
            raise InvalidCredentials()

        token = new_session_token()
        try:
            closed = self.sessions.close_all_active(user.id)
            self.sessions.add_session(UserSessionModel(user_id=user.id, token=token))
            self.sessions.commit()
        except Exception:
            self.sessions.rollback()
            raise

        if closed:
            logger.info(f"Closed {closed} stale session(s) for user {user.id}")
        logger.info(f"User {user.id} logged in")

        return {"message": "Login Successful", "user": user, "token": token}

    def logout(self, user_id: int | None) -> Dict[str, Any]:
        if not is_positive_id(user_id):
            raise InvalidInput("User ID is required.")

        session = self.sessions.get_latest_active(user_id)
        if session:
            self.sessions.close_session(session)
            self.sessions.commit()
            logger.info(f"User {user_id} logged out (session {session.id})")
        else:
            logger.info(f"Logout for user {user_id} without an active session")

        return {"message": "Logout recorded successfully"}

    def authenticate(self, token: str | None) -> UserModel:
        session = self.sessions.get_active_by_token(token) if token else None
        if not session:
            raise NotAuthenticated()
        return session.user

    def require_admin(self, token: str | None) -> UserModel:
        user = self.authenticate(token)
        if not self.is_admin(user):
            raise AccessDenied()
        return user
