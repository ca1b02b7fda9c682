# restaurant/repos/session_repo.py
from datetime import datetime, timezone

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from restaurant.data.models.user_session import UserSessionModel


class SessionRepo:
    def __init__(self, db: Session):
        self.db = db

    def add_session(self, session: UserSessionModel) -> UserSessionModel:
        self.db.add(session)
        self.db.flush()
        return session

    def get_active_by_token(self, token: str) -> UserSessionModel | None:
        return self.db.execute(
            select(UserSessionModel).where(
                UserSessionModel.token == token,
                UserSessionModel.is_active.is_(True),
            )
        ).scalar_one_or_none()

    def get_latest_active(self, user_id: int) -> UserSessionModel | None:
        return self.db.execute(
            select(UserSessionModel)
            .where(
                UserSessionModel.user_id == user_id,
                UserSessionModel.is_active.is_(True),
            )
            .order_by(UserSessionModel.login_time.desc(), UserSessionModel.id.desc())
            .limit(1)
        ).scalar_one_or_none()

    def close_session(self, session: UserSessionModel):
        session.is_active = False
        session.logout_time = datetime.now(timezone.utc)

    def close_all_active(self, user_id: int) -> int:
        result = self.db.execute(
            update(UserSessionModel)
            .where(
                UserSessionModel.user_id == user_id,
                UserSessionModel.is_active.is_(True),
            )
            .values(is_active=False, logout_time=datetime.now(timezone.utc))
        )
        return result.rowcount

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
