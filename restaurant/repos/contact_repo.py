# restaurant/repos/contact_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from restaurant.data.models.contact_message import ContactMessageModel


class ContactRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_message(self, message: ContactMessageModel) -> ContactMessageModel:
        self.db.add(message)
        self.db.commit()
        self.db.refresh(message)
        return message

    def list_recent(self, limit: int = 100) -> list[ContactMessageModel]:
        return list(
            self.db.execute(
                select(ContactMessageModel)
                .order_by(ContactMessageModel.created_at.desc(), ContactMessageModel.id.desc())
                .limit(limit)
            ).scalars()
        )
