# restaurant/services/contact_service.py
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from restaurant.data.models.contact_message import ContactMessageModel
from restaurant.domain.errors import InvalidInput
from restaurant.domain.schemas import ContactIn
from restaurant.domain.validators import (
    MESSAGE_MIN_LENGTH,
    NAME_MIN_LENGTH,
    is_valid_email,
    is_valid_phone,
)
from restaurant.repos.contact_repo import ContactRepo
from restaurant.utils.logging import get_logger

logger = get_logger(__name__)


class ContactService:
    def __init__(self, db: Session):
        self.repo = ContactRepo(db)

    def submit(self, payload: ContactIn) -> Dict[str, Any]:
        name = (payload.name or "").strip()
        email = (payload.email or "").strip()
        phone = (payload.phone or "").strip()
        message = (payload.message or "").strip()

        if len(name) < NAME_MIN_LENGTH:
            raise InvalidInput(f"Name must be at least {NAME_MIN_LENGTH} characters.")
        if not is_valid_email(email):
            raise InvalidInput("Valid email is required.")
        if not is_valid_phone(phone):
            raise InvalidInput("Phone number must be 10 digits starting with 6-9.")
        if len(message) < MESSAGE_MIN_LENGTH:
            raise InvalidInput(f"Message must be at least {MESSAGE_MIN_LENGTH} characters.")

        created = self.repo.create_message(
            ContactMessageModel(name=name, email=email, phone=phone, message=message)
        )
        logger.info(f"Contact message {created.id} received")

        return {"message": "Message submitted successfully"}

    def recent(self, limit: int = 100) -> List[ContactMessageModel]:
        return self.repo.list_recent(limit)
