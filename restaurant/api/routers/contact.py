# restaurant/api/routers/contact.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from restaurant.data.database import get_db
from restaurant.domain.schemas import ContactIn, MessageOut
from restaurant.services.contact_service import ContactService

router = APIRouter(prefix="/api", tags=["contact"])


@router.post("/contact", response_model=MessageOut, status_code=201)
def submit_contact(payload: ContactIn, db: Session = Depends(get_db)):
    return ContactService(db).submit(payload)
