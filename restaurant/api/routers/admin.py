# restaurant/api/routers/admin.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from restaurant.api.dependencies import require_admin
from restaurant.data.database import get_db
from restaurant.domain.schemas import (
    AdminOrdersOut,
    AdminUsersOut,
    ContactsOut,
    MessageOut,
    StatusUpdateIn,
    SummaryOut,
)
from restaurant.services.admin_service import AdminService

# kazdy endpoint wymaga aktywnej sesji admina (Authorization: Bearer <token>)
router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/users", response_model=AdminUsersOut)
def list_users(db: Session = Depends(get_db)):
    return AdminService(db).list_users()


@router.get("/orders", response_model=AdminOrdersOut)
def list_orders(db: Session = Depends(get_db)):
    return AdminService(db).list_orders()


@router.patch("/orders/{order_id}/status", response_model=MessageOut)
def update_order_status(order_id: int, payload: StatusUpdateIn, db: Session = Depends(get_db)):
    return AdminService(db).update_order_status(order_id, payload.status)


@router.get("/contacts", response_model=ContactsOut)
def list_contacts(db: Session = Depends(get_db)):
    return AdminService(db).list_contacts()


@router.get("/summary", response_model=SummaryOut)
def summary(db: Session = Depends(get_db)):
    return AdminService(db).summary()
