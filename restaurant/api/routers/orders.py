# restaurant/api/routers/orders.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from restaurant.data.database import get_db
from restaurant.domain.schemas import CreateOrderIn, OrderCreatedOut, OrdersOut
from restaurant.services.order_service import OrderService

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post("", response_model=OrderCreatedOut, status_code=201)
def create_order(payload: CreateOrderIn, db: Session = Depends(get_db)):
    """
    Tworzy zamowienie z pozycji koszyka i czysci koszyk.
    """
    return OrderService(db).create_order(payload.user_id, payload.items, payload.total_amount)


@router.get("/{user_id}", response_model=OrdersOut)
def list_orders(user_id: int, db: Session = Depends(get_db)):
    """
    Zamowienia uzytkownika od najnowszego, z pozycjami.
    """
    return OrderService(db).list_orders(user_id)
