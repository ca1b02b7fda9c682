# restaurant/api/routers/carts.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from restaurant.data.database import get_db
from restaurant.domain.schemas import CartOut, MessageOut, SaveCartIn
from restaurant.services.cart_service import CartService

router = APIRouter(prefix="/api/cart", tags=["cart"])


@router.get("/{user_id}", response_model=CartOut)
def get_cart(user_id: int, db: Session = Depends(get_db)):
    return CartService(db).get_cart(user_id)


@router.post("", response_model=MessageOut)
def save_cart(payload: SaveCartIn, db: Session = Depends(get_db)):
    """Podmienia caly koszyk uzytkownika."""
    return CartService(db).save_cart(payload.user_id, payload.items)
