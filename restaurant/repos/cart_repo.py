# restaurant/repos/cart_repo.py
from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from restaurant.data.models.cart_item import CartItemModel


class CartRepo:
    """Operacje na koszyku bez commita, transakcja jest po stronie serwisu."""

    def __init__(self, db: Session):
        self.db = db

    def get_cart_items(self, user_id: int) -> list[CartItemModel]:
        return list(
            self.db.execute(
                select(CartItemModel)
                .where(CartItemModel.user_id == user_id)
                .order_by(CartItemModel.id)
            ).scalars()
        )

    def clear_cart(self, user_id: int) -> int:
        result = self.db.execute(
            delete(CartItemModel).where(CartItemModel.user_id == user_id)
        )
        return result.rowcount

    def add_cart_item(self, item: CartItemModel):
        self.db.add(item)
        self.db.flush()

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
