# restaurant/services/cart_service.py
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from restaurant.data.models.cart_item import CartItemModel
from restaurant.domain.errors import InvalidInput
from restaurant.domain.schemas import CartLineIn
from restaurant.domain.validators import is_positive_id
from restaurant.repos.cart_repo import CartRepo
from restaurant.services.menu_service import MenuService
from restaurant.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Koszyk uzytkownika.
    query (get) tylko odczyt, command (save) podmienia caly koszyk w jednej transakcji
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.menu = MenuService(db)

    #query - odczyt
    def get_cart(self, user_id: int) -> Dict[str, Any]:
        if not is_positive_id(user_id):
            raise InvalidInput("Valid user ID is required.")

        items = self.repo.get_cart_items(user_id)
        return {
            "items": [
                {
                    "name": i.item_name,
                    "price": i.price,
                    "quantity": i.quantity,
                }
                for i in items
            ]
        }

    #command
    def save_cart(self, user_id: int | None, items: List[CartLineIn] | None) -> Dict[str, Any]:
        if not is_positive_id(user_id) or items is None:
            raise InvalidInput("User ID and items array are required.")

        lines = self.menu.price_lines(items)

        # delete + insert jako jedna transakcja, blad cofa wszystko
        try:
            removed = self.repo.clear_cart(user_id)
            for line in lines:
                self.repo.add_cart_item(
                    CartItemModel(
                        user_id=user_id,
                        item_name=line["name"],
                        price=line["price"],
                        quantity=line["quantity"],
                    )
                )
            self.repo.commit()
        except Exception as e:
            logger.error(f"Cart save for user {user_id} failed, rolling back: {e}")
            self.repo.rollback()
            raise

        logger.info(f"Cart of user {user_id} replaced: {removed} row(s) out, {len(lines)} in")
        return {"message": "Cart saved successfully"}
