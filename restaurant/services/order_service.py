# restaurant/services/order_service.py
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from restaurant.data.models.order import ORDER_STATUSES, OrderModel, OrderItemModel
from restaurant.domain.errors import InvalidInput, NotFound
from restaurant.domain.schemas import CartLineIn
from restaurant.domain.validators import is_positive_id
from restaurant.repos.cart_repo import CartRepo
from restaurant.repos.order_repo import OrderRepo
from restaurant.services.menu_service import MenuService
from restaurant.utils.logging import get_logger

logger = get_logger(__name__)

# status idzie tylko do przodu
STATUS_TRANSITIONS = {
    "Pending": {"Pending", "Accepted", "Completed"},
    "Accepted": {"Accepted", "Completed"},
    "Completed": {"Completed"},
}


class OrderService:
    """
    Serwis odpowiedzialny za domenę zamówień.
    Ceny i sumy liczone sa z menu, nie z danych klienta.
    """

    def __init__(self, db: Session):
        self.repo = OrderRepo(db)
        self.cart_repo = CartRepo(db)
        self.menu = MenuService(db)

    def create_order(
        self,
        user_id: int | None,
        items: List[CartLineIn] | None,
        total_amount: Decimal | None,
    ) -> Dict[str, Any]:
        """
        Use Case: Zlozenie zamowienia.

        1. Wycenia pozycje wg menu
        2. Tworzy naglowek zamowienia (Pending)
        3. Dodaje pozycje z subtotalem
        4. Czysci koszyk uzytkownika
        Kroki 2-4 w jednej transakcji.
        """
        if not is_positive_id(user_id) or not items or not total_amount or total_amount <= 0:
            raise InvalidInput("User ID, items array, and total amount are required.")

        lines = self.menu.price_lines(items)
        for line in lines:
            line["subtotal"] = line["price"] * line["quantity"]
        total = sum((line["subtotal"] for line in lines), Decimal("0.00"))

        if total != Decimal(total_amount):
            logger.warning(
                f"Order total from client ({total_amount}) differs from menu total ({total}) "
                f"for user {user_id}, storing menu total"
            )

        try:
            order = self.repo.add_order(
                OrderModel(user_id=user_id, total_amount=total, status="Pending")
            )
            for line in lines:
                self.repo.add_order_item(
                    OrderItemModel(
                        order_id=order.id,
                        item_name=line["name"],
                        price=line["price"],
                        quantity=line["quantity"],
                        subtotal=line["subtotal"],
                    )
                )
            self.cart_repo.clear_cart(user_id)
            self.repo.commit()
        except Exception as e:
            logger.error(f"Order creation for user {user_id} failed, rolling back: {e}")
            self.repo.rollback()
            raise

        logger.info(f"Order {order.id} created for user {user_id}, total {total}")
        return {"message": "Order created successfully", "order_id": order.id}

    def list_orders(self, user_id: int) -> Dict[str, Any]:
        if not is_positive_id(user_id):
            raise InvalidInput("Valid user ID is required.")

        orders = []
        for order in self.repo.list_user_orders(user_id):
            items = self.repo.get_order_items(order.id)
            orders.append(
                {
                    "id": order.id,
                    "total_amount": order.total_amount,
                    "status": order.status,
                    "created_at": order.created_at,
                    "items": [
                        {
                            "name": i.item_name,
                            "price": i.price,
                            "quantity": i.quantity,
                            "subtotal": i.subtotal,
                        }
                        for i in items
                    ],
                }
            )
        return {"orders": orders}

    def update_status(self, order_id: int, status: str | None) -> Dict[str, Any]:
        if not is_positive_id(order_id) or not status:
            raise InvalidInput("Order ID and status are required.")
        if status not in ORDER_STATUSES:
            raise InvalidInput("Invalid status value.")

        order = self.repo.get_order(order_id)
        if not order:
            raise NotFound("Order not found.")

        if status not in STATUS_TRANSITIONS.get(order.status, set()):
            raise InvalidInput("Invalid status transition.")

        previous = order.status
        try:
            self.repo.update_order_status(order_id, status)
            self.repo.commit()
        except Exception:
            self.repo.rollback()
            raise
        logger.info(f"Order {order_id} status {previous} -> {status}")

        return {"message": "Order status updated successfully."}
