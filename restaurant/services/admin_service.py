# restaurant/services/admin_service.py
from typing import Any, Dict

from sqlalchemy.orm import Session

from restaurant.repos.stats_repo import StatsRepo
from restaurant.services.contact_service import ContactService
from restaurant.services.order_service import OrderService
from restaurant.services.stats_service import StatsService

CONTACTS_LIMIT = 100


class AdminService:
    """Widoki do panelu admina, autoryzacja jest w routerze."""

    def __init__(self, db: Session):
        self.stats_repo = StatsRepo(db)
        self.stats = StatsService(db)
        self.orders = OrderService(db)
        self.contacts = ContactService(db)

    def list_users(self) -> Dict[str, Any]:
        return {"users": self.stats_repo.users_with_totals()}

    def list_orders(self) -> Dict[str, Any]:
        return {"orders": self.stats_repo.orders_with_email()}

    def update_order_status(self, order_id: int, status: str | None) -> Dict[str, Any]:
        return self.orders.update_status(order_id, status)

    def list_contacts(self) -> Dict[str, Any]:
        return {"contacts": self.contacts.recent(CONTACTS_LIMIT)}

    def summary(self) -> Dict[str, Any]:
        return self.stats.summary()
