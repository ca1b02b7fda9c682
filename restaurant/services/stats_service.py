# restaurant/services/stats_service.py
from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy.orm import Session

from restaurant.domain.errors import InvalidInput, NotFound
from restaurant.domain.validators import is_positive_id
from restaurant.repos.stats_repo import StatsRepo
from restaurant.repos.user_repo import UserRepo
from restaurant.utils.settings import ADMIN_EMAIL


class StatsService:
    """
    Statystyki do panelu.
    Admin (email == ADMIN_EMAIL) dostaje dane calego sklepu, reszta tylko swoje.
    Kwoty zawsze 0 zamiast null.
    """

    def __init__(self, db: Session, admin_email: str = ADMIN_EMAIL):
        self.repo = StatsRepo(db)
        self.users = UserRepo(db)
        self.admin_email = admin_email

    def user_stats(self, user_id: int) -> Dict[str, Any]:
        if not is_positive_id(user_id):
            raise InvalidInput("Valid user ID is required.")

        user = self.users.get_user(user_id)
        if not user:
            raise NotFound("User not found.")

        if user.email == self.admin_email:
            return self.shop_stats()

        total_orders, total_spent = self.repo.order_totals(user_id=user.id)
        return {
            "mode": "user",
            "total_orders": total_orders,
            "total_spent": total_spent,
        }

    def shop_stats(self, now: datetime | None = None) -> Dict[str, Any]:
        now = now or datetime.now(timezone.utc)
        day_start = now.replace(hour=0, minute=0, second=0, microsecond=0)
        month_start = day_start.replace(day=1)

        total_orders, total_revenue = self.repo.order_totals()
        _, revenue_today = self.repo.order_totals(since=day_start)
        _, revenue_month = self.repo.order_totals(since=month_start)
        by_status = self.repo.status_counts()

        return {
            "mode": "admin",
            "total_orders": total_orders,
            "total_revenue": total_revenue,
            "revenue_today": revenue_today,
            "revenue_month": revenue_month,
            "pending_orders": by_status.get("Pending", 0),
            "accepted_orders": by_status.get("Accepted", 0),
            "completed_orders": by_status.get("Completed", 0),
        }

    def summary(self) -> Dict[str, Any]:
        total_orders, total_revenue = self.repo.order_totals()
        return {
            "total_users": self.repo.count_users(),
            "total_orders": total_orders,
            "total_revenue": total_revenue,
            "total_contacts": self.repo.count_contacts(),
        }
