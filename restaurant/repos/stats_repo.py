# restaurant/repos/stats_repo.py
from datetime import datetime
from decimal import Decimal

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from restaurant.data.models.contact_message import ContactMessageModel
from restaurant.data.models.order import OrderModel
from restaurant.data.models.user import UserModel


def _money(value) -> Decimal:
    return Decimal(str(value or 0))


class StatsRepo:
    """Zapytania agregujace, tylko odczyt."""

    def __init__(self, db: Session):
        self.db = db

    def order_totals(self, user_id: int | None = None, since: datetime | None = None) -> tuple[int, Decimal]:
        stmt = select(
            func.count(OrderModel.id),
            func.coalesce(func.sum(OrderModel.total_amount), 0),
        )
        if user_id is not None:
            stmt = stmt.where(OrderModel.user_id == user_id)
        if since is not None:
            stmt = stmt.where(OrderModel.created_at >= since)

        count, total = self.db.execute(stmt).one()
        return count or 0, _money(total)

    def status_counts(self) -> dict[str, int]:
        rows = self.db.execute(
            select(OrderModel.status, func.count(OrderModel.id)).group_by(OrderModel.status)
        ).all()
        return {status: count for status, count in rows}

    def count_users(self) -> int:
        return self.db.execute(select(func.count(UserModel.id))).scalar_one()

    def count_contacts(self) -> int:
        return self.db.execute(select(func.count(ContactMessageModel.id))).scalar_one()

    def users_with_totals(self) -> list[dict]:
        rows = self.db.execute(
            select(
                UserModel.id,
                UserModel.email,
                UserModel.created_at,
                func.count(OrderModel.id.distinct()),
                func.coalesce(func.sum(OrderModel.total_amount), 0),
            )
            .outerjoin(OrderModel, OrderModel.user_id == UserModel.id)
            .group_by(UserModel.id, UserModel.email, UserModel.created_at)
            .order_by(UserModel.created_at.desc(), UserModel.id.desc())
        ).all()

        return [
            {
                "id": user_id,
                "email": email,
                "created_at": created_at,
                "total_orders": orders or 0,
                "total_spent": _money(spent),
            }
            for user_id, email, created_at, orders, spent in rows
        ]

    def orders_with_email(self) -> list[dict]:
        rows = self.db.execute(
            select(
                OrderModel.id,
                OrderModel.user_id,
                UserModel.email,
                OrderModel.total_amount,
                OrderModel.status,
                OrderModel.created_at,
            )
            .join(UserModel, UserModel.id == OrderModel.user_id)
            .order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
        ).all()

        return [
            {
                "id": r.id,
                "user_id": r.user_id,
                "email": r.email,
                "total_amount": r.total_amount,
                "status": r.status,
                "created_at": r.created_at,
            }
            for r in rows
        ]
