# restaurant/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON w camelCase (userId, totalAmount), w Pythonie snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# =====================================================
# REQUESTS
# pola sa opcjonalne, serwisy zwracaja czytelne komunikaty 400
# =====================================================
class CredentialsIn(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


class LogoutIn(CamelModel):
    user_id: Optional[int] = None


class ContactIn(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None


class CartLineIn(CamelModel):
    name: Optional[str] = None
    # cena od klienta jest ignorowana, liczy sie cena z menu
    price: Optional[Decimal] = None
    quantity: Optional[int] = None


class SaveCartIn(CamelModel):
    user_id: Optional[int] = None
    items: Optional[List[CartLineIn]] = None


class CreateOrderIn(CamelModel):
    user_id: Optional[int] = None
    items: Optional[List[CartLineIn]] = None
    total_amount: Optional[Decimal] = None


class StatusUpdateIn(CamelModel):
    status: Optional[str] = None


# =====================================================
# RESPONSES
# =====================================================
class MessageOut(CamelModel):
    message: str


class HealthOut(CamelModel):
    status: str
    message: Optional[str] = None


class UserOut(CamelModel):
    id: int
    email: str
    created_at: datetime


class LoginOut(CamelModel):
    message: str
    user: UserOut
    token: str


class MenuItemOut(CamelModel):
    id: int
    name: str
    price: float


class MenuOut(CamelModel):
    items: List[MenuItemOut]


class CartLineOut(CamelModel):
    name: str
    price: float
    quantity: int


class CartOut(CamelModel):
    items: List[CartLineOut]


class OrderCreatedOut(CamelModel):
    message: str
    order_id: int


class OrderLineOut(CamelModel):
    name: str
    price: float
    quantity: int
    subtotal: float


class OrderOut(CamelModel):
    id: int
    total_amount: float
    status: str
    created_at: datetime
    items: List[OrderLineOut]


class OrdersOut(CamelModel):
    orders: List[OrderOut]


class AdminStatsOut(CamelModel):
    mode: Literal["admin"] = "admin"
    total_orders: int = 0
    total_revenue: float = 0.0
    revenue_today: float = 0.0
    revenue_month: float = 0.0
    pending_orders: int = 0
    accepted_orders: int = 0
    completed_orders: int = 0


class UserStatsOut(CamelModel):
    mode: Literal["user"] = "user"
    total_orders: int = 0
    total_spent: float = 0.0


class AdminUserOut(CamelModel):
    id: int
    email: str
    created_at: datetime
    total_orders: int = 0
    total_spent: float = 0.0


class AdminUsersOut(CamelModel):
    users: List[AdminUserOut]


class AdminOrderOut(CamelModel):
    id: int
    user_id: int
    email: str
    total_amount: float
    status: str
    created_at: datetime


class AdminOrdersOut(CamelModel):
    orders: List[AdminOrderOut]


class ContactOut(CamelModel):
    id: int
    name: str
    email: str
    phone: str
    message: str
    created_at: datetime


class ContactsOut(CamelModel):
    contacts: List[ContactOut]


class SummaryOut(CamelModel):
    total_users: int = Field(0, ge=0)
    total_orders: int = Field(0, ge=0)
    total_revenue: float = 0.0
    total_contacts: int = Field(0, ge=0)
