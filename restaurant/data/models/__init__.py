#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from restaurant.data.models.user import UserModel
from restaurant.data.models.user_session import UserSessionModel
from restaurant.data.models.menu_item import MenuItemModel
from restaurant.data.models.cart_item import CartItemModel
from restaurant.data.models.order import OrderModel, OrderItemModel, ORDER_STATUSES
from restaurant.data.models.contact_message import ContactMessageModel

__all__ = [
    "UserModel",
    "UserSessionModel",
    "MenuItemModel",
    "CartItemModel",
    "OrderModel",
    "OrderItemModel",
    "ORDER_STATUSES",
    "ContactMessageModel",
]
