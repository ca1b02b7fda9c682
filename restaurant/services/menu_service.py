# restaurant/services/menu_service.py
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from restaurant.domain.errors import InvalidInput
from restaurant.domain.schemas import CartLineIn
from restaurant.repos.menu_repo import MenuRepo


class MenuService:
    def __init__(self, db: Session):
        self.repo = MenuRepo(db)

    def list_menu(self) -> Dict[str, Any]:
        return {
            "items": [
                {"id": m.id, "name": m.name, "price": m.price}
                for m in self.repo.list_items()
            ]
        }

    def price_lines(self, items: List[CartLineIn]) -> List[Dict[str, Any]]:
        """
        Zamienia linie od klienta na linie z cena z menu.
        Cena przyslana przez klienta nie jest brana pod uwage.
        """
        for item in items:
            if not item.name or not item.name.strip():
                raise InvalidInput("Each item needs a name.")
            if item.quantity is None or item.quantity <= 0:
                raise InvalidInput(f"Quantity for {item.name} must be greater than 0.")

        menu = self.repo.get_by_names({i.name.strip() for i in items})

        lines = []
        for item in items:
            name = item.name.strip()
            entry = menu.get(name)
            if entry is None:
                raise InvalidInput(f"Unknown menu item: {name}")
            lines.append(
                {
                    "name": name,
                    "price": Decimal(entry.price),
                    "quantity": item.quantity,
                }
            )
        return lines
