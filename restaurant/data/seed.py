# restaurant/data/seed.py
import json
from decimal import Decimal
from pathlib import Path

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from restaurant.data.database import Base
from restaurant.data.models import MenuItemModel
from restaurant.utils.settings import MENU_FILE
from restaurant.utils.logging import get_logger

logger = get_logger(__name__)


def load_menu_file(path: str | Path) -> list[dict]:
    """
    Czyta menu w formacie [{"item": "Pizza", "price": "₹200"}, ...].
    Cena moze byc liczba albo napisem z symbolem waluty.
    """
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)

    items = []
    for entry in raw:
        price = entry["price"]
        if isinstance(price, str):
            price = price.replace("₹", "").replace(",", "").strip()
        items.append({"name": entry["item"].strip(), "price": Decimal(str(price))})
    return items


def seed_menu(db: Session, path: str | Path = MENU_FILE) -> int:
    # not forcing: only seed if empty
    if db.query(MenuItemModel).first():
        return 0

    items = load_menu_file(path)
    db.add_all(MenuItemModel(name=i["name"], price=i["price"]) for i in items)
    db.commit()
    logger.info(f"Seeded {len(items)} menu items from {path}")
    return len(items)


def init_db(engine: Engine, menu_file: str | Path = MENU_FILE) -> None:
    """Tworzy tabele i wypelnia menu, wolane po pierwszym udanym polaczeniu."""
    import restaurant.data.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info(f"Tables ready: {list(Base.metadata.tables.keys())}")

    with Session(engine) as db:
        seed_menu(db, menu_file)
