# restaurant/repos/menu_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from restaurant.data.models.menu_item import MenuItemModel


class MenuRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_items(self) -> list[MenuItemModel]:
        return list(
            self.db.execute(select(MenuItemModel).order_by(MenuItemModel.name)).scalars()
        )

    def get_by_names(self, names: set[str]) -> dict[str, MenuItemModel]:
        if not names:
            return {}
        rows = self.db.execute(
            select(MenuItemModel).where(MenuItemModel.name.in_(names))
        ).scalars()
        return {m.name: m for m in rows}
