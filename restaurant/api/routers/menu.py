# restaurant/api/routers/menu.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from restaurant.data.database import get_db
from restaurant.domain.schemas import MenuOut
from restaurant.services.menu_service import MenuService

router = APIRouter(prefix="/api", tags=["menu"])


@router.get("/menu", response_model=MenuOut)
def get_menu(db: Session = Depends(get_db)):
    return MenuService(db).list_menu()
