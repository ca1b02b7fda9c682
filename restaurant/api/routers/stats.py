# restaurant/api/routers/stats.py
from typing import Union

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from restaurant.api.dependencies import get_admin_email
from restaurant.data.database import get_db
from restaurant.domain.schemas import AdminStatsOut, UserStatsOut
from restaurant.services.stats_service import StatsService

router = APIRouter(prefix="/api/user", tags=["stats"])


@router.get("/stats/{user_id}", response_model=Union[AdminStatsOut, UserStatsOut])
def user_stats(
    user_id: int,
    db: Session = Depends(get_db),
    admin_email: str = Depends(get_admin_email),
):
    stats = StatsService(db, admin_email=admin_email).user_stats(user_id)
    if stats["mode"] == "admin":
        return AdminStatsOut(**stats)
    return UserStatsOut(**stats)
