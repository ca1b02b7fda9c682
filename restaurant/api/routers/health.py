# restaurant/api/routers/health.py
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from restaurant.domain.errors import StoreUnavailable
from restaurant.domain.schemas import HealthOut
from restaurant.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthOut, response_model_exclude_none=True, responses={503: {"model": HealthOut}})
def health(request: Request):
    try:
        request.app.state.db.ping()
    except StoreUnavailable:
        return JSONResponse(status_code=503, content={"status": "error", "message": "Database not connected"})
    except SQLAlchemyError as e:
        logger.warning(f"Health check query failed: {e}")
        return JSONResponse(status_code=503, content={"status": "error", "message": "Database query failed"})
    return {"status": "ok"}
