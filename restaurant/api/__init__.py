# restaurant/api/__init__.py
from contextlib import asynccontextmanager
from functools import partial

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from restaurant.api.errors import register_error_handlers
from restaurant.api.routers import admin, carts, contact, health, menu, orders, stats, users
from restaurant.data.database import Database
from restaurant.data.seed import init_db
from restaurant.utils import settings
from restaurant.utils.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    app.state.db.dispose()
    logger.info("Database connections closed")


def create_app(database: Database | None = None, admin_email: str | None = None) -> FastAPI:
    app = FastAPI(
        title="Restaurant Ordering API",
        version="1.0.0",
        lifespan=lifespan,
    )

    # polaczenie z baza jest leniwe, pierwszy request je otwiera
    app.state.db = database or Database(on_connect=partial(init_db, menu_file=settings.MENU_FILE))
    app.state.admin_email = admin_email or settings.ADMIN_EMAIL

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS or ["*"],
        allow_credentials=bool(settings.CORS_ORIGINS),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(contact.router)
    app.include_router(menu.router)
    app.include_router(carts.router)
    app.include_router(orders.router)
    app.include_router(stats.router)
    app.include_router(admin.router)

    return app
