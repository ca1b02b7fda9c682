# restaurant/data/database.py
import threading
from concurrent.futures import Future
from typing import Callable, Generator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from restaurant.domain.errors import StoreUnavailable
from restaurant.utils import settings
from restaurant.utils.logging import get_logger
from restaurant.utils.retry import db_retry

logger = get_logger(__name__)

Base = declarative_base()


class Database:
    """
    Uchwyt do bazy tworzony raz na proces i przekazywany do aplikacji.

    Polaczenie jest leniwe: pierwsze zapytanie otwiera engine.
    Rownolegle requesty czekaja na ten sam Future zamiast probowac
    polaczyc sie po swojemu. Nieudana proba trafia do wszystkich
    czekajacych jako StoreUnavailable, kolejny request probuje od nowa.
    """

    def __init__(
        self,
        url: str | None = None,
        pool_size: int | None = None,
        pool_timeout: int | None = None,
        connect_timeout: int | None = None,
        connect_attempts: int | None = None,
        on_connect: Callable[[Engine], None] | None = None,
        echo: bool = False,
    ):
        self.url = url or settings.DATABASE_URL
        self.pool_size = pool_size or settings.DB_POOL_MAX
        self.pool_timeout = pool_timeout or settings.DB_POOL_TIMEOUT
        self.connect_timeout = connect_timeout or settings.DB_CONNECT_TIMEOUT
        self.connect_attempts = connect_attempts or settings.DB_CONNECT_ATTEMPTS
        self.on_connect = on_connect
        self.echo = echo

        self._engine: Engine | None = None
        self._session_factory: sessionmaker | None = None
        self._lock = threading.Lock()
        self._pending: Future | None = None

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @property
    def connected(self) -> bool:
        return self._engine is not None

    def _build_engine(self) -> Engine:
        if self.is_sqlite:
            # sqlite nie ma parametrow puli, watki FastAPI dziela polaczenia
            return create_engine(
                self.url,
                echo=self.echo,
                connect_args={"check_same_thread": False, "timeout": self.connect_timeout},
            )

        return create_engine(
            self.url,
            echo=self.echo,
            pool_size=self.pool_size,
            max_overflow=0,
            pool_timeout=self.pool_timeout,
            pool_pre_ping=True,
            connect_args={"connect_timeout": self.connect_timeout},
        )

    def _open(self) -> Engine:
        engine = self._build_engine()

        @db_retry(self.connect_attempts)
        def ping():
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))

        try:
            ping()
            if self.on_connect:
                self.on_connect(engine)
        except Exception:
            engine.dispose()
            raise
        return engine

    def connect(self) -> Engine:
        if self._engine is not None:
            return self._engine

        with self._lock:
            if self._engine is not None:
                return self._engine
            pending = self._pending
            owner = pending is None
            if owner:
                pending = self._pending = Future()

        if not owner:
            logger.info("Waiting for in-flight database connection attempt")
            return pending.result()

        logger.info(f"Connecting to database ({self.url.split('://', 1)[0]})")
        try:
            engine = self._open()
        except SQLAlchemyError as e:
            logger.error(f"Database connection failed: {e}")
            error = StoreUnavailable()
            pending.set_exception(error)
            raise error from e
        except BaseException as e:
            pending.set_exception(e)
            raise
        else:
            self._session_factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
            self._engine = engine
            pending.set_result(engine)
            logger.info("Connected to database")
            return engine
        finally:
            with self._lock:
                self._pending = None

    def session(self) -> Session:
        self.connect()
        return self._session_factory()

    def ping(self) -> None:
        engine = self.connect()
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def dispose(self) -> None:
        with self._lock:
            if self._engine is not None:
                self._engine.dispose()
            self._engine = None
            self._session_factory = None


def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()
