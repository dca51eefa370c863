import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import OperationalError

from .utils.config import LOG_LEVEL
from .utils.response import error_response, validation_errors
from .db_init import initialize_database

from .routers.games import router as games_router
from .routers.genres import router as genres_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Migrate and seed the store before serving. A failure here aborts startup.
    """
    try:
        initialize_database()
    except Exception as e:
        logger.error(f"[startup] Database initialization failed: {e}")
        raise
    logger.info("[startup] Database ready")

    yield


def register_routers(app: FastAPI) -> None:
    app.include_router(games_router)
    app.include_router(genres_router)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return error_response("Validation failed", 400, errors=validation_errors(exc.errors()))

    @app.exception_handler(OperationalError)
    async def storage_unavailable_handler(request: Request, exc: OperationalError):
        logger.error(f"Storage unavailable on {request.method} {request.url.path}: {exc}")
        return error_response("Storage unavailable", 500)


def create_app() -> FastAPI:
    app = FastAPI(title="GameStore API", lifespan=lifespan)
    register_exception_handlers(app)
    register_routers(app)

    @app.get("/health")
    def health():
        return {"ok": True, "service": "GameStore API"}

    return app


app = create_app()
