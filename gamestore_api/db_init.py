import logging
from pathlib import Path

from alembic import command
from alembic.config import Config

from .db import engine, session_scope
from .utils.genre import seed_genres

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).with_name("alembic")


def run_migrations() -> None:
    """
    Upgrade the schema to the latest Alembic revision.
    Already-applied revisions are skipped, so this is safe on every start.
    """
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    with engine.begin() as connection:
        cfg.attributes["connection"] = connection
        command.upgrade(cfg, "head")


def initialize_database() -> None:
    """
    Migrate, then seed genres into an empty store.
    Must finish before the app accepts requests.
    """
    logger.info("[startup] Applying migrations")
    run_migrations()

    with session_scope() as db:
        seed_genres(db)
