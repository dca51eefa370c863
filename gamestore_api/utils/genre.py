import logging
from sqlalchemy.orm import Session

from ..models.genre import Genre
from .config import SEED_GENRES

logger = logging.getLogger(__name__)


def list_genres(db: Session) -> list[Genre]:
    return db.query(Genre).order_by(Genre.id).all()


def seed_genres(db: Session, names: list[str] = SEED_GENRES) -> int:
    """
    Insert the initial genres, in order, only when the table is empty.
    Returns the number of rows inserted (0 when genres already exist).
    """
    if db.query(Genre.id).first() is not None:
        logger.info("Genres already present, skipping seed")
        return 0

    db.add_all([Genre(name=name) for name in names])
    db.commit()
    logger.info(f"Seeded {len(names)} genres")
    return len(names)
