import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from ..models.game import Game
from ..models.genre import Genre
from ..schemas.game import GameSummary

logger = logging.getLogger(__name__)


def get_game(session: Session, game_id: int) -> Optional[Game]:
    return session.query(Game).filter_by(id=game_id).first()


def list_games_summary(session: Session) -> List[GameSummary]:
    rows = (
        session.query(
            Game.id,
            Game.name,
            Genre.name.label("genre"),
            Game.price,
            Game.release_date,
        )
        .outerjoin(Genre, Game.genre_id == Genre.id)
        .order_by(Game.id)
        .all()
    )
    return [GameSummary.model_validate(row) for row in rows]


def create_game(session: Session, game_data: dict) -> Game:
    game = Game(**game_data)
    session.add(game)
    session.commit()
    session.refresh(game)
    logger.info(f"Created game {game.id} ({game.name})")
    return game


def update_game(session: Session, game_id: int, game_data: dict) -> Optional[Game]:
    game = session.query(Game).filter_by(id=game_id).first()
    if not game:
        return None

    # Full replace: every column is overwritten.
    game.name = game_data["name"]
    game.genre_id = game_data["genre_id"]
    game.price = game_data["price"]
    game.release_date = game_data["release_date"]

    session.commit()
    session.refresh(game)
    logger.info(f"Updated game {game.id}")
    return game


def delete_game(session: Session, game_id: int) -> bool:
    deleted = session.query(Game).filter_by(id=game_id).delete()
    session.commit()
    if deleted:
        logger.info(f"Deleted game {game_id}")
    return bool(deleted)
