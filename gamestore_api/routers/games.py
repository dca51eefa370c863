from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session
from typing import List
from ..db import get_db
from ..schemas.game import (
    GameCreate,
    GameUpdate,
    GameDetails,
    GameSummary,
)
from ..utils.game import (
    get_game,
    list_games_summary,
    create_game,
    update_game,
    delete_game,
)

router = APIRouter(prefix="/games", tags=["Games"])


@router.get("", response_model=List[GameSummary])
def get_all_games(db: Session = Depends(get_db)):
    return list_games_summary(db)


@router.get("/{game_id}", response_model=GameDetails, name="get_game")
def get_game_by_id(game_id: int, db: Session = Depends(get_db)):
    game = get_game(db, game_id)
    if not game:
        raise HTTPException(404, "Game not found")
    return game


@router.post("", response_model=GameDetails, status_code=status.HTTP_201_CREATED)
def add_game(game: GameCreate, request: Request, response: Response, db: Session = Depends(get_db)):
    created = create_game(db, game.model_dump())
    response.headers["Location"] = str(request.url_for("get_game", game_id=created.id))
    return created


@router.put("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
def edit_game(game_id: int, game: GameUpdate, db: Session = Depends(get_db)):
    updated = update_game(db, game_id, game.model_dump())
    if not updated:
        raise HTTPException(404, "Game not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_game(game_id: int, db: Session = Depends(get_db)):
    # Missing ids are not an error: delete is a no-op for them.
    delete_game(db, game_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
