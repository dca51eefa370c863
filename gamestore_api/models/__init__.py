from sqlalchemy.orm import declarative_base

Base = declarative_base()

from .genre import Genre
from .game import Game
