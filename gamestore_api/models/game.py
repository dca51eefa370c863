from sqlalchemy import Column, Integer, String, Numeric, Date, ForeignKey

from ..models import Base


class Game(Base):
    __tablename__ = "games"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)
    # Range checked at the API boundary only; existence is left to the store.
    genre_id = Column(Integer, ForeignKey("genres.id"), nullable=False, index=True)
    price = Column(Numeric(18, 2), nullable=False)
    release_date = Column(Date, nullable=False)

    def __repr__(self):
        return f"<Game(id={self.id}, name={self.name}, genre_id={self.genre_id})>"
