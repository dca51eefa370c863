from sqlalchemy import Column, Integer, String
from ..models import Base


class Genre(Base):
    __tablename__ = "genres"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False, unique=True)

    def __repr__(self):
        return f"<Genre(id={self.id}, name={self.name})>"
