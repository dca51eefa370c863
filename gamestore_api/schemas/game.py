from datetime import date
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

GameName = Annotated[str, Field(min_length=1, max_length=50)]
GenreRef = Annotated[int, Field(ge=1, le=50, strict=True)]
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
Price = Annotated[Money, Field(ge=1, le=150, decimal_places=2)]


class GameWrite(BaseModel):
    """
    Payload accepted by POST /games and PUT /games/{id}.
    Every field is required: PUT is a full replace, not a patch.
    """
    name: GameName
    genre_id: GenreRef
    price: Price
    release_date: date

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class GameCreate(GameWrite):
    pass


class GameUpdate(GameWrite):
    pass


class GameDetails(BaseModel):
    id: int
    name: str
    genre_id: int
    price: Money
    release_date: date

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class GameSummary(BaseModel):
    id: int
    name: str
    genre: Optional[str] = None
    price: Money
    release_date: date

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
