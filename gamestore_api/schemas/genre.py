from pydantic import BaseModel


class GenreRead(BaseModel):
    """A genre as listed by GET /genres; genres are read-only over the API."""
    id: int
    name: str

    class Config:
        from_attributes = True
        frozen = True
