from pydantic import BaseModel, ConfigDict, Field


class GenreSchema(BaseModel):
    name: str = Field(min_length=1)


class GenrePublic(BaseModel):
    id: int
    name: str
    model_config = ConfigDict(from_attributes=True)
