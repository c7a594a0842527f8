# api/schemas/library.py
from pydantic import BaseModel, ConfigDict, field_validator
from core.validators import clean_name

class LibraryBase(BaseModel):
    name: str

    @field_validator('name')
    @classmethod
    def validate_name(cls, value):
        return clean_name(value)

class LibraryCreate(LibraryBase):
    """Body of POST and PUT requests. An ``id`` sent by the client is ignored."""
    pass

class LibrarySchema(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)
