# api/schemas/book.py
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, AliasChoices, field_validator, model_validator
from core.validators import clean_name
from .library import LibrarySchema

class BookCreate(BaseModel):
    """Body of POST and PUT requests.

    The owning library may be given as ``library_id``, ``libraryId`` or a
    nested ``{"library": {"id": ...}}`` object.
    """
    name: str
    library_id: int = Field(validation_alias=AliasChoices('library_id', 'libraryId'))

    @model_validator(mode='before')
    @classmethod
    def unwrap_library(cls, data: Any):
        if isinstance(data, dict) and 'library_id' not in data and 'libraryId' not in data:
            library = data.get('library')
            if isinstance(library, dict) and 'id' in library:
                data = {**data, 'library_id': library['id']}
        return data

    @field_validator('name')
    @classmethod
    def validate_name(cls, value):
        return clean_name(value)

class BookSchema(BaseModel):
    id: int
    name: str
    library_id: int
    library: LibrarySchema

    model_config = ConfigDict(from_attributes=True)
