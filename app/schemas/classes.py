from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional

class ClassBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class ClassRequest(ClassBase):
    name: str = Field(..., max_length=255)
    description: Optional[str] = ""
    professor_id: int

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Name is required")
        return value

    @field_validator("description")
    @classmethod
    def description_default(cls, value: Optional[str]) -> str:
        return value or ""

class ClassResponse(ClassBase):
    id: int
    name: str
    description: str
    professor_id: int
    professor_name: str
    enrolled_count: int
