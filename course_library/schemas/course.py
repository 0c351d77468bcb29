from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import ClassVar

import uuid

# Course base schema
class CourseBase(BaseModel):
    title: str = Field(max_length=100)
    description: str | None = Field(default=None, max_length=1500)

    @field_validator("title", mode="before")
    @classmethod
    def trim_and_check(cls, v: object) -> object:
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("title cannot be empty")
        return v

    @field_validator("description", mode="before")
    @classmethod
    def blank_to_none(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip() or None
        return v

# Course create schema
class CourseCreate(CourseBase):
    pass

# Course update schema
class CourseUpdate(CourseBase):
    pass

# Course read schema
class CourseRead(CourseBase):
    id: uuid.UUID
    author_id: uuid.UUID

    model_config: ClassVar[ConfigDict] = ConfigDict(from_attributes=True)
