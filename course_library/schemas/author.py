from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import ClassVar

import uuid

from course_library.schemas.course import CourseCreate

# Author base schema
class AuthorBase(BaseModel):
    first_name: str = Field(max_length=50)
    last_name: str = Field(max_length=50)
    main_category: str = Field(max_length=50)

    @field_validator("first_name", "last_name", "main_category", mode="before")
    @classmethod
    def trim_and_check(cls, v: object) -> object:
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("value cannot be empty")
        return v

# Author create schema
class AuthorCreate(AuthorBase):
    courses: list[CourseCreate] = Field(default_factory=list)

# Author update schema
class AuthorUpdate(AuthorBase):
    pass

# Author read schema
class AuthorRead(AuthorBase):
    id: uuid.UUID

    model_config: ClassVar[ConfigDict] = ConfigDict(from_attributes=True)


class AuthorFilterParams(BaseModel):
    """Optional filters for listing authors; blank values are ignored."""
    main_category: str | None = None
    search_query: str | None = None

    def is_empty(self) -> bool:
        return not (self.main_category or "").strip() and not (self.search_query or "").strip()
