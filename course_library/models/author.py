from __future__ import annotations
from typing import TYPE_CHECKING
from sqlalchemy import Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
import uuid
from course_library.models.base import Base, ordinal_string

if TYPE_CHECKING:
    from course_library.models.course import Course

#Author
class Author(Base):
    __tablename__: str = "authors"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    first_name: Mapped[str] = mapped_column(ordinal_string(50), nullable=False)
    last_name: Mapped[str] = mapped_column(ordinal_string(50), nullable=False)
    main_category: Mapped[str] = mapped_column(ordinal_string(50), nullable=False)

    courses: Mapped[list[Course]] = relationship(
        back_populates="author",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"Author(id={self.id!s}, first_name={self.first_name!r}, last_name={self.last_name!r})"
