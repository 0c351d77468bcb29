from __future__ import annotations
from typing import TYPE_CHECKING
from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
import uuid
from course_library.models.base import Base, ordinal_string

if TYPE_CHECKING:
    from course_library.models.author import Author

#Course
class Course(Base):
    __tablename__: str = "courses"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    title: Mapped[str] = mapped_column(ordinal_string(100), nullable=False)
    description: Mapped[str | None] = mapped_column(String(1500), nullable=True)
    author_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("authors.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    author: Mapped[Author] = relationship(back_populates="courses")

    def __repr__(self) -> str:
        return f"Course(id={self.id!s}, title={self.title!r}, author_id={self.author_id!s})"
