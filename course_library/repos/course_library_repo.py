from __future__ import annotations
import uuid
from collections.abc import Iterable
from types import TracebackType
from typing import TypeVar
from typing_extensions import Self
from sqlalchemy import ColumnElement, exists, func, inspect, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import InstrumentedAttribute, Session

from course_library.core.errors import EntityNotTrackedError, MissingArgumentError
from course_library.models.author import Author
from course_library.models.course import Course
from course_library.schemas.author import AuthorFilterParams

NIL_UUID = uuid.UUID(int=0)

T = TypeVar("T")


def _require(value: T | None, name: str) -> T:
    if value is None:
        raise MissingArgumentError(name)
    return value


def _require_id(value: uuid.UUID | None, name: str) -> uuid.UUID:
    if value is None or value == NIL_UUID:
        raise MissingArgumentError(name)
    return value


def _require_tracked(entity: object) -> None:
    if inspect(entity).transient:
        raise EntityNotTrackedError(entity)


class CourseLibraryRepository:
    """
    Authors and their courses over a single SQLAlchemy session.

    add/delete/update only stage changes on the session; nothing reaches
    the database until save() commits them as one unit.
    """

    def __init__(self, db: Session | None):
        self._db: Session = _require(db, "db")

    # ---- Authors ----
    # Stage a new author (and its courses) with fresh ids
    def add_author(self, author: Author | None) -> None:
        author = _require(author, "author")

        author.id = uuid.uuid4()
        for course in author.courses:
            course.id = uuid.uuid4()

        self._db.add(author)

    # Check if an author exists
    def author_exists(self, author_id: uuid.UUID | None) -> bool:
        author_id = _require_id(author_id, "author_id")
        stmt = select(exists().where(Author.id == author_id))
        return bool(self._db.scalar(stmt))

    # Stage an author for removal
    def delete_author(self, author: Author | None) -> None:
        author = _require(author, "author")
        self._db.delete(author)

    # Get an author by ID
    def get_author(self, author_id: uuid.UUID | None) -> Author | None:
        author_id = _require_id(author_id, "author_id")
        stmt = select(Author).where(Author.id == author_id)
        return self._db.scalars(stmt).first()

    # Case-sensitive substring match; SQLite's LIKE ignores ASCII case
    def _contains(self, column: InstrumentedAttribute[str], text: str) -> ColumnElement[bool]:
        if self._db.get_bind().dialect.name == "sqlite":
            return func.instr(column, text) > 0
        return column.contains(text, autoescape=True)

    # List authors, optionally filtered by category and search text
    def get_authors(self, params: AuthorFilterParams | None = None) -> list[Author]:
        stmt = select(Author)

        if params is None or params.is_empty():
            return list(self._db.scalars(stmt).all())

        main_category = (params.main_category or "").strip()
        if main_category:
            stmt = stmt.where(Author.main_category == main_category)

        search_query = (params.search_query or "").strip()
        if search_query:
            stmt = stmt.where(
                or_(
                    self._contains(Author.first_name, search_query),
                    self._contains(Author.last_name, search_query),
                    self._contains(Author.main_category, search_query),
                )
            )

        return list(self._db.scalars(stmt).all())

    # List the authors with the given IDs, ordered by name
    def get_authors_by_ids(self, author_ids: Iterable[uuid.UUID] | None) -> list[Author]:
        ids = list(_require(author_ids, "author_ids"))
        stmt = (
            select(Author)
            .where(Author.id.in_(ids))
            .order_by(Author.first_name.asc(), Author.last_name.asc())
        )
        return list(self._db.scalars(stmt).all())

    # Mark a loaded or detached author as changed
    def update_author(self, author: Author | None) -> None:
        author = _require(author, "author")
        _require_tracked(author)
        self._db.add(author)

    # ---- Courses ----
    # Stage a new course for the given author
    def add_course(self, author_id: uuid.UUID | None, course: Course | None) -> None:
        author_id = _require_id(author_id, "author_id")
        course = _require(course, "course")

        course.author_id = author_id
        self._db.add(course)

    # Stage a course for removal
    def delete_course(self, course: Course) -> None:
        self._db.delete(course)

    # Get a course of an author
    def get_course(
        self, author_id: uuid.UUID | None, course_id: uuid.UUID | None
    ) -> Course | None:
        author_id = _require_id(author_id, "author_id")
        course_id = _require_id(course_id, "course_id")
        stmt = select(Course).where(Course.author_id == author_id, Course.id == course_id)
        return self._db.scalars(stmt).first()

    # List the courses of an author, ordered by title
    def get_courses(self, author_id: uuid.UUID | None) -> list[Course]:
        author_id = _require_id(author_id, "author_id")
        stmt = (
            select(Course)
            .where(Course.author_id == author_id)
            .order_by(Course.title.asc())
        )
        return list(self._db.scalars(stmt).all())

    # Mark a loaded or detached course as changed
    def update_course(self, course: Course | None) -> None:
        course = _require(course, "course")
        _require_tracked(course)
        self._db.add(course)

    # ---- Unit of work ----
    def save(self) -> bool:
        """Commit every staged change; store errors roll back and propagate."""
        try:
            self._db.commit()
        except SQLAlchemyError:
            self._db.rollback()
            raise
        return True

    def close(self) -> None:
        self._db.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
