from __future__ import annotations
import uuid
from collections.abc import Sequence
from fastapi import HTTPException
from starlette.status import HTTP_404_NOT_FOUND

from course_library.core.logging import get_logger
from course_library.models.author import Author
from course_library.models.course import Course
from course_library.repos import CourseLibraryRepository
from course_library.schemas.author import AuthorCreate, AuthorFilterParams, AuthorUpdate

logger = get_logger(__name__)


def _build_author(data: AuthorCreate) -> Author:
    return Author(
        first_name=data.first_name,
        last_name=data.last_name,
        main_category=data.main_category,
        courses=[
            Course(title=c.title, description=c.description) for c in data.courses
        ],
    )


class AuthorService:
    @staticmethod
    # List authors
    def list_authors(
        repo: CourseLibraryRepository, params: AuthorFilterParams | None = None
    ) -> list[Author]:
        return repo.get_authors(params)

    @staticmethod
    # Get author or 404
    def get_author(repo: CourseLibraryRepository, author_id: uuid.UUID) -> Author:
        author = repo.get_author(author_id)
        if author is None:
            raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="author not found")
        return author

    @staticmethod
    # Create author (with nested courses)
    def create_author(repo: CourseLibraryRepository, data: AuthorCreate) -> Author:
        author = _build_author(data)
        repo.add_author(author)
        _ = repo.save()
        logger.info("Created author %s with %d course(s)", author.id, len(data.courses))
        return author

    @staticmethod
    # Update author fields
    def update_author(
        repo: CourseLibraryRepository, author_id: uuid.UUID, data: AuthorUpdate
    ) -> Author:
        author = AuthorService.get_author(repo, author_id)
        for field, value in data.model_dump().items():
            setattr(author, field, value)
        repo.update_author(author)
        _ = repo.save()
        logger.info("Updated author %s", author_id)
        return author

    @staticmethod
    # Delete author and its courses
    def delete_author(repo: CourseLibraryRepository, author_id: uuid.UUID) -> None:
        author = AuthorService.get_author(repo, author_id)
        repo.delete_author(author)
        _ = repo.save()
        logger.info("Deleted author %s", author_id)

    # ---- Collections ----
    @staticmethod
    def create_author_collection(
        repo: CourseLibraryRepository, items: Sequence[AuthorCreate]
    ) -> list[Author]:
        """All authors are committed together or not at all."""
        authors = [_build_author(data) for data in items]
        for author in authors:
            repo.add_author(author)
        _ = repo.save()
        logger.info("Created author collection of %d author(s)", len(authors))
        return authors

    @staticmethod
    def get_author_collection(
        repo: CourseLibraryRepository, author_ids: Sequence[uuid.UUID]
    ) -> list[Author]:
        """Every requested id must exist; otherwise the whole lookup is a 404."""
        authors = repo.get_authors_by_ids(author_ids)
        missing = set(author_ids) - {a.id for a in authors}
        if missing:
            raise HTTPException(
                status_code=HTTP_404_NOT_FOUND,
                detail={
                    "message": "authors not found",
                    "missing": sorted(str(m) for m in missing),
                },
            )
        return authors
