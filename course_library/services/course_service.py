from __future__ import annotations
import uuid
from fastapi import HTTPException
from starlette.status import HTTP_404_NOT_FOUND

from course_library.core.logging import get_logger
from course_library.models.course import Course
from course_library.repos import CourseLibraryRepository
from course_library.schemas.course import CourseCreate, CourseUpdate

logger = get_logger(__name__)


class CourseService:
    @staticmethod
    # 404 unless the author exists
    def ensure_author(repo: CourseLibraryRepository, author_id: uuid.UUID) -> None:
        if not repo.author_exists(author_id):
            raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="author not found")

    @staticmethod
    # List courses for author
    def list_courses(repo: CourseLibraryRepository, author_id: uuid.UUID) -> list[Course]:
        CourseService.ensure_author(repo, author_id)
        return repo.get_courses(author_id)

    @staticmethod
    # Get course or 404
    def get_course(
        repo: CourseLibraryRepository, author_id: uuid.UUID, course_id: uuid.UUID
    ) -> Course:
        CourseService.ensure_author(repo, author_id)
        course = repo.get_course(author_id, course_id)
        if course is None:
            raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="course not found")
        return course

    @staticmethod
    # Create course for author
    def create_course(
        repo: CourseLibraryRepository, author_id: uuid.UUID, data: CourseCreate
    ) -> Course:
        CourseService.ensure_author(repo, author_id)
        course = Course(id=uuid.uuid4(), title=data.title, description=data.description)
        repo.add_course(author_id, course)
        _ = repo.save()
        logger.info("Created course %s for author %s", course.id, author_id)
        return course

    @staticmethod
    # Update course fields
    def update_course(
        repo: CourseLibraryRepository,
        author_id: uuid.UUID,
        course_id: uuid.UUID,
        data: CourseUpdate,
    ) -> Course:
        course = CourseService.get_course(repo, author_id, course_id)
        for field, value in data.model_dump().items():
            setattr(course, field, value)
        repo.update_course(course)
        _ = repo.save()
        logger.info("Updated course %s", course_id)
        return course

    @staticmethod
    # Delete course
    def delete_course(
        repo: CourseLibraryRepository, author_id: uuid.UUID, course_id: uuid.UUID
    ) -> None:
        course = CourseService.get_course(repo, author_id, course_id)
        repo.delete_course(course)
        _ = repo.save()
        logger.info("Deleted course %s", course_id)
