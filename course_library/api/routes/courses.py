from fastapi import APIRouter, Response
import uuid
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from course_library.api.deps import RepositoryDep
from course_library.schemas.course import CourseCreate, CourseRead, CourseUpdate
from course_library.services.course_service import CourseService

router = APIRouter(prefix="/authors/{author_id}/courses", tags=["courses"])


@router.get("", response_model=list[CourseRead])
def list_courses(author_id: uuid.UUID, repo: RepositoryDep):
    return CourseService.list_courses(repo, author_id)


@router.get("/{course_id}", response_model=CourseRead)
def get_course(author_id: uuid.UUID, course_id: uuid.UUID, repo: RepositoryDep):
    return CourseService.get_course(repo, author_id, course_id)


@router.post("", response_model=CourseRead, status_code=HTTP_201_CREATED)
def create_course(author_id: uuid.UUID, data: CourseCreate, repo: RepositoryDep):
    return CourseService.create_course(repo, author_id, data)


@router.put("/{course_id}", response_model=CourseRead)
def update_course(
    author_id: uuid.UUID,
    course_id: uuid.UUID,
    data: CourseUpdate,
    repo: RepositoryDep,
):
    return CourseService.update_course(repo, author_id, course_id, data)


@router.delete("/{course_id}", status_code=HTTP_204_NO_CONTENT)
def delete_course(author_id: uuid.UUID, course_id: uuid.UUID, repo: RepositoryDep) -> Response:
    CourseService.delete_course(repo, author_id, course_id)
    return Response(status_code=HTTP_204_NO_CONTENT)
