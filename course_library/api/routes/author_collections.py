from fastapi import APIRouter, Query
from typing import Annotated
import uuid
from starlette.status import HTTP_201_CREATED

from course_library.api.deps import RepositoryDep
from course_library.schemas.author import AuthorCreate, AuthorRead
from course_library.services.author_service import AuthorService

router = APIRouter(prefix="/authorcollections", tags=["authors"])


@router.get("", response_model=list[AuthorRead])
def get_author_collection(
    repo: RepositoryDep,
    ids: Annotated[list[uuid.UUID], Query(min_length=1)],
):
    return AuthorService.get_author_collection(repo, ids)


@router.post("", response_model=list[AuthorRead], status_code=HTTP_201_CREATED)
def create_author_collection(data: list[AuthorCreate], repo: RepositoryDep):
    return AuthorService.create_author_collection(repo, data)
