from fastapi import APIRouter, Query, Request, Response
from typing import Annotated
import uuid
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from course_library.api.deps import RepositoryDep
from course_library.core.logging import get_logger
from course_library.schemas.author import (
    AuthorCreate,
    AuthorFilterParams,
    AuthorRead,
    AuthorUpdate,
)
from course_library.services.author_service import AuthorService

router = APIRouter(prefix="/authors", tags=["authors"])


@router.get("", response_model=list[AuthorRead])
def list_authors(
    request: Request,
    repo: RepositoryDep,
    main_category: Annotated[str | None, Query(max_length=50)] = None,
    search_query: Annotated[str | None, Query(max_length=100)] = None,
):
    logger = get_logger(__name__, request)
    logger.info("Listing authors")
    params = AuthorFilterParams(main_category=main_category, search_query=search_query)
    return AuthorService.list_authors(repo, params)


@router.get("/{author_id}", response_model=AuthorRead)
def get_author(author_id: uuid.UUID, repo: RepositoryDep):
    return AuthorService.get_author(repo, author_id)


@router.post("", response_model=AuthorRead, status_code=HTTP_201_CREATED)
def create_author(data: AuthorCreate, repo: RepositoryDep):
    return AuthorService.create_author(repo, data)


@router.put("/{author_id}", response_model=AuthorRead)
def update_author(author_id: uuid.UUID, data: AuthorUpdate, repo: RepositoryDep):
    return AuthorService.update_author(repo, author_id, data)


@router.delete("/{author_id}", status_code=HTTP_204_NO_CONTENT)
def delete_author(author_id: uuid.UUID, repo: RepositoryDep) -> Response:
    AuthorService.delete_author(repo, author_id)
    return Response(status_code=HTTP_204_NO_CONTENT)
