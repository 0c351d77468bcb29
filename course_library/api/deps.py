from collections.abc import Generator
from typing import Annotated
from fastapi import Depends
from sqlalchemy.orm import Session

from course_library.db.session import get_db
from course_library.repos import CourseLibraryRepository


# Repository bound to the request's session; released when the request ends.
def get_repository(
    db: Annotated[Session, Depends(get_db)],
) -> Generator[CourseLibraryRepository, None, None]:
    with CourseLibraryRepository(db) as repo:
        yield repo


RepositoryDep = Annotated[CourseLibraryRepository, Depends(get_repository)]
