import os

# Must be set before course_library.core.config is imported.
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

import uuid
import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from course_library.main import app
from course_library.db.session import get_db
from course_library.models import Author, Base, Course
from course_library.repos import CourseLibraryRepository

TEST_DATABASE_URL = "sqlite+pysqlite:///:memory:"


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
def test_engine():
    """Fresh in-memory database per test, shared across threads."""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return sessionmaker(bind=test_engine, autocommit=False, autoflush=False, future=True)


@pytest.fixture
def db_session(session_factory):
    """Create a fresh database session for each test."""
    session = session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def repo(db_session):
    return CourseLibraryRepository(db_session)


@pytest.fixture
def test_client(session_factory):
    """Create a test client whose requests use the per-test database."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def make_author(
    first_name: str = "Berry",
    last_name: str = "Griffin Beak Eldritch",
    main_category: str = "Ships",
    course_titles: tuple[str, ...] = (),
) -> Author:
    return Author(
        first_name=first_name,
        last_name=last_name,
        main_category=main_category,
        courses=[Course(title=t) for t in course_titles],
    )


@pytest.fixture
def author_factory():
    return make_author


@pytest.fixture
def seeded_authors(repo):
    """A small library persisted through the repository."""
    authors = [
        make_author("Berry", "Griffin Beak Eldritch", "Ships",
                    ("Commandeering a Ship Without Getting Caught", "Overthrowing Mutiny")),
        make_author("Nancy", "Swashbuckler Rye", "Rum",
                    ("Avoiding Brawling While Drinking as Much Rum as Possible",)),
        make_author("Eli", "Ivory Bones Sweet", "Singing", ("Singalong Pirate Hits",)),
        make_author("Arnold", "The Unseen Stafford", "Singing"),
        make_author("Seabury", "Toxic Reyson", "Maps"),
        make_author("Rutherford", "Fearless Cloven", "General debauchery"),
    ]
    for author in authors:
        repo.add_author(author)
    assert repo.save() is True
    return authors


@pytest.fixture
def sample_author(test_client):
    """Create a sample author through the API."""
    unique_suffix = uuid.uuid4().hex[:8]
    response = test_client.post(
        "/api/v1/authors",
        json={
            "first_name": f"Berry {unique_suffix}",
            "last_name": "Griffin Beak Eldritch",
            "main_category": "Ships",
        },
    )
    assert response.status_code == 201, f"Failed to create sample author: {response.text}"
    return response.json()


@pytest.fixture
def sample_course(test_client, sample_author):
    """Create a sample course for the sample author through the API."""
    response = test_client.post(
        f"/api/v1/authors/{sample_author['id']}/courses",
        json={"title": "Overthrowing Mutiny", "description": "In this course, the author provides tips."},
    )
    assert response.status_code == 201, f"Failed to create sample course: {response.text}"
    return response.json()


@pytest.fixture
def headers_with_correlation():
    """HTTP headers with correlation ID."""
    return {"X-Request-ID": str(uuid.uuid4())}
