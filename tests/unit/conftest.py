import pytest

from app.database import Database
from app.repositories.post_repository import PostRepository
from app.services.post_service import PostService


@pytest.fixture
def post_repository(database: Database) -> PostRepository:
    return PostRepository(database.connection)


@pytest.fixture
def post_service(post_repository: PostRepository) -> PostService:
    return PostService(post_repository)
