import pytest

from app.database import Database
from app.schemas.post_schema import CreatePost
from app.settings import Settings


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(database_path=str(tmp_path / "db" / "blog.db"))


@pytest.fixture
def database(settings: Settings) -> Database:
    database = Database(settings.database_path)
    database.initialize()
    yield database
    database.close()


@pytest.fixture
def make_post(faker):
    def make() -> CreatePost:
        return CreatePost(title=faker.sentence(), content=faker.text())

    return make


@pytest.fixture
def create_posts(make_post) -> list[CreatePost]:
    return [make_post() for _ in range(5)]
