import re

from fastapi import Depends, Path, Request

from app.database import Database
from app.exceptions import InvalidPostIdException
from app.repositories.post_repository import PostRepository
from app.services.post_service import PostService

ERROR_INVALID_POST_ID = "Invalid post ID"
MAX_POST_ID = 2**63 - 1
MAX_POST_ID_DIGITS = len(str(MAX_POST_ID))
POST_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def database(request: Request) -> Database:
    return request.app.state.database


def post_repository(db: Database = Depends(database)) -> PostRepository:
    return PostRepository(db.connection)


def post_service(repository: PostRepository = Depends(post_repository)) -> PostService:
    return PostService(repository)


def parse_post_id(id: str = Path()) -> int:
    # int() refuses very long digit strings, so the length goes first
    if (
        not POST_ID_PATTERN.fullmatch(id)
        or len(id.lstrip("+-")) > MAX_POST_ID_DIGITS
        or abs(int(id)) > MAX_POST_ID
    ):
        raise InvalidPostIdException(ERROR_INVALID_POST_ID)
    return int(id)
