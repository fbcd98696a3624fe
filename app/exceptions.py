from typing import Any

from fastapi import HTTPException, status


class InvalidPostIdException(HTTPException):
    def __init__(self, detail: Any = None) -> None:
        super().__init__(status.HTTP_400_BAD_REQUEST, detail=detail)


class PostNotFoundException(HTTPException):
    def __init__(self, detail: Any = None) -> None:
        super().__init__(status.HTTP_404_NOT_FOUND, detail=detail)


class StorageInitializationError(Exception):
    """The database file or the posts table could not be created."""
