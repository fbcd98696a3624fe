import sqlite3
from typing import Any

from aws_lambda_powertools import Logger


class PostRepository:
    """Expects a connection whose row_factory is sqlite3.Row."""

    def __init__(self, connection: sqlite3.Connection):
        self._logger = Logger(utc=True)
        self._connection = connection

    def create_post(self, title: str, content: str) -> int:
        cursor = self._connection.execute(
            "INSERT INTO posts (title, content) VALUES (?, ?)", (title, content)
        )
        return cursor.lastrowid

    def delete_post(self, post_id: int) -> int:
        cursor = self._connection.execute(
            "DELETE FROM posts WHERE id = ?", (post_id,)
        )
        return cursor.rowcount

    def get_all_posts(self) -> list[dict[str, Any]]:
        cursor = self._connection.execute(
            "SELECT id, title, content, created_at FROM posts "
            "ORDER BY created_at DESC, id DESC"
        )
        return [dict(row) for row in cursor.fetchall()]

    def get_post_by_id(self, post_id: int) -> dict[str, Any] | None:
        row = self._connection.execute(
            "SELECT id, title, content, created_at FROM posts WHERE id = ?",
            (post_id,),
        ).fetchone()
        return dict(row) if row else None

    def update_post(self, post_id: int, title: str, content: str) -> int:
        cursor = self._connection.execute(
            "UPDATE posts SET title = ?, content = ? WHERE id = ?",
            (title, content, post_id),
        )
        return cursor.rowcount
