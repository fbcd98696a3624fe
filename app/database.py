import os
import sqlite3

from aws_lambda_powertools import Logger

from app.exceptions import StorageInitializationError

CREATE_POSTS_TABLE = """
    CREATE TABLE IF NOT EXISTS posts (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT NOT NULL,
        content TEXT NOT NULL,
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP
    )
"""


class Database:
    """Owns the single SQLite connection shared by every request."""

    def __init__(self, path: str):
        self._logger = Logger(utc=True)
        self._path = path
        self._connection: sqlite3.Connection | None = None

    @property
    def connection(self) -> sqlite3.Connection:
        if self._connection is None:
            raise RuntimeError("The database has not been initialized")
        return self._connection

    def initialize(self) -> sqlite3.Connection:
        """Open the database, creating the file and the posts table if the
        file does not exist yet. An existing file is trusted to carry the
        schema already.

        Raises StorageInitializationError when the store is unusable.
        """
        is_new = not os.path.exists(self._path)
        try:
            if is_new:
                self._logger.info(f"Creating database file and table {self._path=}")
                directory = os.path.dirname(self._path)
                if directory:
                    os.makedirs(directory, exist_ok=True)
            connection = sqlite3.connect(
                self._path, check_same_thread=False, isolation_level=None
            )
            connection.row_factory = sqlite3.Row
            if is_new:
                try:
                    connection.execute(CREATE_POSTS_TABLE)
                except sqlite3.Error:
                    connection.close()
                    raise
        except (OSError, sqlite3.Error) as error:
            self._logger.exception(f"Failed to initialize database {self._path=}")
            raise StorageInitializationError(str(error)) from error
        self._connection = connection
        return connection

    def close(self):
        if self._connection is not None:
            self._connection.close()
            self._connection = None
            self._logger.info(f"Database connection closed {self._path=}")
