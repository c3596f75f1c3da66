"""The embedded SQLite store shared by all repositories."""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

from loguru import logger
from sqlalchemy import create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import NullPool

from nxerp.domain.errors import StorageError, storage_failure


def _casefold(value):
    return value.casefold() if isinstance(value, str) else value


def _register_functions(dbapi_connection, connection_record) -> None:
    # SQLite's lower() and LIKE only fold ASCII letters
    dbapi_connection.create_function("casefold", 1, _casefold, deterministic=True)


class Store:
    """One SQLite database file holding every master-data table.

    Connections are not pooled: each ``session()`` block opens its own
    connection and releases it on exit, whatever the outcome. SQLite's file
    locking is the only concurrency control.
    """

    def __init__(self, database_path: Union[str, Path]):
        """Initialize the store, creating the containing directory if needed.

        Args:
            database_path: Path to the SQLite database file

        Raises:
            StorageError: If the directory cannot be created
        """
        self.database_path = Path(database_path)
        try:
            self.database_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(storage_failure("creating the data directory", e)) from e

        self.database_url = f"sqlite:///{self.database_path}"
        self.engine = create_engine(self.database_url, poolclass=NullPool, echo=False)
        event.listen(self.engine, "connect", _register_functions)
        self.session_factory = sessionmaker(bind=self.engine)
        logger.debug(f"Store opened at {self.database_path}")

    @contextmanager
    def session(self, action: str = "accessing the database") -> Iterator[Session]:
        """Open a session for one operation inside a single transaction.

        Commits when the block exits normally and rolls back otherwise.
        Driver errors are re-raised as StorageError.

        Args:
            action: Short description used in the error message
        """
        try:
            with self.session_factory() as session, session.begin():
                yield session
        except SQLAlchemyError as e:
            raise StorageError(storage_failure(action, e)) from e

    def close(self) -> None:
        """Release engine resources."""
        self.engine.dispose()
