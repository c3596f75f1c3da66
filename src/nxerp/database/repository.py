"""Generic SQLAlchemy paged repository."""

from datetime import datetime, UTC
from typing import Any, Callable, Optional, TypeVar

from loguru import logger
from sqlalchemy import String, delete, func, or_, select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

from nxerp.database.base import Repository
from nxerp.database.mappers import entity_to_row, normalize_for_storage
from nxerp.database.store import Store
from nxerp.database.tables import EntityTable
from nxerp.domain.paging import PageResult, normalize_paging, page_offset

E = TypeVar("E")


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(UTC)


class SQLAlchemyRepository(Repository[E]):
    """Paged repository over one entity table of a SQLite Store.

    Constructing a repository bootstraps its table: the table and its indexes
    are created if missing and, when the table is empty, demo rows are seeded
    in a single transaction.
    """

    def __init__(
        self,
        store: Store,
        table: EntityTable[E],
        clock: Callable[[], datetime] = utc_now,
        seed: bool = True,
        seed_count: Optional[int] = None,
    ):
        """Initialize the repository and bootstrap its table.

        Args:
            store: Shared database store
            table: Entity table description
            clock: Source of ``updated_at`` timestamps (must return UTC)
            seed: Whether to seed demo rows into an empty table
            seed_count: Generated rows to seed (defaults to the table's count)

        Raises:
            StorageError: If the schema cannot be created or seeding fails
        """
        self.store = store
        self.table = table
        self.model = table.model
        self.clock = clock
        self.initialize_schema()
        if seed:
            self.seed_if_empty(table.default_seed_count if seed_count is None else seed_count)

    def initialize_schema(self) -> None:
        """Create the table and its indexes if absent."""
        sql_table = self.model.__table__
        with self.store.session(f"creating the {sql_table.name} table") as session:
            connection = session.connection()
            sql_table.create(connection, checkfirst=True)
            # An existing table may predate an index
            for index in sql_table.indexes:
                index.create(connection, checkfirst=True)

    def seed_if_empty(self, count: int) -> bool:
        """Seed demo rows if the table has no rows.

        The generated series and the known rows are written in one
        transaction; nothing is written if any row fails. Generated rows that
        another process inserted after the emptiness check are left as they
        are, so two processes opening a new file can both seed it.

        Returns:
            True if rows were seeded
        """
        with self.store.session(f"seeding the {self.model.__tablename__} table") as session:
            if session.scalar(select(func.count()).select_from(self.model)) > 0:
                return False

            now = self.clock()
            generated = self.table.generate(count, now)
            known = self.table.known_rows(now)
            logger.info(
                f"Seeding {self.model.__tablename__}: {len(generated)} generated, {len(known)} known rows"
            )
            if generated:
                session.execute(
                    sqlite_insert(self.model).on_conflict_do_nothing(index_elements=[self.model.code]),
                    [entity_to_row(normalize_for_storage(e, e.updated_at)) for e in generated],
                )
            for entity in known:
                self._execute_upsert(session, normalize_for_storage(entity, entity.updated_at))
        return True

    def _search_clause(self, search: Optional[str]) -> Optional[Any]:
        term = (search or "").strip().casefold()
        if not term:
            return None
        return or_(
            *(
                func.casefold(getattr(self.model, column), type_=String).contains(term, autoescape=True)
                for column in self.table.search_columns
            )
        )

    def get_page(self, search: Optional[str], page_number: int, page_size: int) -> PageResult[E]:
        """Get one page of records, most recently updated first."""
        page_number, page_size = normalize_paging(page_number, page_size)

        query = select(self.model)
        clause = self._search_clause(search)
        if clause is not None:
            query = query.where(clause)

        with self.store.session(f"listing {self.model.__tablename__}") as session:
            total = session.scalar(select(func.count()).select_from(query.subquery()))
            rows = session.scalars(
                query.order_by(self.model.updated_at.desc(), self.model.code.asc())
                .offset(page_offset(page_number, page_size))
                .limit(page_size)
            ).all()
            items = [self.table.to_domain(row) for row in rows]

        logger.debug(
            f"{self.model.__tablename__} page {page_number} (size {page_size}, "
            f"search {search!r}): {len(items)} of {total}"
        )
        return PageResult(items=items, total_count=total, page_number=page_number, page_size=page_size)

    def get_by_code(self, code: str) -> Optional[E]:
        """Get a record by code (trimmed, case-insensitive)."""
        with self.store.session(f"reading {self.table.label} {code!r}") as session:
            row = session.scalars(
                select(self.model).where(self.model.code == code.strip()).limit(1)
            ).first()
            if row is None:
                return None
            return self.table.to_domain(row)

    def _execute_upsert(self, session: Session, entity: E) -> None:
        row = entity_to_row(entity)
        statement = sqlite_insert(self.model).values(**row)
        statement = statement.on_conflict_do_update(
            index_elements=[self.model.code],
            set_={column: statement.excluded[column] for column in row},
        )
        session.execute(statement)

    def upsert(self, entity: E) -> E:
        """Insert or fully overwrite a record in one statement.

        Every column is overwritten on conflict, including the stored casing
        of the code.
        """
        stored = normalize_for_storage(entity, self.clock())
        with self.store.session(f"saving {self.table.label} {stored.code!r}") as session:
            self._execute_upsert(session, stored)
        logger.debug(f"Upserted {self.table.label} {stored.code}")
        return stored

    def delete(self, code: str) -> bool:
        """Delete a record by code. Returns True if a row was removed."""
        with self.store.session(f"deleting {self.table.label} {code!r}") as session:
            result = session.execute(delete(self.model).where(self.model.code == code.strip()))
            removed = result.rowcount > 0
        logger.debug(f"Delete {self.table.label} {code.strip()}: removed={removed}")
        return removed

    def count(self) -> int:
        """Count all records in the table."""
        with self.store.session(f"counting {self.model.__tablename__}") as session:
            return session.scalar(select(func.count()).select_from(self.model))
