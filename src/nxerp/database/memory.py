"""In-memory repository with the same semantics as the SQLite one."""

import string
import threading
from datetime import datetime
from typing import Callable, Optional, TypeVar

from nxerp.database.base import Repository
from nxerp.database.mappers import normalize_for_storage
from nxerp.database.repository import utc_now
from nxerp.database.tables import EntityTable
from nxerp.domain.paging import PageResult, normalize_paging, page_offset

E = TypeVar("E")

# SQLite's NOCASE collation folds A-Z only
_NOCASE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def code_key(code: str) -> str:
    """Key under which a code is stored, compared like a NOCASE column."""
    return code.strip().translate(_NOCASE)


class InMemoryRepository(Repository[E]):
    """Dictionary-backed repository keyed by code.

    Nothing is persisted. Useful where a throwaway store is wanted, such as
    service tests and demos without a data directory.
    """

    def __init__(
        self,
        table: EntityTable[E],
        clock: Callable[[], datetime] = utc_now,
        seed: bool = True,
        seed_count: Optional[int] = None,
    ):
        self.table = table
        self.clock = clock
        self._lock = threading.Lock()
        self._by_code: dict[str, E] = {}
        if seed:
            self._seed(table.default_seed_count if seed_count is None else seed_count)

    def _seed(self, count: int) -> None:
        now = self.clock()
        with self._lock:
            for entity in self.table.generate(count, now) + self.table.known_rows(now):
                stored = normalize_for_storage(entity, entity.updated_at)
                self._by_code[code_key(stored.code)] = stored

    def _matches(self, entity: E, term: str) -> bool:
        return any(term in getattr(entity, column).casefold() for column in self.table.search_columns)

    def get_page(self, search: Optional[str], page_number: int, page_size: int) -> PageResult[E]:
        page_number, page_size = normalize_paging(page_number, page_size)
        term = (search or "").strip().casefold()
        with self._lock:
            rows = list(self._by_code.values())
        if term:
            rows = [e for e in rows if self._matches(e, term)]

        # Stable sorts: code ascending breaks ties in updated_at
        rows.sort(key=lambda e: code_key(e.code))
        rows.sort(key=lambda e: e.updated_at, reverse=True)

        offset = page_offset(page_number, page_size)
        return PageResult(
            items=rows[offset:offset + page_size],
            total_count=len(rows),
            page_number=page_number,
            page_size=page_size,
        )

    def get_by_code(self, code: str) -> Optional[E]:
        with self._lock:
            return self._by_code.get(code_key(code))

    def upsert(self, entity: E) -> E:
        stored = normalize_for_storage(entity, self.clock())
        with self._lock:
            self._by_code[code_key(stored.code)] = stored
        return stored

    def delete(self, code: str) -> bool:
        with self._lock:
            return self._by_code.pop(code_key(code), None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._by_code)
