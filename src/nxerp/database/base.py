"""Abstract repository interface."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

# Import directly to avoid circular import through domain/__init__.py
from nxerp.domain.paging import PageResult

E = TypeVar("E")


class Repository(ABC, Generic[E]):
    """Abstract paged repository for one master-data entity type."""

    @abstractmethod
    def get_page(self, search: Optional[str], page_number: int, page_size: int) -> PageResult[E]:
        """Get one page of records, most recently updated first.

        Args:
            search: Optional case-insensitive substring to match against the
                searchable columns; blank means no filter
            page_number: 1-based page number (values below 1 are treated as 1)
            page_size: Page size (values below 10 are treated as 10)

        Returns:
            PageResult with the matching total and the requested slice
        """
        pass

    @abstractmethod
    def get_by_code(self, code: str) -> Optional[E]:
        """Get a record by code (trimmed, case-insensitive). None if absent."""
        pass

    @abstractmethod
    def upsert(self, entity: E) -> E:
        """Insert or fully overwrite the record with the entity's code.

        Returns the record as persisted (trimmed, with ``updated_at`` set).
        """
        pass

    @abstractmethod
    def delete(self, code: str) -> bool:
        """Delete a record by code. Returns True if a row was removed."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Count all records in the table."""
        pass
