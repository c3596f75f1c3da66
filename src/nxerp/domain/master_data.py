"""Validation gate shared by the master-data services."""

from typing import Generic, Optional, TypeVar

from nxerp.database.base import Repository
from nxerp.domain.errors import ValidationError, required_field_missing
from nxerp.domain.paging import PageResult

E = TypeVar("E")


def is_blank(value: Optional[str]) -> bool:
    """True for None, '' and whitespace-only strings."""
    return value is None or not value.strip()


class MasterDataService(Generic[E]):
    """Service in front of one master-data repository.

    Only required fields are checked. Blank codes on lookups and deletes are
    treated as "not found" rather than as errors, since they usually come
    straight from an empty form field.
    """

    entity_label = "Record"

    def __init__(self, repository: Repository[E]):
        """Initialize the service.

        Args:
            repository: Repository for the entity type
        """
        self.repository = repository

    def get_page(
        self, search: Optional[str] = None, page_number: int = 1, page_size: int = 50
    ) -> PageResult[E]:
        """Get one page of records, most recently updated first."""
        return self.repository.get_page(search, page_number, page_size)

    def get_by_code(self, code: Optional[str]) -> Optional[E]:
        """Get a record by code. Returns None for a blank or unknown code."""
        if is_blank(code):
            return None
        return self.repository.get_by_code(code)

    def upsert(self, entity: E) -> E:
        """Validate and save a record.

        Returns:
            The record as persisted

        Raises:
            ValidationError: If code or name is blank; nothing is written
        """
        for field in ("code", "name"):
            if is_blank(getattr(entity, field)):
                raise ValidationError(required_field_missing(self.entity_label, field), field=field)
        return self.repository.upsert(entity)

    def delete(self, code: Optional[str]) -> bool:
        """Delete a record by code. Returns False for a blank or unknown code."""
        if is_blank(code):
            return False
        return self.repository.delete(code)
