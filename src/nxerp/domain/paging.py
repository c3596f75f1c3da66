"""Page results and page arithmetic shared by every repository."""

from dataclasses import dataclass
from typing import Generic, Optional, Protocol, TypeVar

E = TypeVar("E")

MIN_PAGE_NUMBER = 1
MIN_PAGE_SIZE = 10


@dataclass(frozen=True)
class PageResult(Generic[E]):
    """A bounded slice of an ordered result set plus its metadata.

    ``page_number`` and ``page_size`` echo the normalized request, so
    ``page_number`` may exceed ``total_pages`` when the caller asked for a
    page past the end (``items`` is then empty).
    """

    items: list[E]
    total_count: int
    page_number: int
    page_size: int

    @property
    def total_pages(self) -> int:
        """Number of pages, never less than one."""
        return max(1, -(-self.total_count // self.page_size))


def normalize_paging(page_number: int, page_size: int) -> tuple[int, int]:
    """Clamp a page request to a page number >= 1 and a page size >= 10."""
    return max(MIN_PAGE_NUMBER, page_number), max(MIN_PAGE_SIZE, page_size)


def page_offset(page_number: int, page_size: int) -> int:
    """Row offset of a normalized page."""
    return (page_number - 1) * page_size


class PageSource(Protocol[E]):
    def get_page(
        self, search: Optional[str], page_number: int, page_size: int
    ) -> PageResult[E]: ...


def fetch_page_clamped(
    source: PageSource[E], search: Optional[str], page_number: int, page_size: int
) -> PageResult[E]:
    """Fetch a page, falling back to the last page when past the end.

    Repositories never clamp the page number themselves. A list view that
    remembers its page number (and may now be past the end, e.g. after a
    delete) calls this instead: it asks once, and if the requested page
    exceeds the reported ``total_pages`` it asks again for the last page.

    Args:
        source: Anything with a ``get_page`` method (service or repository)
        search: Optional search term
        page_number: Requested page number
        page_size: Requested page size

    Returns:
        The requested page, or the last page if the request was out of range
    """
    page = source.get_page(search, page_number, page_size)
    if page.page_number > page.total_pages:
        page = source.get_page(search, page.total_pages, page_size)
    return page
