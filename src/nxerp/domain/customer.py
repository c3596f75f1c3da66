"""Customer domain service."""

from nxerp.domain.entities import Customer
from nxerp.domain.master_data import MasterDataService


class CustomerService(MasterDataService[Customer]):
    """Service for managing customers.

    Example:
        service.upsert(Customer(code="CUS-0001", name="Acme Traders"))
        page = service.get_page("acme", page_number=1, page_size=50)
    """

    entity_label = "Customer"
