"""Supplier domain service."""

from nxerp.domain.entities import Supplier
from nxerp.domain.master_data import MasterDataService


class SupplierService(MasterDataService[Supplier]):
    """Service for managing suppliers."""

    entity_label = "Supplier"
