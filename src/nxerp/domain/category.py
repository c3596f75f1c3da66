"""Category domain service."""

from nxerp.domain.entities import Category
from nxerp.domain.master_data import MasterDataService


class CategoryService(MasterDataService[Category]):
    """Service for managing categories.

    ``parent_category`` is free text; it is not checked against existing
    category codes.
    """

    entity_label = "Category"
