"""Domain layer for nxerp application."""

from nxerp.domain.entities import Customer, Supplier, Category
from nxerp.domain.errors import DomainError, ValidationError, StorageError
from nxerp.domain.paging import PageResult

__all__ = [
    "Customer",
    "Supplier",
    "Category",
    "PageResult",
    "DomainError",
    "ValidationError",
    "StorageError",
    "CustomerService",
    "SupplierService",
    "CategoryService",
]

_SERVICE_MODULES = {
    "CustomerService": "nxerp.domain.customer",
    "SupplierService": "nxerp.domain.supplier",
    "CategoryService": "nxerp.domain.category",
}


# Import services lazily: they depend on nxerp.database, which imports this package
def __getattr__(name):
    if name in _SERVICE_MODULES:
        import importlib
        return getattr(importlib.import_module(_SERVICE_MODULES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
