"""Domain package exports for entities, errors, and service ports."""

from .entities import Department, Seller
from .errors import DbError, StateError, ValidationError
from .ports import DataChangeListener, DepartmentService, SellerService, UseCaseError

__all__ = [
    "DataChangeListener",
    "DbError",
    "Department",
    "DepartmentService",
    "Seller",
    "SellerService",
    "StateError",
    "UseCaseError",
    "ValidationError",
]
