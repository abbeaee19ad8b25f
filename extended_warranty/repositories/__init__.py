"""Repositories Package - Product and warranty storage collaborators."""

from .base import (
    ProductNotFoundError,
    ProductRepository,
    WarrantyRepository,
    WarrantyRepositoryError,
    WarrantyStorageError,
)
from .memory import InMemoryProductRepository, InMemoryWarrantyRepository

__all__ = [
    "ProductNotFoundError",
    "ProductRepository",
    "WarrantyRepository",
    "WarrantyRepositoryError",
    "WarrantyStorageError",
    "InMemoryProductRepository",
    "InMemoryWarrantyRepository",
]
