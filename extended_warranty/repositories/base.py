"""
Repository Interfaces
=====================
Collaborators the warranty engine consumes for product and warranty data.

Concrete implementations (SQL, document store, in-memory) subclass these.
"""

from abc import ABC, abstractmethod
from typing import Optional

from extended_warranty.models import Product, Warranty


class WarrantyRepositoryError(Exception):
    """Base class for infrastructure failures in a repository."""
    pass


class ProductNotFoundError(WarrantyRepositoryError):
    """Raised when a product code is not in the catalog."""

    def __init__(self, code: str):
        super().__init__(f"Product with code {code} not found")
        self.code = code


class WarrantyStorageError(WarrantyRepositoryError):
    """Raised when a warranty cannot be persisted."""
    pass


class ProductRepository(ABC):
    """Read access to the product catalog."""

    @abstractmethod
    def get_by_code(self, code: str) -> Product:
        """Return the product with this code, or raise ProductNotFoundError."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Add a product to the catalog."""


class WarrantyRepository(ABC):
    """Storage for extended warranties, keyed by product code."""

    @abstractmethod
    def get_insured_product_by_code(self, code: str) -> Optional[Product]:
        """Return the product if it already carries a warranty, else None."""

    @abstractmethod
    def get_by_code(self, code: str) -> Optional[Warranty]:
        """Return the warranty registered for a product code, or None."""

    @abstractmethod
    def add(self, warranty: Warranty) -> None:
        """Persist a new warranty. Raises WarrantyStorageError on failure."""
