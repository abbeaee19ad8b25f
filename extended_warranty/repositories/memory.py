"""
In-Memory Repositories
======================
Dictionary backed repositories used by the tool server and the tests.
"""

import logging
from typing import Dict, Iterable, Optional

from extended_warranty.models import Product, Warranty
from extended_warranty.repositories.base import (
    ProductNotFoundError,
    ProductRepository,
    WarrantyRepository,
    WarrantyStorageError,
)


logger = logging.getLogger(__name__)


class InMemoryProductRepository(ProductRepository):
    """Product catalog held in a dict keyed by product code."""

    def __init__(self, products: Iterable[Product] = ()):
        self._products: Dict[str, Product] = {}
        for product in products:
            self.add(product)

    def get_by_code(self, code: str) -> Product:
        try:
            return self._products[code]
        except KeyError:
            raise ProductNotFoundError(code) from None

    def add(self, product: Product) -> None:
        self._products[product.code] = product


class InMemoryWarrantyRepository(WarrantyRepository):
    """
    Warranty store held in a dict keyed by product code.

    Refuses a second warranty for the same product, standing in for the
    unique constraint a database would enforce.
    """

    def __init__(self):
        self._warranties: Dict[str, Warranty] = {}

    def get_insured_product_by_code(self, code: str) -> Optional[Product]:
        warranty = self._warranties.get(code)
        return warranty.product if warranty else None

    def get_by_code(self, code: str) -> Optional[Warranty]:
        return self._warranties.get(code)

    def add(self, warranty: Warranty) -> None:
        code = warranty.product.code
        if code in self._warranties:
            raise WarrantyStorageError(f"A warranty for product {code} is already stored")
        self._warranties[code] = warranty
        logger.debug(f"Stored warranty - product_code={code}, total={len(self._warranties)}")

    def __len__(self) -> int:
        return len(self._warranties)
