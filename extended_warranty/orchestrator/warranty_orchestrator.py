"""
Warranty Orchestrator

Runs the extended warranty pipeline for a product sale.

This orchestrator:
1. Validates the request (required data, existing warranty, eligible code)
2. Prices the warranty from the product price tier
3. Computes the expiration date
4. Registers the warranty with the warranty repository
"""

import logging
from datetime import datetime
from typing import Optional

from extended_warranty.compute.eligibility import validate
from extended_warranty.compute.service import calculate_warranty_price, calculate_expiration_date
from extended_warranty.config import WarrantyRulesConfig, config
from extended_warranty.models import GenerationResult, Product, Warranty
from extended_warranty.repositories import ProductRepository, WarrantyRepository


logger = logging.getLogger(__name__)


class WarrantyOrchestrator:
    """
    Sells extended warranties.

    Holds no state between calls; everything lives in the repositories.
    The current time is always passed in by the caller.
    """

    def __init__(
        self,
        product_repository: ProductRepository,
        warranty_repository: WarrantyRepository,
        rules: Optional[WarrantyRulesConfig] = None
    ):
        """
        Initialize the warranty orchestrator.

        Args:
            product_repository: Product catalog lookup
            warranty_repository: Warranty lookup and storage
            rules: Pricing and dating rules (defaults to the global config)
        """
        self.product_repository = product_repository
        self.warranty_repository = warranty_repository
        self.rules = rules or config.rules

    def has_warranty(self, code: str) -> bool:
        """Check whether a product already carries an extended warranty."""
        return self.warranty_repository.get_insured_product_by_code(code) is not None

    def get_warranty(self, code: str) -> Optional[Warranty]:
        """Get the warranty registered for a product code."""
        return self.warranty_repository.get_by_code(code)

    def generate(
        self,
        code: Optional[str],
        customer_name: Optional[str],
        now: datetime
    ) -> GenerationResult:
        """
        Generate an extended warranty if the business rules allow it.

        Args:
            code: Product code
            customer_name: Name of the customer buying the warranty
            now: Instant of the request

        Returns:
            GenerationResult with either the registered warranty or the
            rejection reason

        Raises:
            ProductNotFoundError: If the code is not in the catalog
            WarrantyStorageError: If the warranty could not be stored
        """
        insured = bool(code) and self.has_warranty(code)
        rejection = validate(code, customer_name, insured)
        if rejection is not None:
            logger.warning(f"Warranty rejected - product_code={code}, reason={rejection.value}")
            return GenerationResult.rejected(rejection)

        product = self.product_repository.get_by_code(code)
        warranty = self.register(product, customer_name, now)
        return GenerationResult.success(warranty)

    def register(self, product: Product, customer_name: str, now: datetime) -> Warranty:
        """
        Price, date and store a warranty for an already validated product.

        Args:
            product: Product being insured
            customer_name: Name of the customer buying the warranty
            now: Instant of the request

        Returns:
            The warranty handed to the repository
        """
        percentage, warranty_price = calculate_warranty_price(
            product.price,
            threshold=self.rules.price_threshold,
            high_tier_percentage=self.rules.high_tier_percentage,
            low_tier_percentage=self.rules.low_tier_percentage
        )
        expiration_date = calculate_expiration_date(
            now.date(),
            product.price,
            threshold=self.rules.price_threshold,
            high_tier_days=self.rules.high_tier_days,
            low_tier_days=self.rules.low_tier_days
        )

        warranty = Warranty(
            product=product,
            request_date=now,
            expiration_date=expiration_date,
            price=warranty_price,
            customer_name=customer_name
        )
        self.warranty_repository.add(warranty)

        logger.info(
            f"Warranty registered - product_code={product.code}, percentage={percentage}, "
            f"price={warranty_price}, expiration_date={expiration_date.isoformat()}"
        )
        return warranty
