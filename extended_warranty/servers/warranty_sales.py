"""Warranty Sales MCP Server - FastMCP HTTP"""
import logging
import sys
from datetime import datetime
from typing import Callable, Optional

from fastmcp import FastMCP

from extended_warranty.compute.service import calculate_warranty_price, calculate_expiration_date
from extended_warranty.config import config
from extended_warranty.models import Product
from extended_warranty.orchestrator import WarrantyOrchestrator
from extended_warranty.repositories import (
    InMemoryProductRepository,
    InMemoryWarrantyRepository,
    ProductNotFoundError,
    WarrantyStorageError,
)


logger = logging.getLogger(__name__)

# Demo catalog
DEMO_PRODUCTS = [
    Product(code="C001", name="Computador Lenovo", price="780000"),
    Product(code="F01TSA0150", name="Nevera Samsung", price="450000"),
    Product(code="T2019XZ", name="Televisor LG", price="1250000"),
]


class WarrantySalesTools:
    """Tool handlers over a WarrantyOrchestrator."""

    def __init__(self, orchestrator: WarrantyOrchestrator, clock: Callable[[], datetime] = datetime.now):
        self.orchestrator = orchestrator
        self.clock = clock

    def generate_warranty(self, product_code: str, customer_name: str) -> dict:
        """Generate an extended warranty for a product bought by a customer.

        Products already insured, or whose code carries exactly three vowels, are rejected.
        """
        try:
            result = self.orchestrator.generate(product_code, customer_name, now=self.clock())
        except ProductNotFoundError as e:
            logger.error(f"Warranty generation failed - product_code={product_code}, error={str(e)}")
            return {"status": "error", "error_code": "PRODUCT_NOT_FOUND", "message": str(e)}
        except WarrantyStorageError as e:
            logger.error(f"Warranty storage failed - product_code={product_code}, error={str(e)}")
            return {"status": "error", "error_code": "STORAGE_ERROR", "message": str(e)}

        if not result.accepted:
            return {
                "status": "error",
                "error_code": result.rejection.value,
                "message": result.message
            }
        return {"status": "ok", "data": result.warranty.to_dict()}

    def get_warranty(self, product_code: str) -> dict:
        """Get the extended warranty registered for a product code."""
        warranty = self.orchestrator.get_warranty(product_code)
        if warranty is None:
            return {
                "status": "error",
                "error_code": "NOT_FOUND",
                "message": f"No extended warranty found for product {product_code}."
            }
        return {"status": "ok", "data": warranty.to_dict()}

    def quote_warranty(self, product_code: str) -> dict:
        """Quote the price and expiration date of a warranty requested today, without registering it."""
        try:
            product = self.orchestrator.product_repository.get_by_code(product_code)
        except ProductNotFoundError as e:
            return {"status": "error", "error_code": "PRODUCT_NOT_FOUND", "message": str(e)}

        rules = self.orchestrator.rules
        today = self.clock().date()
        percentage, warranty_price = calculate_warranty_price(
            product.price,
            threshold=rules.price_threshold,
            high_tier_percentage=rules.high_tier_percentage,
            low_tier_percentage=rules.low_tier_percentage
        )
        expiration_date = calculate_expiration_date(
            today,
            product.price,
            threshold=rules.price_threshold,
            high_tier_days=rules.high_tier_days,
            low_tier_days=rules.low_tier_days
        )
        return {
            "status": "ok",
            "data": {
                "product_code": product.code,
                "product_price": float(product.price),
                "percentage": float(percentage),
                "warranty_price": float(warranty_price),
                "start_date": today.isoformat(),
                "expiration_date": expiration_date.isoformat()
            }
        }


def create_demo_orchestrator() -> WarrantyOrchestrator:
    """Build an orchestrator over in-memory stores seeded with the demo catalog."""
    return WarrantyOrchestrator(
        InMemoryProductRepository(DEMO_PRODUCTS),
        InMemoryWarrantyRepository(),
        rules=config.rules
    )


def create_server(
    orchestrator: Optional[WarrantyOrchestrator] = None,
    clock: Callable[[], datetime] = datetime.now
) -> FastMCP:
    """Create the warranty sales MCP server."""
    tools = WarrantySalesTools(orchestrator or create_demo_orchestrator(), clock=clock)

    mcp = FastMCP(config.server.name)
    mcp.tool(tools.generate_warranty)
    mcp.tool(tools.get_warranty)
    mcp.tool(tools.quote_warranty)
    return mcp


if __name__ == "__main__":
    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )
    logger.info(f"Starting warranty sales server - url={config.server.get_url()}")
    create_server().run(transport="http", host=config.server.host, port=config.server.port)
