"""
Configuration Management for the Extended Warranty Engine
==========================================================
Centralized configuration for warranty rules, the tool server, and logging.
"""

import os
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field

from extended_warranty.compute.service import (
    PRICE_THRESHOLD,
    HIGH_TIER_PERCENTAGE,
    LOW_TIER_PERCENTAGE,
    HIGH_TIER_DAYS,
    LOW_TIER_DAYS,
)


class WarrantyRulesConfig(BaseModel):
    """Business rules used to price and date an extended warranty."""

    price_threshold: Decimal = Field(
        default=PRICE_THRESHOLD,
        description="Product price above which the high tier applies"
    )
    high_tier_percentage: Decimal = Field(default=HIGH_TIER_PERCENTAGE, ge=0)
    low_tier_percentage: Decimal = Field(default=LOW_TIER_PERCENTAGE, ge=0)
    high_tier_days: int = Field(
        default=HIGH_TIER_DAYS,
        gt=0,
        description="Counted days (Mondays excluded) for high tier warranties"
    )
    low_tier_days: int = Field(
        default=LOW_TIER_DAYS,
        gt=0,
        description="Calendar days for low tier warranties"
    )


class MCPServerConfig(BaseModel):
    """Configuration for the warranty sales MCP server."""

    name: str = "extended-warranty"
    host: str = "127.0.0.1"
    port: int = 8004
    url: Optional[str] = None  # If deployed remotely

    def get_url(self) -> str:
        """Get the MCP server URL (local or remote)."""
        if self.url:
            return self.url
        return f"http://{self.host}:{self.port}/mcp"


class ExtendedWarrantyConfig(BaseModel):
    """Main configuration for the extended warranty engine."""

    rules: WarrantyRulesConfig = Field(default_factory=WarrantyRulesConfig)
    server: MCPServerConfig = Field(default_factory=MCPServerConfig)
    log_level: str = Field(default="INFO", description="Root logging level")

    @classmethod
    def from_env(cls) -> "ExtendedWarrantyConfig":
        """Load configuration from environment variables."""

        rules = WarrantyRulesConfig(
            price_threshold=os.environ.get("WARRANTY_PRICE_THRESHOLD", str(PRICE_THRESHOLD)),
            high_tier_percentage=os.environ.get("WARRANTY_HIGH_TIER_PERCENTAGE", str(HIGH_TIER_PERCENTAGE)),
            low_tier_percentage=os.environ.get("WARRANTY_LOW_TIER_PERCENTAGE", str(LOW_TIER_PERCENTAGE)),
            high_tier_days=int(os.environ.get("WARRANTY_HIGH_TIER_DAYS", str(HIGH_TIER_DAYS))),
            low_tier_days=int(os.environ.get("WARRANTY_LOW_TIER_DAYS", str(LOW_TIER_DAYS)))
        )

        server = MCPServerConfig(
            host=os.environ.get("WARRANTY_SALES_HOST", "127.0.0.1"),
            port=int(os.environ.get("WARRANTY_SALES_PORT", "8004")),
            url=os.environ.get("WARRANTY_SALES_URL")  # e.g., https://warranty-sales.azurecontainerapps.io/mcp
        )

        return cls(
            rules=rules,
            server=server,
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper()
        )


# Global config instance
config = ExtendedWarrantyConfig.from_env()
