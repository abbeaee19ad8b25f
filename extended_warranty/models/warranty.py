"""
Warranty Models

Pydantic models for products, extended warranties and the outcome of a
warranty request.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class RejectionReason(str, Enum):
    """Business reasons a warranty request is turned down."""
    MISSING_REQUIRED_DATA = "MISSING_REQUIRED_DATA"
    ALREADY_INSURED = "ALREADY_INSURED"
    NOT_ELIGIBLE = "NOT_ELIGIBLE"


REJECTION_MESSAGES = {
    RejectionReason.MISSING_REQUIRED_DATA: "The product code and the customer name are required to generate a warranty",
    RejectionReason.ALREADY_INSURED: "The product already has an extended warranty",
    RejectionReason.NOT_ELIGIBLE: "This product is not eligible for an extended warranty",
}


class Product(BaseModel):
    """Product sold in store. Owned by the product catalog."""
    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=1)
    price: Decimal = Field(ge=0)
    name: Optional[str] = None


class Warranty(BaseModel):
    """
    Extended warranty bought for a product.

    Built once by the orchestrator and never modified afterwards.
    """
    model_config = ConfigDict(frozen=True)

    product: Product
    request_date: datetime
    expiration_date: date
    price: Decimal
    customer_name: str = Field(min_length=1)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON friendly dictionary for tool responses."""
        return {
            "product_code": self.product.code,
            "product_name": self.product.name,
            "product_price": float(self.product.price),
            "customer_name": self.customer_name,
            "request_date": self.request_date.isoformat(),
            "expiration_date": self.expiration_date.isoformat(),
            "warranty_price": float(self.price)
        }


class GenerationResult(BaseModel):
    """
    Outcome of a warranty request.

    Exactly one of `warranty` or `rejection` is set.
    """
    model_config = ConfigDict(frozen=True)

    warranty: Optional[Warranty] = None
    rejection: Optional[RejectionReason] = None
    message: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.warranty is not None

    @classmethod
    def success(cls, warranty: Warranty) -> "GenerationResult":
        return cls(warranty=warranty)

    @classmethod
    def rejected(cls, reason: RejectionReason) -> "GenerationResult":
        return cls(rejection=reason, message=REJECTION_MESSAGES[reason])
