"""Models Package - Data models for the extended warranty engine."""

from .warranty import (
    GenerationResult,
    Product,
    RejectionReason,
    REJECTION_MESSAGES,
    Warranty,
)

__all__ = ["GenerationResult", "Product", "RejectionReason", "REJECTION_MESSAGES", "Warranty"]
