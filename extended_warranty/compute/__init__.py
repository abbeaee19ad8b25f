"""Compute Package - Deterministic warranty rules and calculations."""

from .service import calculate_warranty_price, calculate_expiration_date
from .eligibility import validate, count_vowels

__all__ = ["calculate_warranty_price", "calculate_expiration_date", "validate", "count_vowels"]
