"""
Eligibility Checks

Validates a warranty request before it is priced and registered.
Checks run in order and the first failure wins.
"""

from typing import Optional

from extended_warranty.models import RejectionReason


VOWELS = frozenset("aeiou")

# A code with exactly this many vowels is not eligible
INELIGIBLE_VOWEL_COUNT = 3


def is_missing(value: Optional[str]) -> bool:
    """Check if a value is None or an empty string."""
    return value is None or value == ""


def count_vowels(code: str) -> int:
    """Count the ASCII vowels in a code, ignoring case."""
    return sum(1 for char in code.lower() if char in VOWELS)


def has_ineligible_vowel_count(code: str) -> bool:
    """Return True when the code carries exactly three vowels."""
    return count_vowels(code) == INELIGIBLE_VOWEL_COUNT


def validate(
    code: Optional[str],
    customer_name: Optional[str],
    has_existing_warranty: bool
) -> Optional[RejectionReason]:
    """
    Validate a warranty request.

    Args:
        code: Product code
        customer_name: Name of the customer buying the warranty
        has_existing_warranty: Whether the product is already insured

    Returns:
        The rejection reason, or None if the request may proceed
    """
    if is_missing(code) or is_missing(customer_name):
        return RejectionReason.MISSING_REQUIRED_DATA
    if has_existing_warranty:
        return RejectionReason.ALREADY_INSURED
    if has_ineligible_vowel_count(code):
        return RejectionReason.NOT_ELIGIBLE
    return None
