"""
Extended Warranty Engine
========================
Eligibility, pricing and expiration rules for extended warranties sold with
a product.
"""

__version__ = "0.1.0"
