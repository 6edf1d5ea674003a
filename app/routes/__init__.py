"""
API routes for AllReview backend
"""

from . import (
    auth, campaigns, applications, samples, shipping,
    performance, payments, partners, admin
)

__all__ = [
    "auth", "campaigns", "applications", "samples", "shipping",
    "performance", "payments", "partners", "admin"
]
