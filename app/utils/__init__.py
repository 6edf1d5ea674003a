"""
Utility functions for AllReview backend
"""

from .exceptions import (
    AllReviewError, Unauthenticated, Forbidden, NotFound, ValidationFailed,
    InvalidDateRange, AggregationFailed, PaymentGatewayError,
    PaymentGatewayUnavailable, SessionStoreError
)
from .dates import to_naive_utc, parse_date_param, parse_date_range, month_bounds

__all__ = [
    "AllReviewError",
    "Unauthenticated",
    "Forbidden",
    "NotFound",
    "ValidationFailed",
    "InvalidDateRange",
    "AggregationFailed",
    "PaymentGatewayError",
    "PaymentGatewayUnavailable",
    "SessionStoreError",
    "to_naive_utc",
    "parse_date_param",
    "parse_date_range",
    "month_bounds"
]
