"""
Domain exceptions mapped to HTTP responses by the handler in main.py
"""

from typing import Any, Optional

from fastapi import status


class AllReviewError(Exception):
    """Base class for errors that carry a status code and a user-facing message"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None, details: Any = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class Unauthenticated(AllReviewError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required"


class Forbidden(AllReviewError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "You do not have permission to perform this action"


class NotFound(AllReviewError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class ValidationFailed(AllReviewError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request data"


class InvalidDateRange(ValidationFailed):
    default_message = "Invalid date range"


class AggregationFailed(AllReviewError):
    """Statistics query failed; never returns partial results"""
    default_message = "Failed to compute statistics"


class PaymentGatewayError(AllReviewError):
    """Payment provider rejected the call or could not be reached"""
    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Payment provider error"


class PaymentGatewayUnavailable(AllReviewError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_message = "Payment service is not configured"


class SessionStoreError(AllReviewError):
    default_message = "Failed to end the session"
