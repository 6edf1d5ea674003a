"""
HTTP middleware for AllReview backend
"""

from .performance import PerformanceMiddleware

__all__ = ["PerformanceMiddleware"]
