"""
Observability module.

Provides logging configuration, correlation ID tracking and HTTP middleware.
"""

from ideaforge.observability.correlation import get_correlation_id, set_correlation_id
from ideaforge.observability.logger import configure_logging

__all__ = ["configure_logging", "get_correlation_id", "set_correlation_id"]
