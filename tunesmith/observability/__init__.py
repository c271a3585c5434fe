"""
Observability module.

Correlation IDs, root logging setup, structured logging helpers and
request middleware.
"""

from tunesmith.observability.correlation import get_correlation_id, set_correlation_id
from tunesmith.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
]
