"""
Business entities representing core domain concepts.

Exports:
- Application: One registration attempt with its creation time
- Customer: Known customer marker keyed by applicant name
- Notification: (recipient, message) pair
- ExpiryPolicy: Per-application or per-applicant expiry rule
"""

from src.core.entities.application import (
    Application,
    Customer,
    ExpiryPolicy,
    Notification,
)

__all__ = [
    "Application",
    "Customer",
    "ExpiryPolicy",
    "Notification",
]
