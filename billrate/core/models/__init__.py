"""Data models module."""

from billrate.core.models.record import (
    BillingRecord,
    NegotiatedPrice,
    NegotiatedRate,
    RateDecision,
)

__all__ = [
    "BillingRecord",
    "NegotiatedRate",
    "NegotiatedPrice",
    "RateDecision",
]
