"""Billing report record models."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictStr


class NegotiatedPrice(BaseModel):
    """A single negotiated price entry."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    negotiated_rate: StrictFloat


class NegotiatedRate(BaseModel):
    """A group of negotiated prices."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    negotiated_prices: list[NegotiatedPrice]


class BillingRecord(BaseModel):
    """One line of a billing report.

    Unknown keys are ignored; the listed fields are required and strictly
    typed, so numeric strings are rejected for ``negotiated_rate`` and
    numbers are rejected for ``name``/``billing_code``. Rates must be
    finite.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: StrictStr
    billing_code: StrictStr
    negotiated_rates: list[NegotiatedRate]

    def iter_rates(self) -> Iterator[tuple[str, float]]:
        """Yield ``(field_path, rate)`` for every negotiated price in order."""

        for group_index, group in enumerate(self.negotiated_rates):
            for price_index, price in enumerate(group.negotiated_prices):
                path = f"negotiated_rates.{group_index}.negotiated_prices.{price_index}.negotiated_rate"
                yield path, price.negotiated_rate


@dataclass(frozen=True, slots=True)
class RateDecision:
    """Average rate of a record and whether it passes the threshold."""

    average_rate: float
    included: bool


__all__ = ["NegotiatedPrice", "NegotiatedRate", "BillingRecord", "RateDecision"]
