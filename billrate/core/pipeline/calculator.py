"""Average rate derivation and the inclusion predicate."""

from __future__ import annotations

import math

from billrate.core.config import DEFAULT_RATE_THRESHOLD
from billrate.core.exceptions import CalculationError, ErrorCode
from billrate.core.models import BillingRecord, RateDecision


def average_rate(record: BillingRecord) -> float:
    """Return the mean of every negotiated rate in ``record``.

    Rates are summed across all ``negotiated_rates`` groups and divided by
    the total number of negotiated prices. Empty groups contribute nothing.

    Raises:
        CalculationError: ``CALCULATION_DIVISION_BY_ZERO`` when the record
            carries no negotiated prices, ``CALCULATION_INVALID`` for a
            negative or non-finite rate or a non-finite result.
    """

    total = 0.0
    count = 0
    for path, rate in record.iter_rates():
        if not math.isfinite(rate):
            raise CalculationError(
                f"negotiated rate {rate!r} is not a finite number",
                ErrorCode.CALCULATION_INVALID,
                field=path,
            )
        if rate < 0:
            raise CalculationError(
                f"negotiated rate {rate!r} is negative",
                ErrorCode.CALCULATION_INVALID,
                field=path,
            )
        total += rate
        count += 1

    if count == 0:
        raise CalculationError(
            "record has no negotiated prices to average",
            ErrorCode.CALCULATION_DIVISION_BY_ZERO,
            field="negotiated_rates",
        )

    result = total / count
    if not math.isfinite(result):
        raise CalculationError(
            "average rate overflowed",
            ErrorCode.CALCULATION_INVALID,
            field="negotiated_rates",
        )
    return result


def is_included(rate: float, threshold: float = DEFAULT_RATE_THRESHOLD) -> bool:
    """Records at or below the threshold are kept."""

    return rate <= threshold


def calculate(record: BillingRecord, *, threshold: float = DEFAULT_RATE_THRESHOLD) -> RateDecision:
    """Compute the average rate of ``record`` and decide whether to keep it."""

    rate = average_rate(record)
    return RateDecision(average_rate=rate, included=is_included(rate, threshold))


__all__ = ["average_rate", "is_included", "calculate"]
