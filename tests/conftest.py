"""Pytest configuration for the billrate test suite."""

from __future__ import annotations

import json
from collections.abc import Iterator
from typing import Any, Callable

import pytest

from billrate.core.logging import configure_logging


def build_record(
    name: str = "alpha",
    billing_code: str = "1",
    rates: list[list[float]] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """Build a billing record payload with one group per inner rate list."""

    groups = rates if rates is not None else [[10, 20]]
    return {
        "name": name,
        "billing_code": billing_code,
        "negotiated_rates": [
            {"negotiated_prices": [{"negotiated_rate": rate} for rate in group]}
            for group in groups
        ],
        **extra,
    }


@pytest.fixture
def record_line() -> Callable[..., str]:
    """Factory returning one JSONL line for :func:`build_record` arguments."""

    def _make(**kwargs: Any) -> str:
        return json.dumps(build_record(**kwargs)) + "\n"

    return _make


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Tests may point the logger at private buffers; restore stderr afterwards."""

    yield
    configure_logging()


@pytest.fixture
def record_payload() -> Callable[..., dict[str, Any]]:
    """Factory returning a billing record payload as a dict."""

    return build_record
