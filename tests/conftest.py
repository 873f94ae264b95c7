"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
import structlog

from bigdec import Dec
from tests.helpers import make_dec


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo logging configuration done by CLI tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def cents() -> list[Dec]:
    """A handful of two-digit amounts, positive and negative."""
    return [make_dec(t) for t in ("0.00", "0.01", "-0.01", "19.99", "-250.50", "1000000.00")]
