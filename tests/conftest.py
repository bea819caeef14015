"""Shared pytest fixtures."""

from datetime import UTC, datetime
from pathlib import Path

import pytest

from spotrate.rates.models import IncomingRates, RateDetail
from spotrate.rates.table import RateTable

SEED_FILE = Path(__file__).resolve().parent.parent / "config" / "seed_rates.json"

# Friday during US daylight time (America/Chicago is UTC-5)
FRIDAY_NOON_UTC = datetime(2020, 4, 3, 12, 0, tzinfo=UTC)


@pytest.fixture
def fixed_clock():
    """Clock pinned to Friday 2020-04-03 12:00 UTC."""
    return lambda: FRIDAY_NOON_UTC


@pytest.fixture
def seed_file():
    """Path to the seed rates shipped with the project."""
    return SEED_FILE


@pytest.fixture
def seeded_table(fixed_clock, seed_file):
    """Rate table seeded from the project seed file at a fixed date."""
    return RateTable.from_seed_file(seed_file, clock=fixed_clock)


@pytest.fixture
def weekday_rates():
    """The weekday rule from the stock seed, on its own."""
    return IncomingRates(
        rates=[
            RateDetail(days="mon,tues,thurs", times="0900-2100", tz="America/Chicago", price=1500),
        ]
    )
