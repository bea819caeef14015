"""Parking rate engine: normalization, storage and lookup."""

from spotrate.rates.errors import (
    CrossDayRequestError,
    IngestError,
    MalformedTimeRangeError,
    NoRatesForDayError,
    QueryError,
    RateError,
    RateUnavailableError,
    UnknownDayCodeError,
    UnknownTimezoneError,
)
from spotrate.rates.models import IncomingRates, ParkingTimesRequest, RateDetail, WeekdayRule
from spotrate.rates.table import RateTable

__all__ = [
    "CrossDayRequestError",
    "IncomingRates",
    "IngestError",
    "MalformedTimeRangeError",
    "NoRatesForDayError",
    "ParkingTimesRequest",
    "QueryError",
    "RateDetail",
    "RateError",
    "RateTable",
    "RateUnavailableError",
    "UnknownDayCodeError",
    "UnknownTimezoneError",
    "WeekdayRule",
]
