"""Exceptions raised by the rate engine.

Ingestion errors (``IngestError``) mean the submitted batch was rejected and
the active rate table was left untouched. Query errors (``QueryError``) mean
there is no price for the requested window.
"""


class RateError(Exception):
    """Base exception for the rate engine."""


class IngestError(RateError, ValueError):
    """Raised when a batch of rates cannot be ingested."""


class UnknownDayCodeError(IngestError):
    """Raised when a day abbreviation is not one of the recognized codes."""

    def __init__(self, code: str):
        super().__init__(f"abbreviated day not present: {code}")
        self.code = code


class MalformedTimeRangeError(IngestError):
    """Raised when a time range is not of the form ``HHMM-HHMM``."""

    def __init__(self, times: str, reason: str = "expected HHMM-HHMM"):
        super().__init__(f"malformed time range {times!r}: {reason}")
        self.times = times


class UnknownTimezoneError(IngestError):
    """Raised when a timezone name is not in the IANA database."""

    def __init__(self, timezone: str):
        super().__init__(f"unknown time zone {timezone}")
        self.timezone = timezone


class QueryError(RateError, LookupError):
    """Raised when no price can be returned for a parking window."""


class CrossDayRequestError(QueryError):
    """Raised when start and end fall on different UTC calendar days."""

    def __init__(self) -> None:
        super().__init__("unavailable: parking window spans more than one day")


class NoRatesForDayError(QueryError):
    """Raised when the table holds no rates for the requested weekday."""

    def __init__(self, weekday: str):
        super().__init__(f"could not find rates for day {weekday}")
        self.weekday = weekday


class RateUnavailableError(QueryError):
    """Raised when no rate window contains the parking window."""

    def __init__(self) -> None:
        super().__init__("unavailable")
