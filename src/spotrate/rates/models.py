"""Data models for parking rates.

``RateDetail``/``IncomingRates`` mirror the JSON accepted by ``PUT /rates`` and
the seed file. ``WeekdayRule`` is the normalized form stored in the rate table.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from pydantic import AwareDatetime, BaseModel, Field, field_validator


class RateDetail(BaseModel):
    """One human-authored recurring rate.

    Example::

        {"days": "mon,tues,thurs", "times": "0900-2100",
         "tz": "America/Chicago", "price": 1500}
    """

    days: str  # Comma-separated day codes (mon,tues,wed,thurs,fri,sat,sun)
    times: str  # HHMM-HHMM in the local time of ``tz``
    tz: str  # IANA timezone name
    price: int = Field(..., ge=0)


class IncomingRates(BaseModel):
    """A full batch of rates. Ingesting it replaces the whole table."""

    rates: list[RateDetail] = Field(default_factory=list)


class ParkingTimesRequest(BaseModel):
    """A concrete parking window to price."""

    start_time: AwareDatetime
    end_time: AwareDatetime

    @field_validator("start_time", "end_time")
    @classmethod
    def _convertible_to_utc(cls, value: datetime) -> datetime:
        # 9999-12-31T22:00-05:00 is past datetime.max once shifted to UTC
        try:
            value.astimezone(UTC)
        except OverflowError as e:
            raise ValueError("timestamp out of range once converted to UTC") from e
        return value


class PutResponse(BaseModel):
    """Response body for ``PUT /rates``."""

    status: str
    message: str


class RateResponse(BaseModel):
    """Response body for ``GET /rate``."""

    status: str
    message: str
    rate: int = 0


@dataclass(frozen=True)
class WeekdayRule:
    """A rate window normalized to UTC army time.

    ``end_clock`` exceeds 2400 when the window runs past UTC midnight so the
    interval stays contiguous. ``weekday`` is the UTC weekday of the window
    start and can differ from the weekday bucket the rule is stored under.
    """

    weekday: str
    start_clock: float
    end_clock: float
    price: int
    source_timezone: str

    def contains(self, start_clock: float, end_clock: float) -> bool:
        """Check if ``[start_clock, end_clock]`` lies fully inside this window."""
        return self.start_clock <= start_clock and end_clock <= self.end_clock
