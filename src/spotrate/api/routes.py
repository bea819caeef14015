"""HTTP route handlers for the rates API.

Routes:
- GET /health  → Liveness check (JSON)
- PUT /rates   → Replace all rates (JSON body: {"rates": [...]})
- GET /rate    → Price for ?start_time=...&end_time=... (ISO-8601 with offset)
- GET /metrics → Prometheus counters
"""

import logging

from pydantic import ValidationError
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from spotrate.rates import metrics
from spotrate.rates.errors import IngestError, QueryError
from spotrate.rates.models import IncomingRates, ParkingTimesRequest, PutResponse, RateResponse
from spotrate.rates.table import RateTable

logger = logging.getLogger(__name__)


def _get_table(request: Request) -> RateTable:
    return request.app.state.rate_table


def _first_error(exc: ValidationError) -> str:
    """Condense a pydantic error into a one-line message."""
    err = exc.errors()[0]
    location = ".".join(str(part) for part in err.get("loc", ()))
    return f"{location}: {err['msg']}" if location else err["msg"]


async def health(request: Request) -> JSONResponse:
    """Health check endpoint."""
    return JSONResponse({"status": "ok", "message": "rates app online"})


async def put_rates(request: Request) -> JSONResponse:
    """Replace the rate table with the rates in the request body."""
    body = await request.body()
    try:
        batch = IncomingRates.model_validate_json(body)
    except ValidationError as e:
        metrics.record_put_fail()
        return JSONResponse(
            PutResponse(status="error", message=_first_error(e)).model_dump(),
            status_code=400,
        )

    try:
        _get_table(request).ingest(batch)
    except IngestError as e:
        logger.warning("Rejected rates update: %s", e)
        metrics.record_put_fail()
        return JSONResponse(
            PutResponse(status="error", message=str(e)).model_dump(),
            status_code=400,
        )
    except Exception:
        logger.exception("Failed to update rates")
        metrics.record_put_fail()
        return JSONResponse(
            PutResponse(status="error", message="error updating rates").model_dump(),
            status_code=500,
        )

    metrics.record_put_success()
    return JSONResponse(
        PutResponse(status="success", message="Successfully updated rates").model_dump()
    )


async def get_rate(request: Request) -> JSONResponse:
    """Look up the price for a parking window."""
    try:
        times = ParkingTimesRequest.model_validate(dict(request.query_params))
    except ValidationError as e:
        metrics.record_get_rate_bad_request()
        return JSONResponse(
            RateResponse(status="error", message=_first_error(e)).model_dump(),
            status_code=400,
        )

    try:
        rate = _get_table(request).query(times.start_time, times.end_time)
    except QueryError as e:
        logger.debug("No rate for %s - %s: %s", times.start_time, times.end_time, e)
        metrics.record_get_rate_not_found()
        return JSONResponse(
            RateResponse(status="error", message="unavailable").model_dump(),
            status_code=404,
        )
    except Exception:
        logger.exception("Failed to look up rate")
        return JSONResponse(
            RateResponse(status="error", message="error retrieving rate").model_dump(),
            status_code=500,
        )

    metrics.record_get_rate_success()
    return JSONResponse(
        RateResponse(status="success", message="success retrieving rate", rate=rate).model_dump()
    )


async def prometheus_metrics(request: Request) -> Response:
    """Expose service counters in Prometheus text format."""
    body, content_type = metrics.render_latest()
    return Response(body, media_type=content_type)
