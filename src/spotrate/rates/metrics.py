"""Prometheus counters for the rates API.

Counters live on a module-level ``CollectorRegistry`` (not the global
default) so the exposition only carries service metrics.
"""

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Counter, generate_latest

REGISTRY = CollectorRegistry()

put_success = Counter(
    "put_new_rates_success_count",
    "The total number of successfully processed PUT requests",
    registry=REGISTRY,
)
put_error = Counter(
    "put_rate_error_count",
    "The total number of PUT requests that resulted in an error",
    registry=REGISTRY,
)
get_success = Counter(
    "get_rate_success_count",
    "The total number of successfully processed GET requests",
    registry=REGISTRY,
)
get_not_found = Counter(
    "get_rate_404_count",
    "The total number of GET requests that resulted in a 404",
    registry=REGISTRY,
)
get_bad_request = Counter(
    "get_rate_400_count",
    "The total number of GET requests that resulted in a 400",
    registry=REGISTRY,
)


def record_put_success() -> None:
    put_success.inc()


def record_put_fail() -> None:
    put_error.inc()


def record_get_rate_success() -> None:
    get_success.inc()


def record_get_rate_not_found() -> None:
    get_not_found.inc()


def record_get_rate_bad_request() -> None:
    get_bad_request.inc()


def render_latest() -> tuple[bytes, str]:
    """Render the registry in Prometheus text format.

    Returns:
        Tuple of (body, content_type)
    """
    return generate_latest(REGISTRY), CONTENT_TYPE_LATEST
