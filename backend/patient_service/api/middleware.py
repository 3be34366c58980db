"""Request logging and Prometheus instrumentation."""

import time
import uuid

from fastapi import FastAPI, Request
from prometheus_client import Counter, Histogram

from patient_service.core.logging import get_logger

logger = get_logger(__name__)

REQUEST_COUNT = Counter(
    "patient_service_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "patient_service_request_latency_seconds",
    "HTTP request latency",
    ["method", "endpoint"],
)


def route_template(request: Request) -> str:
    """Return the matched route template so patient ids stay out of logs and labels."""
    route = request.scope.get("route")
    if route and hasattr(route, "path"):
        return route.path
    return request.url.path


def install_request_logging(app: FastAPI) -> None:
    """Log each request, record its metrics and tag the response with a request id."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = uuid.uuid4().hex[:8]
        started = time.perf_counter()

        response = await call_next(request)
        elapsed = time.perf_counter() - started
        endpoint = route_template(request)

        REQUEST_COUNT.labels(
            method=request.method, endpoint=endpoint, status=response.status_code
        ).inc()
        REQUEST_LATENCY.labels(method=request.method, endpoint=endpoint).observe(elapsed)

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        logger.info(
            "request_completed",
            request_id=request_id,
            method=request.method,
            path=endpoint,
            status_code=response.status_code,
            duration_ms=round(elapsed * 1000, 2),
        )
        return response
