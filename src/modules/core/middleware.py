import time
import uuid
from contextvars import ContextVar
from typing import Any, Callable, Dict

import structlog
from django.http import HttpRequest, HttpResponse

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

logger = structlog.get_logger()

# Free-text search may carry names, CPF/CNPJ fragments or emails.
REDACTED_QUERY_PARAMS = frozenset({"search"})
REDACTED = "***"


def loggable_query(request: HttpRequest) -> Dict[str, str]:
    """Query parameters safe to log: search terms are replaced wholesale."""
    return {
        key: REDACTED if key in REDACTED_QUERY_PARAMS else value
        for key, value in request.GET.items()
    }


class CorrelationIdMiddleware:
    """Correlates every log line of a request and records its outcome.

    Reads X-Request-ID from the incoming request (a UUID4 is generated when
    absent), binds it into structlog contextvars and echoes it back in the
    response header.  ``request_finished`` also carries the client id when
    the route addressed a single client, so API calls on one record can be
    followed across requests.
    """

    header = "X-Request-ID"

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())
        correlation_id_var.set(cid)
        request.correlation_id = cid

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        started = time.monotonic()
        logger.info(
            "request_started",
            method=request.method,
            path=request.path,
            query=loggable_query(request),
        )

        response = self.get_response(request)

        finished: Dict[str, Any] = {
            "method": request.method,
            "path": request.path,
            "status_code": response.status_code,
            "duration_ms": round((time.monotonic() - started) * 1000, 2),
        }
        match = getattr(request, "resolver_match", None)
        if match is not None and "pk" in match.kwargs:
            finished["client_id"] = int(match.kwargs["pk"])
        logger.info("request_finished", **finished)

        response[self.header] = cid
        return response
