"""Standardized API error responses.

Every non-2xx response produced by the API shares one body shape::

    {
        "type": "validation_error" | "client_error" | "server_error",
        "detail": "<human-readable summary>",
        "errors": [{"code": "...", "detail": "...", "attr": "field" | null}]
    }

``exception_handler`` is wired as DRF's ``EXCEPTION_HANDLER``.  Anything DRF
does not know how to render is logged with its traceback and answered with a
generic 500, so internal details never reach the caller.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

import structlog
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = structlog.get_logger(__name__)

GENERIC_SERVER_ERROR = "Ocorreu um erro inesperado. Tente novamente mais tarde."


def error_body(
    detail: str,
    *,
    error_type: str = "client_error",
    errors: Iterable[Mapping[str, Any]] | None = None,
    code: str = "error",
) -> dict[str, Any]:
    """Build the standard error payload."""
    items = list(errors) if errors is not None else []
    if not items:
        items = [{"code": code, "detail": detail, "attr": None}]
    return {"type": error_type, "detail": detail, "errors": items}


def _flatten(detail: Any, attr: str | None = None) -> list[dict[str, Any]]:
    if isinstance(detail, dict):
        flat: list[dict[str, Any]] = []
        for key, value in detail.items():
            child = key if attr is None else f"{attr}.{key}"
            if key == "non_field_errors":
                child = attr
            flat.extend(_flatten(value, child))
        return flat
    if isinstance(detail, list):
        flat = []
        for item in detail:
            flat.extend(_flatten(item, attr))
        return flat
    return [
        {
            "code": getattr(detail, "code", "error"),
            "detail": str(detail),
            "attr": attr,
        }
    ]


def exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    response = drf_exception_handler(exc, context)
    view = context.get("view")
    view_name = type(view).__name__ if view is not None else None

    if response is None:
        logger.exception(
            "api.unhandled_exception",
            view=view_name,
            error_class=type(exc).__name__,
        )
        return Response(
            error_body(
                GENERIC_SERVER_ERROR, error_type="server_error", code="error"
            ),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        errors = _flatten(exc.detail)
        summary = "; ".join(item["detail"] for item in errors) or "Dados inválidos."
        response.data = error_body(
            summary, error_type="validation_error", errors=errors
        )
    else:
        errors = _flatten(getattr(exc, "detail", str(exc)))
        summary = errors[0]["detail"] if errors else str(exc)
        error_type = (
            "server_error"
            if response.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR
            else "client_error"
        )
        response.data = error_body(summary, error_type=error_type, errors=errors)

    logger.warning(
        "api.request_failed",
        view=view_name,
        status_code=response.status_code,
        error_class=type(exc).__name__,
    )
    return response
