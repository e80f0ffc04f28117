from __future__ import annotations

import json

from fastapi import status
from fastapi.responses import JSONResponse, PlainTextResponse

from mediagate.clients.upstream import NoResponseError, UpstreamStatusError, classify
from mediagate.core.logging_utils import create_logger

logger = create_logger("errors")

TIME_WINDOWS = ("week", "day")


def handle_error(exc: BaseException) -> PlainTextResponse:
    """
    Turn any failure inside a handler into the response the caller sees.
    Upstream error bodies are logged, never returned.
    """
    failure = classify(exc)

    if isinstance(failure, UpstreamStatusError):
        logger.error(
            "API Error",
            status=failure.status,
            body=json.dumps(failure.body, default=str),
        )
        return PlainTextResponse("Error fetching data from API.", status_code=failure.status)

    if isinstance(failure, NoResponseError):
        logger.error(
            "No response received from API",
            request=repr(failure.request),
            reason=failure.reason,
        )
        return PlainTextResponse(
            "No response received from API.",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    logger.error("Error", message=str(failure))
    return PlainTextResponse(
        "Internal Server Error.",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def invalid_time_window(time_window: str) -> JSONResponse | None:
    """400 body for anything but week/day; None when the value is fine."""
    if time_window in TIME_WINDOWS:
        return None
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": f'Invalid time_window value: "{time_window}". '
            f"Allowed values are: {', '.join(TIME_WINDOWS)}"
        },
    )
