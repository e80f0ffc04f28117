from __future__ import annotations

from typing import Any, Dict, Optional

import httpx


class UpstreamFailure(Exception):
    """Base for the three ways a proxied request can fail."""


class UpstreamStatusError(UpstreamFailure):
    """Upstream answered with a non-2xx status."""

    def __init__(self, status: int, body: Any):
        super().__init__(f"upstream returned {status}")
        self.status = status
        self.body = body


class NoResponseError(UpstreamFailure):
    """The request went out but nothing came back (refused, reset, timed out)."""

    def __init__(self, request: Optional[httpx.Request], reason: str = ""):
        super().__init__(reason or "no response received")
        self.request = request
        self.reason = reason


class LocalError(UpstreamFailure):
    """Anything that went wrong on our side of the wire."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def client_options(base_url: str, headers: Dict[str, str], timeout: Optional[float]) -> Dict[str, Any]:
    """AsyncClient kwargs; `timeout` is only passed when configured."""
    opts: Dict[str, Any] = {"base_url": base_url, "headers": headers}
    if timeout is not None:
        opts["timeout"] = timeout
    return opts


def _error_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _request_of(exc: httpx.RequestError) -> Optional[httpx.Request]:
    # .request raises RuntimeError when the exception was built without one
    try:
        return exc.request
    except RuntimeError:
        return None


async def get_json(
    client: httpx.AsyncClient,
    url: str,
    params: Any = None,
) -> Any:
    try:
        r = await client.get(url, params=params)
        r.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise UpstreamStatusError(e.response.status_code, _error_body(e.response)) from e
    except httpx.RequestError as e:
        raise NoResponseError(_request_of(e), str(e) or type(e).__name__) from e
    return r.json()


def classify(exc: BaseException) -> UpstreamFailure:
    if isinstance(exc, UpstreamFailure):
        return exc
    if isinstance(exc, httpx.HTTPStatusError):
        return UpstreamStatusError(exc.response.status_code, _error_body(exc.response))
    if isinstance(exc, httpx.RequestError):
        return NoResponseError(_request_of(exc), str(exc))
    return LocalError(str(exc) or type(exc).__name__)
