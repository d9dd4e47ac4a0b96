"""HTTP fetch helpers.

Requests run on a worker thread so callers can ``await`` them from an event
loop.  Any HTTP status yields a :class:`FetchResponse`; only transport
failures (and undecodable JSON) raise :class:`FetchError`.
"""

import asyncio
import http.client
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from urllib import error, request as urllib_request

from quectodom.shared import FetchConfig, get_logger

logger = get_logger(__name__, None, "fetch")


@dataclass
class FetchResponse:
    """Status, headers and raw body of a completed request."""

    status: int
    reason: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    encoding: str = "utf-8"

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        return self.body.decode(self.encoding, errors="replace")


class FetchError(Exception):
    """Raised when a resource could not be fetched or decoded.

    ``method`` and ``uri`` identify the request; ``response`` is set when the
    request completed but its body could not be decoded.  The underlying
    exception is chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        method: str,
        uri: str,
        response: Optional[FetchResponse] = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.uri = uri
        self.response = response


def _perform(method: str, uri: str, config: FetchConfig) -> FetchResponse:
    req = urllib_request.Request(
        uri, headers={"Accept": config.accept}, method=method.upper()
    )
    try:
        with urllib_request.urlopen(  # nosec B310
            req, timeout=config.timeout_seconds
        ) as resp:
            return FetchResponse(
                status=resp.status,
                reason=resp.reason or "",
                headers=dict(resp.headers.items()),
                body=resp.read(),
                encoding=config.encoding,
            )
    except error.HTTPError as exc:
        # An error status is still a completed request
        body = exc.read() if exc.fp else b""
        return FetchResponse(
            status=exc.code,
            reason=str(exc.reason or ""),
            headers=dict(exc.headers.items()) if exc.headers else {},
            body=body,
            encoding=config.encoding,
        )


async def request(
    method: str, uri: str, config: Optional[FetchConfig] = None
) -> FetchResponse:
    """Fetch a resource over HTTP.

    Raises:
        FetchError: on transport failure (DNS, refused connection, timeout...)
    """
    config = config or FetchConfig()
    logger.debug("Fetching resource", extra={"method": method, "uri": uri})
    try:
        response = await asyncio.to_thread(_perform, method, uri, config)
    except (error.URLError, http.client.HTTPException, OSError, ValueError) as exc:
        logger.warning(
            "Fetch failed",
            extra={"method": method, "uri": uri, "reason": str(exc)},
        )
        raise FetchError(
            f"{method} {uri} failed: {exc}", method=method, uri=uri
        ) from exc

    logger.debug(
        "Fetched resource",
        extra={"method": method, "uri": uri, "status": response.status},
    )
    return response


async def request_json(
    method: str, uri: str, config: Optional[FetchConfig] = None
) -> Any:
    """Fetch a JSON document over HTTP, return the decoded JSON."""
    response = await request(method, uri, config)
    try:
        return json.loads(response.text)
    except json.JSONDecodeError as exc:
        raise FetchError(
            f"{method} {uri} returned invalid JSON (status {response.status})",
            method=method,
            uri=uri,
            response=response,
        ) from exc
