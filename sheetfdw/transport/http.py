"""Synchronous HTTP transport used to fetch source documents."""

import logging
from dataclasses import dataclass, field
from enum import Enum

import requests
from requests.exceptions import RequestException

from sheetfdw.core.exceptions import TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class Method(str, Enum):
    GET = "GET"


@dataclass
class Request:
    method: Method
    url: str
    headers: list[tuple[str, str]] = field(default_factory=list)
    body: str = ""


@dataclass
class Response:
    url: str
    status_code: int
    headers: dict[str, str]
    body: str


class HttpTransport:
    """Thin wrapper over ``requests.Session``.

    Makes exactly one attempt per request. Network failures and HTTP error
    statuses are raised as TransportError.
    """

    def __init__(
        self,
        timeout: int = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self._timeout = timeout
        self._session = session or requests.Session()

    def send(self, request: Request) -> Response:
        """Send a request and return the response.

        Args:
            request: Request to send

        Returns:
            Response with the decoded text body

        Raises:
            TransportError: If the request fails or the status is >= 400
        """
        logger.debug("%s %s", request.method.value, request.url)
        try:
            resp = self._session.request(
                request.method.value,
                request.url,
                headers=dict(request.headers),
                data=request.body.encode("utf-8") if request.body else None,
                timeout=self._timeout,
            )
        except RequestException as e:
            raise TransportError(
                f"Request failed: {e}",
                context={"url": request.url},
            ) from e

        if resp.status_code >= 400:
            raise TransportError(
                f"Request returned HTTP {resp.status_code}",
                context={"url": request.url, "status_code": resp.status_code},
            )

        return Response(
            url=request.url,
            status_code=resp.status_code,
            headers=dict(resp.headers),
            body=resp.text,
        )

    def get(self, request: Request) -> Response:
        return self.send(request)

    def close(self) -> None:
        self._session.close()
