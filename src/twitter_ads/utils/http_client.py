"""Authenticated HTTP transport for the Twitter Ads API.

:class:`AuthenticatedClient` is an ``httpx.AsyncClient`` that adds the
bearer token and client headers to every outgoing request.
:class:`AdsTransport` sits on top of it and speaks in API terms: a
relative resource path, an already encoded query string and form body
in, the response text out. Non-2xx responses become
:class:`~twitter_ads.exceptions.APIError`.

Examples:
    >>> transport = AdsTransport(access_token="...")
    >>> body = await transport.request("GET", "accounts", "?count=10")
"""

import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from ..config.settings import Settings
from ..config.settings import settings as default_settings
from ..encoding.encoder import FORM_CONTENT_TYPE
from ..exceptions import APIError
from .log_setup import sanitize_headers, sanitize_string

logger = logging.getLogger(__name__)


class AuthenticatedClient(httpx.AsyncClient):
    """HTTP client that signs every request with a bearer token.

    Headers are injected in :meth:`send`, the single point every request
    passes through, so requests built with ``client.build_request`` are
    covered as well.

    :param access_token: Bearer token sent in the ``Authorization`` header
    :type access_token: str
    :param user_agent: Value of the ``User-Agent`` header
    :type user_agent: Optional[str]
    """

    def __init__(self, *args, access_token: str, user_agent: Optional[str] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.access_token = access_token
        self.user_agent = user_agent

    async def send(self, request: httpx.Request, **kwargs) -> httpx.Response:
        """Inject authentication headers and send the request.

        :param request: The HTTP request to send
        :type request: httpx.Request
        :return: The HTTP response
        :rtype: httpx.Response
        """
        if not request.extensions.get("auth_injected"):
            request.extensions["auth_injected"] = True
            request.headers["Authorization"] = f"Bearer {self.access_token}"
            request.headers["Accept"] = "application/json"
            if self.user_agent:
                request.headers["User-Agent"] = self.user_agent

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("=== SEND: %s %s", request.method, sanitize_string(str(request.url)))
            logger.debug("    Headers: %s", sanitize_headers(dict(request.headers)))

        response = await super().send(request, **kwargs)
        logger.debug(
            "=== RECV: %s %s -> %d", request.method, request.url.path, response.status_code
        )
        return response


def _extract_errors(text: str) -> List[Dict[str, Any]]:
    """Pull the ``errors`` array out of an error body, if there is one."""
    try:
        payload = json.loads(text)
    except ValueError:
        return []
    if isinstance(payload, dict) and isinstance(payload.get("errors"), list):
        return [error for error in payload["errors"] if isinstance(error, dict)]
    return []


class AdsTransport:
    """Sends encoded requests to the versioned API root.

    :param access_token: Bearer token; defaults to the configured token
    :type access_token: Optional[str]
    :param config: Settings to read the base URL, version and timeouts from
    :type config: Optional[Settings]
    :param transport: Optional httpx transport, e.g. ``httpx.MockTransport``
    :type transport: Optional[httpx.AsyncBaseTransport]
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        config: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or default_settings
        self.api_root = self.config.api_root
        self._client = AuthenticatedClient(
            access_token=access_token or self.config.access_token or "",
            user_agent=self.config.user_agent,
            timeout=httpx.Timeout(self.config.timeout, connect=self.config.connect_timeout),
            transport=transport,
        )

    @property
    def client(self) -> AuthenticatedClient:
        return self._client

    def url_for(self, path: str, query: str = "") -> str:
        return f"{self.api_root}{path.lstrip('/')}{query}"

    async def request(
        self, method: str, path: str, query: str = "", body: Optional[str] = None
    ) -> str:
        """Send one request and return the response text.

        :param method: HTTP verb
        :type method: str
        :param path: Resource path relative to the versioned API root
        :type path: str
        :param query: Encoded query string including its leading ``?``, or ``""``
        :type query: str
        :param body: Encoded form body, sent URL-encoded when given
        :type body: Optional[str]
        :return: Response body text
        :rtype: str
        :raises APIError: If the API answers with a non-2xx status
        :raises httpx.HTTPError: If the request could not be sent
        """
        headers = {}
        content = None
        if body is not None:
            headers["Content-Type"] = FORM_CONTENT_TYPE
            content = body.encode("utf-8")

        response = await self._client.request(
            method, self.url_for(path, query), headers=headers, content=content
        )
        if not response.is_success:
            errors = _extract_errors(response.text)
            message = f"{method} {path} failed with status {response.status_code}"
            if errors and errors[0].get("message"):
                message += f": {errors[0]['message']}"
            logger.warning(message)
            raise APIError(
                message,
                status_code=response.status_code,
                response_body=response.text,
                errors=errors,
            )
        return response.text

    async def get(self, path: str, query: str = "") -> str:
        return await self.request("GET", path, query)

    async def post(self, path: str, body: str) -> str:
        return await self.request("POST", path, body=body)

    async def put(self, path: str, body: str) -> str:
        return await self.request("PUT", path, body=body)

    async def delete(self, path: str) -> str:
        return await self.request("DELETE", path)

    async def aclose(self) -> None:
        await self._client.aclose()
