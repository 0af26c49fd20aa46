"""Async HTTP client — every status code is a result, never an error."""

from __future__ import annotations

import asyncio
import json
import logging
import ssl
from typing import Any

import aiohttp
from pydantic import BaseModel, Field

from warden.errors import TargetUnreachableError

logger = logging.getLogger(__name__)


class ProbeResponse(BaseModel):
    """Normalized HTTP response. Header names are stored lower-cased."""

    status: int = 0
    headers: dict[str, str] = Field(default_factory=dict)
    text: str = ""
    data: Any = None
    url: str = ""

    def header(self, name: str) -> str | None:
        return self.headers.get(name.lower())

    @property
    def is_json(self) -> bool:
        return isinstance(self.data, dict | list)

    @property
    def serialized(self) -> str:
        """Body as a JSON string when it parsed as JSON, raw text otherwise."""
        if self.data is None:
            return self.text
        return json.dumps(self.data, ensure_ascii=False)


def _parse_body(text: str) -> Any:
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return None


class AsyncHttpClient:
    """HTTP client bound to one target base URL.

    Usage:
        async with AsyncHttpClient("http://localhost:5000") as http:
            resp = await http.send("GET", "/api/health")
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        user_agent: str = "Warden/1.0",
        verify_ssl: bool = False,
        follow_redirects: bool = False,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.user_agent = user_agent
        self.verify_ssl = verify_ssl
        self.follow_redirects = follow_redirects
        self._session: aiohttp.ClientSession | None = None

    @classmethod
    def from_settings(cls, settings: Any) -> AsyncHttpClient:
        return cls(
            settings.urls.server,
            timeout=settings.http.timeout,
            user_agent=settings.http.user_agent,
            verify_ssl=settings.http.verify_ssl,
            follow_redirects=settings.http.follow_redirects,
        )

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            ssl_ctx: ssl.SSLContext | bool = True
            if not self.verify_ssl:
                ssl_ctx = ssl.create_default_context()
                ssl_ctx.check_hostname = False
                ssl_ctx.verify_mode = ssl.CERT_NONE
            self._session = aiohttp.ClientSession(
                connector=aiohttp.TCPConnector(ssl=ssl_ctx),
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
            )
        return self._session

    def url_for(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    async def send(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> ProbeResponse | None:
        """Issue one request and normalize the response.

        Returns None when the request failed for a reason other than the
        target being unreachable. Connection failures and timeouts raise
        TargetUnreachableError.
        """
        session = await self._ensure_session()
        url = self.url_for(path)
        kw: dict[str, Any] = {"allow_redirects": self.follow_redirects}
        if json is not None:
            kw["json"] = json
        if headers:
            kw["headers"] = headers
        try:
            resp = await session.request(method, url, **kw)
            async with resp:
                text = await resp.text(errors="replace")
                return ProbeResponse(
                    status=resp.status,
                    headers={k.lower(): v for k, v in resp.headers.items()},
                    text=text,
                    data=_parse_body(text),
                    url=str(resp.url),
                )
        except (aiohttp.ClientConnectionError, asyncio.TimeoutError) as e:
            raise TargetUnreachableError(url, str(e) or type(e).__name__) from e
        except aiohttp.ClientError as e:
            logger.debug("%s %s failed: %s", method, url, e)
            return None

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> AsyncHttpClient:
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.close()
