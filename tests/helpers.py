"""Test doubles for the HTTP layer."""

from __future__ import annotations

import json
from typing import Any

from warden.utils.http import ProbeResponse

STRONG_SECRET = "q7Vn2kLx9PzR4tWb8YcJ3mHs6DfG1aZe5UoK0iNv"

SECURE_HEADERS = {
    "x-content-type-options": "nosniff",
    "x-frame-options": "DENY",
    "x-xss-protection": "1; mode=block",
    "strict-transport-security": "max-age=31536000",
    "x-ratelimit-limit": "100",
}


def response(status: int = 200, data: Any = None, headers: dict | None = None) -> ProbeResponse:
    """Build a ProbeResponse the way AsyncHttpClient would."""
    return ProbeResponse(
        status=status,
        headers={k.lower(): v for k, v in (headers or {}).items()},
        text=json.dumps(data) if data is not None else "",
        data=data,
    )


class FakeHttp:
    """Stand-in for AsyncHttpClient answering from a routing table.

    Keys are ``(method, path)`` or a bare ``path`` matching any method.
    Values are a ProbeResponse, an exception to raise, or None for a
    swallowed request error. Unrouted requests get ``default``.
    """

    def __init__(
        self,
        routes: dict[Any, Any] | None = None,
        default: ProbeResponse | None = None,
        base_url: str = "http://shop.test",
    ) -> None:
        self.routes = routes or {}
        self.default = default if default is not None else response(404)
        self.base_url = base_url
        self.calls: list[tuple[str, str, Any]] = []
        self.closed = False

    async def send(self, method: str, path: str, *, json: Any = None, headers=None):
        self.calls.append((method, path, json))
        key = (method, path)
        if key in self.routes:
            result = self.routes[key]
        elif path in self.routes:
            result = self.routes[path]
        else:
            result = self.default
        if isinstance(result, BaseException):
            raise result
        return result

    async def close(self) -> None:
        self.closed = True


def secure_routes() -> dict[Any, Any]:
    """Routing table of a target that passes every network probe."""
    unauthorized = response(401, {"message": "Unauthorized"})
    rejected = response(400, {"error": "Invalid query"})
    return {
        ("GET", "/api/admin/users"): unauthorized,
        ("GET", "/api/auth/profile"): unauthorized,
        ("POST", "/api/orders"): unauthorized,
        ("POST", "/api/payments/razorpay/order"): unauthorized,
        "/api/health": response(200, {"status": "ok"}, SECURE_HEADERS),
        "/api/products?search=1' OR '1'='1": rejected,
        '/api/products?category={"$ne":null}': rejected,
        "/api/products?search=test; ls -la": rejected,
    }
