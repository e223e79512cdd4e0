"""Helpers shared by unit tests: canned Unleash responses and a mock transport."""

import json

import httpx

from unleash_provider.errors import UnleashAPIError


def api_error(status_code: int, body: str = "") -> UnleashAPIError:
    """Build the error the admin client raises for an HTTP status."""
    return UnleashAPIError(
        "request failed", status_code=status_code, response_body=body or None
    )


def ui_config(
    version: str = "5.7.0",
    is_latest: bool = True,
    latest_oss: str = "5.7.0",
    latest_enterprise: str = "5.7.0",
) -> dict:
    """Body of GET /api/admin/ui-config."""
    return {
        "version": version,
        "versionInfo": {
            "current": {"oss": version},
            "latest": {"oss": latest_oss, "enterprise": latest_enterprise},
            "isLatest": is_latest,
            "instanceId": "test-instance",
        },
    }


class RecordingTransport(httpx.MockTransport):
    """Mock transport that routes on (method, path) and records requests.

    Unrouted requests get a 404, like an Unleash server without the entity.
    """

    def __init__(self, routes: dict[tuple[str, str], httpx.Response] | None = None):
        self.routes = routes or {}
        self.requests: list[httpx.Request] = []
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.routes.get((request.method, request.url.path))
        if response is None:
            return httpx.Response(404, json={"message": "Not found"})
        return response

    def json_body(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)
