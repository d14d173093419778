import httpx
import pytest

from clients.forge.client import ForgeClient
from core.models import ApiConfig


class DummyMCP:
    """Minimal FastMCP stand-in to capture tool registration."""

    def __init__(self) -> None:
        self.tools = {}

    def tool(self, *, name: str):
        def _decorator(fn):
            self.tools[name] = fn
            return fn
        return _decorator


@pytest.fixture
def dummy_mcp():
    return DummyMCP()


@pytest.fixture
def github_config():
    return ApiConfig(api_url="https://api.github.com", token="tok", is_github=True)


@pytest.fixture
def gitea_config():
    return ApiConfig(
        api_url="https://git.example.com/api/v1",
        token="tok",
        is_github=False,
        owner="acme",
        repo="widget",
    )


@pytest.fixture
def make_client(monkeypatch):
    """
    Build a ForgeClient whose _create_client() uses httpx.MockTransport.

    `routes` maps (METHOD, PATH) -> httpx.Response or (status_code, json).
    Every request is appended to the returned client's `.requests` list.
    """
    def _make(config: ApiConfig, routes: dict) -> ForgeClient:
        client = ForgeClient(config)
        client.requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            client.requests.append(request)
            key = (request.method.upper(), request.url.path)
            if key not in routes:
                return httpx.Response(404, json={"message": "not found"})

            val = routes[key]
            if isinstance(val, httpx.Response):
                return val
            if isinstance(val, Exception):
                raise val

            status_code, js = val
            return httpx.Response(status_code, json=js)

        transport = httpx.MockTransport(handler)

        def _create_client():
            return httpx.AsyncClient(
                base_url=config.api_url,
                headers=client._headers,
                timeout=config.timeout,
                transport=transport,
            )

        monkeypatch.setattr(client, "_create_client", _create_client)
        return client

    return _make
