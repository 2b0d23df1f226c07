import httpx
import pytest

from smartignore.config import Settings

GITHUB_URL = "https://raw.test/github"
API_URL = "https://api.test/gitignore-api"


@pytest.fixture
def templates_dir(tmp_path):
    path = tmp_path / "templates"
    path.mkdir()
    return path


@pytest.fixture
def settings(templates_dir):
    return Settings(
        github_url=GITHUB_URL,
        api_url=API_URL,
        timeout_seconds=1.0,
        templates_dir=templates_dir,
    )


@pytest.fixture
def make_client():
    """
    Build an httpx client served by `routes`: URL path -> (status, text),
    or an exception to raise. Unknown paths answer 404.
    Every requested path is appended to `client.requested`.
    """
    clients = []

    def _make(routes=None, down=False):
        requested = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(request.url.path)
            if down:
                raise httpx.ConnectError("network is unreachable", request=request)
            route = (routes or {}).get(request.url.path, (404, "Not Found"))
            if isinstance(route, Exception):
                raise route
            status, text = route
            return httpx.Response(status, text=text)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        client.requested = requested
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()
