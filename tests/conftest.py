import httpx
import pytest
from fastapi.testclient import TestClient

from core.config import Settings
from database import build_engine
from main import create_app
from services.contact_store import InMemoryContactStore, SQLContactStore
from services.github_service import GitHubService


@pytest.fixture
def settings():
    return Settings(
        DATABASE_URL="sqlite://",
        CONTACT_STORE_BACKEND="sql",
        GITHUB_API_URL="https://api.github.test",
        GITHUB_TOKEN=None,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def sql_store(settings):
    store = SQLContactStore(build_engine(settings))
    store.init_schema()
    return store


@pytest.fixture
def memory_store():
    return InMemoryContactStore()


class FakeGitHub:
    """Routes upstream paths to canned responses and records every request."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, path, status_code=200, json=None, exc=None):
        self.routes[path] = (status_code, json, exc)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path not in self.routes:
            return httpx.Response(404, json={"message": "Not Found"})
        status_code, body, exc = self.routes[request.url.path]
        if exc is not None:
            raise exc(f"stubbed failure for {request.url.path}", request=request)
        return httpx.Response(status_code, json=body)


@pytest.fixture
def fake_github():
    return FakeGitHub()


@pytest.fixture
def github_service(settings, fake_github):
    return GitHubService(settings, transport=httpx.MockTransport(fake_github.handler))


@pytest.fixture
def client(settings, sql_store, github_service):
    app = create_app(settings, contact_store=sql_store, github_service=github_service)
    with TestClient(app) as c:
        yield c


OCTOCAT = {
    "login": "octocat",
    "id": 583231,
    "public_repos": 8,
    "followers": 9000,
    "following": 9,
    "created_at": "2011-01-25T18:44:36Z",
    "bio": None,
}

OCTOCAT_REPOS = [
    {
        "name": "Hello-World",
        "description": "My first repository on GitHub!",
        "html_url": "https://github.com/octocat/Hello-World",
        "language": None,
        "stargazers_count": 3,
        "forks_count": 1,
        "updated_at": "2024-05-01T10:00:00Z",
    },
    {
        "name": "Spoon-Knife",
        "description": None,
        "html_url": "https://github.com/octocat/Spoon-Knife",
        "language": "HTML",
        "stargazers_count": 0,
        "forks_count": 2,
        "updated_at": "2024-04-01T10:00:00Z",
    },
    {
        "name": "dotfiles",
        "description": "Nothing to see here",
        "html_url": "https://github.com/octocat/dotfiles",
        "language": "Shell",
        "stargazers_count": 0,
        "forks_count": 0,
        "updated_at": "2024-03-01T10:00:00Z",
    },
]


@pytest.fixture
def octocat():
    return dict(OCTOCAT)


@pytest.fixture
def octocat_repos():
    return [dict(repo) for repo in OCTOCAT_REPOS]
