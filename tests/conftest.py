"""
Test infrastructure for the Articles API.

Strategy
--------
- Every test gets a brand-new ``InMemoryArticleRepository``.  The app's
  ``get_article_repository`` dependency is overridden to return it, so
  HTTP tests and direct service tests see exactly the same store and no
  state leaks between tests through the process-wide singleton.
- HTTP tests talk to the ASGI app in-process through httpx's
  ``ASGITransport``; no server or network port is involved.
"""
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from articles_api.dependencies import get_article_repository
from articles_api.main import app
from articles_api.repositories import InMemoryArticleRepository
from articles_api.services.article_service import ArticleService


@pytest.fixture
def repository() -> InMemoryArticleRepository:
    return InMemoryArticleRepository()


@pytest.fixture
def article_service(repository: InMemoryArticleRepository) -> ArticleService:
    return ArticleService(repository)


@pytest.fixture
def article_payload() -> dict:
    """The canonical article used across the HTTP tests."""
    return {
        "id": "a1",
        "title": "T",
        "tags": ["x", "y"],
        "content": "C",
        "publishAt": "2024-01-01T00:00:00Z",
    }


@pytest_asyncio.fixture
async def async_client(repository: InMemoryArticleRepository) -> AsyncClient:
    """
    Yield an httpx.AsyncClient wired to the FastAPI app via ASGITransport,
    backed by this test's repository.
    """
    app.dependency_overrides[get_article_repository] = lambda: repository
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
