"""Root conftest — shared test configuration.

Invariants:
    - Every test that touches the filesystem gets its own data directory under tmp_path
    - The app's document store dependency is overridden, never the real data dir

Design Decisions:
    - Real FastAPI app over httpx ASGITransport: exercises routing, dependency
      injection and the global error handlers together
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Keep tests away from any developer .env pointing at real documents
os.environ.setdefault("TOS_DATA_DIR", "/nonexistent-tos-data")
os.environ.setdefault("LOG_FORMAT", "text")

from tos_api.api.routes.tos import get_document_store  # noqa: E402
from tos_api.main import app  # noqa: E402
from tos_api.services.tos_documents import TosDocumentStore  # noqa: E402

TOS_CONTENT = "Test Terms of Service Content"


@pytest.fixture
def data_dir(tmp_path):
    """Sandbox directory holding test-tos.txt, with a sibling outside it."""
    base = tmp_path / "data"
    base.mkdir()
    (base / "test-tos.txt").write_text(TOS_CONTENT, encoding="utf-8")
    (tmp_path / "secret.txt").write_text("outside the sandbox", encoding="utf-8")
    return base


@pytest.fixture
def store(data_dir):
    return TosDocumentStore(data_dir)


@pytest.fixture
async def client(store):
    """FastAPI test client with the document store rooted at data_dir."""
    app.dependency_overrides[get_document_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
