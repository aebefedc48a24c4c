"""API test fixtures — FastAPI app wired to a temporary dataset directory.

Invariants:
    - get_settings overridden per test; the real environment is never read
    - Working directory is an empty temp dir (see isolated_cwd)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from exhibits_api.config import Settings, get_settings
from exhibits_api.main import app


@pytest.fixture
def app_settings(data_dir, isolated_cwd):
    return Settings(data_dir=str(data_dir))


@pytest.fixture
async def client(app_settings):
    """Async test client against the ASGI app."""
    app.dependency_overrides[get_settings] = lambda: app_settings
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
