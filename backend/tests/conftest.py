"""Shared test fixtures for backend tests."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from lexdesk.main import app
from lexdesk.auth.jwt import create_access_token
from lexdesk.auth.permissions import PermissionProfile
from lexdesk.confirm.sessions import ConfirmSessions


# A lawyer who sees cases, clients and documents but no finance, sessions or tasks
STAFF_PROFILE = PermissionProfile(
    id=7,
    name="Lawyer",
    view_case_permissions=3,
    dml_case_permissions=3,
    client_permissions=8,
    document_permissions=15,
)


def _make_auth_header(user_id: int, role: str, profile: PermissionProfile | None = None) -> dict:
    """Create an Authorization header with a valid JWT."""
    token = create_access_token(user_id, role, profile)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers() -> dict:
    return _make_auth_header(1, "OfficeAdmin")


@pytest.fixture
def staff_headers() -> dict:
    return _make_auth_header(2, "Lawyer", STAFF_PROFILE)


@pytest.fixture
def empty_headers() -> dict:
    return _make_auth_header(3, "Secretary", PermissionProfile())


@pytest_asyncio.fixture
async def confirm_sessions() -> AsyncGenerator[ConfirmSessions, None]:
    """Fresh per-test session registry (ASGITransport skips the lifespan)."""
    sessions = ConfirmSessions()
    app.state.confirm_sessions = sessions
    yield sessions
    sessions.close_all()


@pytest_asyncio.fixture
async def client(confirm_sessions: ConfirmSessions) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
