from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from people_api.main import app

TEST_SECRET_KEY = "test-secret-key"
TEST_PHOTO_HOST = "https://photos.example.com/files"

SAMPLE_PHOTO_FILES = [
    {"id": "id-jdoe", "name": "jdoe.png"},
    {"id": "id-asmith", "name": "asmith.png"},
    {"id": "id-vn", "name": "vietnam.png"},
    {"id": "id-soccer", "name": "soccer.png"},
    {"id": "id-dev", "name": "dev.png"},
]

EMPLOYEE_HEADER = [
    "id",
    "name",
    "gender",
    "dob",
    "date_joined",
    "role",
    "country",
    "projects",
    "club",
    "photo",
]

EMPLOYEE_ROWS = [
    ["1", "John Doe", "M", "5/20/1990", "03/01/2018", "Developer", "Vietnam", "Alpha, Beta,Gamma", "Soccer", "jdoe.png"],
    ["2", "Anna Smith", "F", "12/02/1985", "07/15/2020", "Tester", "Japan", "Beta", "Chess, Soccer", "asmith.png"],
    ["3", "Lan Tran", "F"],
]


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def _secret_settings():
    from people_api.core.config import settings

    original_secret = settings.API_SECRET_KEY
    settings.API_SECRET_KEY = TEST_SECRET_KEY
    yield
    settings.API_SECRET_KEY = original_secret


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
async def async_client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"x-secret-key": TEST_SECRET_KEY}


def master_data_row(**columns: str) -> list[str]:
    """Build a 33-column master data row from ``{column_index: value}`` pairs given as ``c<index>``."""
    row = [""] * 33
    for name, value in columns.items():
        row[int(name[1:])] = value
    return row
