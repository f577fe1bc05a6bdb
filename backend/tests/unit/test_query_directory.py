"""Tests for the directory query script."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from people_api.core.errors import UnknownFieldError
from people_api.models.master_data import Category, MasterData, SubCategory
from scripts.query_directory import main, parse_args, query

EMPLOYEES = [
    {"id": "1", "name": "John Doe", "gender": "M", "club": ["Soccer"]},
    {"id": "2", "name": "Anna Smith", "gender": "F", "club": ["Chess", "Soccer"]},
    {"id": "3", "name": "Lan Tran", "gender": "F", "club": []},
]

MASTER_DATA = MasterData(
    category=[Category(key="club", title="Club", photo="")],
    club=[SubCategory(title="Soccer", photo="")],
)


def _client(result=(EMPLOYEES, MASTER_DATA)) -> MagicMock:
    client = MagicMock()
    client.fetch_apis = AsyncMock(return_value=result)
    return client


def test_parse_args_defaults():
    args = parse_args([])
    assert args.base_url == "http://localhost:8000"
    assert args.api_key is None
    assert args.category is None
    assert args.field is None
    assert args.verbose is False


def test_parse_args_field_requires_value():
    with pytest.raises(SystemExit):
        parse_args(["--field", "gender"])


def test_parse_args_category_and_field_are_exclusive():
    with pytest.raises(SystemExit):
        parse_args(["--category", "club", "--field", "gender", "--value", "F"])


@pytest.mark.anyio
async def test_query_without_filter_returns_everything():
    client = _client()

    data = await query(parse_args(["--api-key", "k"]), client)

    client.fetch_apis.assert_awaited_once_with("k")
    assert data["employees"] == EMPLOYEES
    assert data["master_data"]["club"] == [{"title": "Soccer", "photo": ""}]


@pytest.mark.anyio
async def test_query_category():
    data = await query(parse_args(["--api-key", "k", "--category", "category"]), _client())
    assert data == [{"key": "club", "title": "Club", "photo": ""}]


@pytest.mark.anyio
async def test_query_employee_field():
    data = await query(parse_args(["--api-key", "k", "--field", "club", "--value", "Soccer"]), _client())
    assert [employee["id"] for employee in data] == ["1", "2"]


@pytest.mark.anyio
async def test_query_unknown_category_raises():
    with pytest.raises(UnknownFieldError):
        await query(parse_args(["--api-key", "k", "--category", "hobbies"]), _client())


@pytest.mark.anyio
async def test_query_fetch_failure_returns_none():
    assert await query(parse_args(["--api-key", "k"]), _client(result=None)) is None


def test_main_prints_filtered_json(capsys):
    with patch("scripts.query_directory.DirectoryClient", return_value=_client()):
        exit_code = main(["--api-key", "k", "--field", "gender", "--value", "F"])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "Anna Smith" in out
    assert "John Doe" not in out


def test_main_returns_1_when_no_data():
    with patch("scripts.query_directory.DirectoryClient", return_value=_client(result=None)):
        assert main(["--api-key", "k"]) == 1


def test_main_returns_1_for_unknown_field():
    with patch("scripts.query_directory.DirectoryClient", return_value=_client()):
        assert main(["--api-key", "k", "--field", "shoe_size", "--value", "42"]) == 1
