"""Client for the directory API: fetches employees and master data together."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from people_api.core.dependencies import SECRET_KEY_NAME
from people_api.models.common import ErrorResponse
from people_api.models.employee import EmployeeRecord
from people_api.models.master_data import MasterData

logger = logging.getLogger(__name__)

EMPLOYEE_PATH = "/api/employee"
MASTER_DATA_PATH = "/api/master-data"


class ClientFetchError(Exception):
    def __init__(self, message: str, status: int, error_code: str | None = None) -> None:
        super().__init__(message)
        self.status = status
        self.error_code = error_code


async def handle_response(response: aiohttp.ClientResponse) -> Any:
    if 200 <= response.status < 300:
        return await response.json()

    try:
        error = ErrorResponse.model_validate(await response.json(content_type=None))
        error_code, error_message = error.error_code, error.error_message
    except ValueError:
        error_code, error_message = None, response.reason or "Unknown error"

    if response.status == 401:
        raise ClientFetchError(f"Unauthorized: {error_message}", response.status, error_code)
    if response.status == 500:
        raise ClientFetchError(f"Internal Server Error: {error_message}", response.status, error_code)
    raise ClientFetchError(f"Error: {error_message}", response.status, error_code)


class DirectoryClient:
    def __init__(self, base_url: str, timeout: int = 30) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def _get(self, session: aiohttp.ClientSession, path: str, api_key: str) -> Any:
        headers = {"Content-Type": "application/json", SECRET_KEY_NAME: api_key}
        async with session.get(f"{self.base_url}{path}", headers=headers) as response:
            return await handle_response(response)

    async def fetch_apis(self, api_key: str) -> tuple[list[EmployeeRecord], MasterData] | None:
        """Fetch both datasets concurrently; ``None`` if either request fails."""
        try:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                employees, master_data = await asyncio.gather(
                    self._get(session, EMPLOYEE_PATH, api_key),
                    self._get(session, MASTER_DATA_PATH, api_key),
                )
            return employees, MasterData.model_validate(master_data)
        except Exception:
            logger.exception("An error occurred while fetching directory data")
            return None
