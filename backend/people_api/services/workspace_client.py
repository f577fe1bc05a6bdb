"""Google Sheets / Drive read client authenticated with a service account."""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import quote

import aiohttp
from google.auth.transport.requests import Request
from google.oauth2 import service_account

from people_api.core.config import Settings
from people_api.core.errors import DataSourceError

logger = logging.getLogger(__name__)

SCOPES = [
    "https://www.googleapis.com/auth/spreadsheets",
    "https://www.googleapis.com/auth/drive.readonly",
]

SHEETS_API = "https://sheets.googleapis.com/v4/spreadsheets"
DRIVE_FILES_API = "https://www.googleapis.com/drive/v3/files"

_DRIVE_PAGE_SIZE = 1000


def drive_query_literal(value: str) -> str:
    """Escape a value for use inside a single-quoted Drive query string."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def build_credentials(settings: Settings) -> service_account.Credentials:
    info = {
        "type": "service_account",
        "project_id": settings.GOOGLE_PROJECT_ID,
        "private_key_id": settings.GOOGLE_CREDENTIAL_PRIVATE_KEY_ID,
        # Keys pasted into env files usually carry escaped newlines
        "private_key": settings.GOOGLE_CREDENTIAL_PRIVATE_KEY.replace("\\n", "\n"),
        "client_email": settings.GOOGLE_CREDENTIAL_CLIENT_EMAIL,
        "client_id": settings.GOOGLE_CREDENTIAL_CLIENT_ID,
        "token_uri": settings.GOOGLE_TOKEN_URI,
    }
    return service_account.Credentials.from_service_account_info(info, scopes=SCOPES)


class WorkspaceClient:
    def __init__(self) -> None:
        self.credentials: service_account.Credentials | None = None
        self.timeout = 30
        self.initialized = False
        self._refresh_lock = asyncio.Lock()

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.GOOGLE_CREDENTIAL_CLIENT_EMAIL or not settings.GOOGLE_CREDENTIAL_PRIVATE_KEY:
            logger.warning("Google service account credentials missing, WorkspaceClient not initialized")
            return

        self.credentials = build_credentials(settings)
        self.timeout = settings.GOOGLE_API_TIMEOUT
        self.initialized = True
        logger.info("WorkspaceClient initialized (project=%s)", settings.GOOGLE_PROJECT_ID)

    async def close(self) -> None:
        self.credentials = None
        self.initialized = False

    async def _auth_headers(self) -> dict[str, str]:
        if not self.initialized or not self.credentials:
            raise DataSourceError("WorkspaceClient not initialized")

        if not self.credentials.valid:
            async with self._refresh_lock:
                if not self.credentials.valid:
                    # google-auth refreshes synchronously over requests
                    await asyncio.to_thread(self.credentials.refresh, Request())

        return {"Authorization": f"Bearer {self.credentials.token}"}

    async def _get_json(self, url: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        headers = await self._auth_headers()
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(url, headers=headers, params=params) as response:
                if response.status == 200:
                    return await response.json()

                error_text = await response.text()
                raise DataSourceError(f"Google API request failed: {response.status} - {error_text}")

    async def get_values(self, spreadsheet_id: str, sheet_range: str) -> list[list[str]]:
        """Return the cell grid of ``sheet_range``; trailing empty cells are omitted by the API."""
        url = f"{SHEETS_API}/{quote(spreadsheet_id, safe='')}/values/{quote(sheet_range, safe='')}"
        data = await self._get_json(url)
        return data.get("values", [])

    async def list_folder(self, folder_id: str) -> list[dict[str, str]]:
        """List the non-trashed files directly inside ``folder_id``."""
        params: dict[str, Any] = {
            "q": f"'{drive_query_literal(folder_id)}' in parents and trashed=false",
            "fields": "nextPageToken, files(id, name)",
            "pageSize": _DRIVE_PAGE_SIZE,
        }

        files: list[dict[str, str]] = []
        while True:
            data = await self._get_json(DRIVE_FILES_API, params=params)
            files.extend(data.get("files", []))

            page_token = data.get("nextPageToken")
            if not page_token:
                return files
            params["pageToken"] = page_token

    async def check_connection(self) -> bool:
        if not self.initialized:
            return False
        try:
            await self._auth_headers()
            return True
        except Exception:
            logger.exception("WorkspaceClient connection check failed")
            return False


workspace_client = WorkspaceClient()
