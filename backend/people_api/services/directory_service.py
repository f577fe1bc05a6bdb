"""Employee and master data read service backed by Google Sheets and Drive."""

from __future__ import annotations

import asyncio
import logging

from people_api.core.config import Settings
from people_api.core.errors import DataSourceError
from people_api.models.common import ApiParam
from people_api.models.employee import EmployeeRecord
from people_api.models.master_data import MasterData
from people_api.services.master_data_grouper import build_master_data
from people_api.services.photo_resolver import PhotoLookup, fetch_photo_lookup
from people_api.services.row_mapper import records_from_grid
from people_api.services.workspace_client import WorkspaceClient, workspace_client

logger = logging.getLogger(__name__)


class DirectoryService:
    def __init__(self, workspace: WorkspaceClient | None = None) -> None:
        self.workspace = workspace or workspace_client
        self.photo_host = ""
        self.initialized = False

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        await self.workspace.initialize(settings)
        self.photo_host = settings.DRIVE_PHOTO_HOST
        if not self.photo_host:
            logger.warning("DRIVE_PHOTO_HOST not set, photo URLs will be host-relative")
        self.initialized = self.workspace.initialized

    async def close(self) -> None:
        await self.workspace.close()
        self.initialized = False

    async def _load(self, param: ApiParam) -> tuple[PhotoLookup, list[list[str]]]:
        if not self.initialized:
            raise DataSourceError("DirectoryService not initialized")

        photos, rows = await asyncio.gather(
            fetch_photo_lookup(self.workspace, param.photo_folder),
            self.workspace.get_values(param.spreadsheet_id, param.sheet_range),
        )
        return photos, rows

    async def get_all_employees(self, param: ApiParam) -> list[EmployeeRecord]:
        try:
            photos, rows = await self._load(param)
        except Exception:
            logger.error("Error retrieving employee data (spreadsheet=%s)", param.spreadsheet_id)
            raise
        return records_from_grid(rows, photos, self.photo_host)

    async def get_master_data(self, param: ApiParam) -> MasterData:
        try:
            photos, rows = await self._load(param)
        except Exception:
            logger.error("Error retrieving data source (spreadsheet=%s)", param.spreadsheet_id)
            raise
        return build_master_data(rows, photos, self.photo_host)

    async def check_connection(self) -> bool:
        if not self.initialized:
            return False
        return await self.workspace.check_connection()


directory_service = DirectoryService()
