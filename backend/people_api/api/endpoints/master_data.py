from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from people_api.core.config import settings
from people_api.core.dependencies import verify_secret_key
from people_api.core.errors import master_data_failure
from people_api.models.common import ApiParam
from people_api.models.master_data import MasterData
from people_api.services.directory_service import directory_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/master-data", tags=["master-data"], dependencies=[Depends(verify_secret_key)])


def master_data_param() -> ApiParam:
    return ApiParam(
        spreadsheet_id=settings.MASTER_DATA_SPREADSHEET_ID,
        sheet_range=settings.MASTER_DATA_SHEET_RANGE,
        photo_folder=settings.MASTER_DATA_PHOTO_FOLDER,
    )


@router.get("", response_model=MasterData)
async def get_master_data(param: ApiParam = Depends(master_data_param)):  # noqa: B008
    try:
        return await directory_service.get_master_data(param)
    except Exception as err:
        logger.exception("Failed to retrieve master data")
        raise master_data_failure() from err
