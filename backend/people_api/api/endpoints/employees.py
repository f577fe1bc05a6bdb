from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from people_api.core.config import settings
from people_api.core.dependencies import verify_secret_key
from people_api.core.errors import employee_failure
from people_api.models.common import ApiParam
from people_api.models.employee import EmployeeRecord
from people_api.services.directory_service import directory_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employee", tags=["employee"], dependencies=[Depends(verify_secret_key)])


def employee_param() -> ApiParam:
    return ApiParam(
        spreadsheet_id=settings.EMPLOYEE_SPREADSHEET_ID,
        sheet_range=settings.EMPLOYEE_SHEET_RANGE,
        photo_folder=settings.EMPLOYEE_PHOTO_FOLDER,
    )


@router.get("", response_model=list[EmployeeRecord])
async def list_employees(param: ApiParam = Depends(employee_param)):  # noqa: B008
    try:
        return await directory_service.get_all_employees(param)
    except Exception as err:
        logger.exception("Failed to list employees")
        raise employee_failure() from err
