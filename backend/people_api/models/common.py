from __future__ import annotations

from pydantic import BaseModel


class ApiParam(BaseModel):
    """Which spreadsheet range and photo folder a call reads from."""

    spreadsheet_id: str
    sheet_range: str
    photo_folder: str


class ErrorResponse(BaseModel):
    error_code: str
    error_message: str
