import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    GOOGLE_PROJECT_ID: str = ""
    GOOGLE_CREDENTIAL_PRIVATE_KEY_ID: str = ""
    GOOGLE_CREDENTIAL_PRIVATE_KEY: str = ""
    GOOGLE_CREDENTIAL_CLIENT_EMAIL: str = ""
    GOOGLE_CREDENTIAL_CLIENT_ID: str = ""
    GOOGLE_TOKEN_URI: str = "https://oauth2.googleapis.com/token"
    GOOGLE_API_TIMEOUT: int = 30

    DRIVE_PHOTO_HOST: str = ""

    API_SECRET_KEY: str = ""

    EMPLOYEE_SPREADSHEET_ID: str = ""
    EMPLOYEE_SHEET_RANGE: str = "Employees"
    EMPLOYEE_PHOTO_FOLDER: str = ""

    MASTER_DATA_SPREADSHEET_ID: str = ""
    MASTER_DATA_SHEET_RANGE: str = "MasterData"
    MASTER_DATA_PHOTO_FOLDER: str = ""

    CORS_ORIGINS: list[str] = ["http://localhost:5173"]

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
