from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    PROJECT_NAME: str = "Portal Academico API"
    VERSION: str = "0.1.0"

    # Database
    DATABASE_URL: str = "sqlite:///./portal_academico.db"
    SQL_ECHO: bool = False
    CREATE_TABLES_ON_STARTUP: bool = True

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = ["http://localhost:5173"]

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
