from pydantic_settings import BaseSettings
from typing import List, Literal

class Settings(BaseSettings):
    # Admin credentials (compared in plaintext)
    ADMIN_USERNAME: str = "admin@sjcet.edu"
    ADMIN_PASSWORD: str = "admin123"

    # Storage
    STORAGE_BACKEND: Literal["memory", "sql"] = "memory"
    DATABASE_URL: str = "sqlite:///./campus_bus.db"
    SEED_SAMPLE_DATA: bool = True
    SAMPLE_DATE_WINDOW_DAYS: int = 30

    # Students
    COLLEGE_ID_PREFIX: str = "SJCET"
    COLLEGE_ID_DIGITS: int = 7

    # Application
    PROJECT_NAME: str = "College Bus Booking System"
    API_PREFIX: str = "/api"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5000", "http://localhost:5173"]

    @property
    def college_id_pattern(self) -> str:
        return rf"^{self.COLLEGE_ID_PREFIX}\d{{{self.COLLEGE_ID_DIGITS}}}$"

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
