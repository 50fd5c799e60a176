# group_portal\shared\config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from enum import Enum
from typing import Dict, List, Optional

class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "group-portal"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    OTEL_SERVICE_NAME: str = "group-portal"
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None

    # --- Persistence ---
    DATABASE_URL: str = "sqlite:///./group_portal.db"

    # --- Groups ---
    # Entity type id that group content is stored under (used in action routes)
    GROUP_ENTITY_TYPE: str = "node"
    MEMBERSHIP_TYPES: List[str] = ["default"]

    # Operation -> roles allowed to perform it.
    # "authenticated" / "anonymous" are implied by the viewer's login state.
    GROUP_PERMISSIONS: Dict[str, List[str]] = {
        "subscribe": ["authenticated"],
        "subscribe without approval": ["authenticated"],
    }

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
