from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB URI - provided via environment variables
    mongo_uri: Optional[str] = None
    mongodb_url: Optional[str] = None  # Alternative environment variable name
    mongo_db_name: str = "test"  # Used when the URI has no database path
    mongo_collection: str = "contacts"
    mongo_server_selection_timeout_ms: int = 5000

    # SMTP account, also the notification recipient
    email_user: Optional[str] = None
    email_pass: Optional[str] = None
    email_sender_name: str = "Eflex Solution"
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    smtp_use_tls: bool = True
    smtp_timeout: float = 30.0
    escape_email_html: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"

    # CORS settings
    allowed_origins: list[str] = ["*"]

    @property
    def effective_mongo_uri(self) -> Optional[str]:
        """Get the effective MongoDB URI from available sources"""
        return self.mongodb_url or self.mongo_uri

@lru_cache
def get_settings():
    return Settings()
