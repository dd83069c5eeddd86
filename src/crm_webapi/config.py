"""
Configuration management for the CRM Web API request builder
"""

import os
from pathlib import Path
from typing import Dict, Optional, Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Organization URL (Required), e.g. https://contoso.crm.dynamics.com
    crm_url: str

    # Optional Configuration
    api_version: str = "9.2"
    access_token: Optional[str] = None
    request_timeout: float = 30.0
    log_level: str = "info"

    # Development Settings
    debug: bool = False

    # Implementation Selection (for Dependency Injection)
    entity_set_resolver: Literal["pluralize", "metadata"] = "pluralize"
    webapi_client: Literal["httpx", "mock"] = "httpx"

    # Logical name -> entity set name, for sets the pluralizer gets wrong
    entity_set_overrides: Dict[str, str] = {}

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )

    @property
    def api_url(self) -> str:
        """Get Web API base URL"""
        return f"{self.crm_url.rstrip('/')}/api/data/v{self.api_version}/"


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get application settings singleton"""
    global _settings
    if _settings is None:
        load_dotenv_if_exists()

        import structlog
        logger = structlog.get_logger(__name__)
        logger.debug("Environment variables",
                     crm_url=os.getenv('CRM_URL'),
                     cwd=os.getcwd())

        try:
            _settings = Settings()  # type: ignore[call-arg]
            logger.info("Settings loaded", api_url=_settings.api_url)
        except Exception as e:
            raise ValueError("Required environment variables missing. Check your .env file.") from e
    return _settings


def reset_settings() -> None:
    """Drop the cached settings instance"""
    global _settings
    _settings = None


def load_dotenv_if_exists() -> None:
    """Load .env file if it exists"""
    from dotenv import load_dotenv

    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)
    else:
        # Try to load from parent directories
        current = Path.cwd()
        for parent in [current] + list(current.parents):
            env_path = parent / ".env"
            if env_path.exists():
                load_dotenv(env_path)
                break
