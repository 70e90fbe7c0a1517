"""Application settings using Pydantic Settings.

Centralized configuration for the questionnaire and document pipeline.
Every field can be overridden with an APP_-prefixed environment variable
or a .env file, e.g. APP_TEMPLATES_DIR=/srv/forms.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


DEFAULT_TEMPLATE_FILES: Dict[str, str] = {
    "petition-no-children": "petition-dissolution-no-children.pdf",
    "petition-with-children": "petition-dissolution-with-children.pdf",
    "financial-affidavit": "financial-affidavit.pdf",
    "parenting-plan": "parenting-plan.pdf",
}


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application info
    name: str = Field(default="Divorce Forms", description="Application name")
    version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")
    environment: str = Field(default="development", description="Environment name")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_json: bool = Field(default=False, description="Emit JSON log lines")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")

    # Document templates
    templates_dir: Path = Field(default=Path("forms"), description="Directory holding PDF templates")
    template_files: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_TEMPLATE_FILES),
        description="Template file name per document type"
    )
    need_appearances: bool = Field(
        default=True,
        description="Ask PDF viewers to regenerate field appearances"
    )
    flatten_forms: bool = Field(
        default=True,
        description="Burn filled values into the page and remove the editable form"
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment in ("production", "prod", "staging")

    def template_path(self, document_type: str) -> Optional[Path]:
        """Resolve the template file for a document type, or None if unconfigured."""
        file_name = self.template_files.get(document_type)
        if not file_name:
            logger.debug(f"No template configured for {document_type}")
            return None
        return self.templates_dir / file_name


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings instance.

    Returns:
        Settings: Cached settings loaded from environment.
    """
    return Settings()
