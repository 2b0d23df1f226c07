"""
Runtime configuration for smart-gitignore.

Every value can be overridden through an environment variable; create a new
``Settings`` instance (or pass one to ``generate_ignore_file``) to override
them programmatically.
"""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

VERSION = "1.0.0"

PACKAGED_TEMPLATES_DIR = Path(__file__).resolve().parent / "gitignore_templates"


def _templates_dir_from_env() -> Path:
    value = os.getenv("SMART_GITIGNORE_TEMPLATES_DIR")
    return Path(value) if value else PACKAGED_TEMPLATES_DIR


class Settings(BaseModel):
    """Provider endpoints, HTTP behaviour and local template location."""

    github_url: str = Field(
        default_factory=lambda: os.getenv(
            "SMART_GITIGNORE_GITHUB_URL",
            "https://raw.githubusercontent.com/github/gitignore/main",
        )
    )
    api_url: str = Field(
        default_factory=lambda: os.getenv(
            "SMART_GITIGNORE_API_URL",
            "https://www.toptal.com/developers/gitignore/api",
        )
    )
    timeout_seconds: float = Field(
        default_factory=lambda: os.getenv("SMART_GITIGNORE_TIMEOUT", "10.0"),
        validate_default=True,
        gt=0,
    )
    templates_dir: Path = Field(default_factory=_templates_dir_from_env)
    user_agent: str = f"smart-gitignore/{VERSION}"


def load_settings(templates_dir: Optional[str] = None) -> Settings:
    """Build settings from the environment, optionally pinning the templates dir."""
    settings = Settings()
    if templates_dir:
        settings = settings.model_copy(update={"templates_dir": Path(templates_dir)})
    return settings
