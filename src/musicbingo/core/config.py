"""
Configuration management using Dynaconf and Pydantic.

Dynaconf loads settings from files (e.g., `settings.toml`, `.secrets.toml`)
and environment variables prefixed with `MUSICBINGO_`. Pydantic then validates
the merged data into a typed `MusicBingoSettings` object.

The `get_settings` function provides a singleton instance of the settings,
ensuring consistent configuration throughout the application.
"""

import json
import os
from pathlib import Path
from typing import Optional

from dynaconf import Dynaconf
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from rich.console import Console

console = Console(stderr=True)

# User-scoped config directory (XDG-style)
USER_CONFIG_DIR = Path.home() / ".config" / "musicbingo"
USER_SETTINGS_FILE = USER_CONFIG_DIR / "settings.toml"
USER_SECRETS_FILE = USER_CONFIG_DIR / ".secrets.toml"

settings_loader = Dynaconf(
    envvar_prefix="MUSICBINGO",
    # Load order (first wins, later overrides):
    # - Project-local settings (for development)
    # - User-scoped settings (global/default)
    settings_files=[
        "settings.toml",
        ".secrets.toml",
        str(USER_SETTINGS_FILE),
        str(USER_SECRETS_FILE),
    ],
    environments=True,
    load_dotenv=True,
)


DEFAULT_API_BASE_URL = "https://musicbingo-backend.gewoonjaap.workers.dev/api/card"


class MusicBingoSettings(BaseModel):
    """A Pydantic model that defines and validates all application settings."""

    api_base_url: str = Field(default=DEFAULT_API_BASE_URL)
    # None disables the client-side timeout entirely
    request_timeout: Optional[float] = Field(default=None, gt=0)
    # Forces the active locale after setup; None keeps the negotiated one
    locale: Optional[str] = None

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("api_base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError("api_base_url must be an http(s) URL")
        return value.rstrip("/")

    @field_validator("locale")
    @classmethod
    def _blank_locale_is_unset(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value


_settings_instance: Optional[MusicBingoSettings] = None


def get_settings() -> MusicBingoSettings:
    """Get the application settings as a singleton Pydantic model.

    Honors MUSICBINGO_SETTINGS_PATH when set: a JSON file layered under the
    Dynaconf sources, mostly useful in tests.
    """
    global _settings_instance
    if _settings_instance is None:
        try:
            config_dict = {}

            # 1) Explicit JSON settings file
            env_settings_path = os.getenv("MUSICBINGO_SETTINGS_PATH")
            if env_settings_path:
                p = Path(env_settings_path)
                if p.exists():
                    config_dict.update(json.loads(p.read_text(encoding="utf-8")) or {})

            # 2) Dynaconf loader (project + user scope); its keys come back upper-cased
            dc_dict = settings_loader.as_dict() or {}
            config_dict.update({str(k).lower(): v for k, v in dc_dict.items()})

            # 3) Explicit environment overrides, read at call time
            env_url = os.getenv("MUSICBINGO_API_BASE_URL")
            env_timeout = os.getenv("MUSICBINGO_REQUEST_TIMEOUT")
            env_locale = os.getenv("MUSICBINGO_LOCALE")
            if env_url:
                config_dict["api_base_url"] = env_url
            if env_timeout:
                config_dict["request_timeout"] = env_timeout
            if env_locale:
                config_dict["locale"] = env_locale

            _settings_instance = MusicBingoSettings(**config_dict)
        except ValidationError as e:
            console.print(f"[red]Configuration error:[/red]\n{e}")
            raise

    return _settings_instance


def create_default_settings() -> MusicBingoSettings:
    """Create a default settings instance, useful for resets."""
    return MusicBingoSettings()


def reset_settings():
    """Reset in-memory settings (on-disk settings are untouched)."""
    global _settings_instance
    _settings_instance = None
