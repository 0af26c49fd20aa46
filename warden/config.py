"""Configuration — Pydantic Settings + YAML loading."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "default.yaml"
REPORTS_DIR = Path("reports")


class HttpSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WARDEN_HTTP_")

    timeout: float = 10.0
    user_agent: str = "Warden/1.0"
    verify_ssl: bool = False
    follow_redirects: bool = False


class UrlSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WARDEN_URLS_")

    server: str = "http://localhost:5000"


class JwtSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="JWT_")

    secret: str = ""


class ReviewSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WARDEN_REVIEW_")

    manifest_path: str = "package.json"
    advisories: bool = True
    burst_size: int = Field(default=5, ge=1)
    min_token_length: int = 100
    min_secret_length: int = 32


# YAML section name -> settings class
SECTIONS: dict[str, type[BaseSettings]] = {
    "http": HttpSettings,
    "urls": UrlSettings,
    "jwt": JwtSettings,
    "review": ReviewSettings,
}


class Settings(BaseSettings):
    """Root settings — merges defaults, YAML config, and env vars."""

    model_config = SettingsConfigDict(env_prefix="WARDEN_")

    http: HttpSettings = Field(default_factory=HttpSettings)
    urls: UrlSettings = Field(default_factory=UrlSettings)
    jwt: JwtSettings = Field(default_factory=JwtSettings)
    review: ReviewSettings = Field(default_factory=ReviewSettings)
    environment: Literal["development", "production", "test"] = "development"
    reports_dir: Path = REPORTS_DIR
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> Settings:
        """Load settings from YAML file, falling back to defaults.

        Environment variables win over YAML values, at the top level and
        inside every section.
        """
        data: dict[str, Any] = {}

        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                raw = yaml.safe_load(f)
                if isinstance(raw, dict):
                    data = raw

        sections: dict[str, Any] = {}
        for name, section_cls in SECTIONS.items():
            section = data.pop(name, None)
            if isinstance(section, dict):
                sections[name] = section_cls(**_drop_env_overrides(section, section_cls))
            elif section is not None:
                sections[name] = section

        return cls(**_drop_env_overrides(data, cls), **sections)


def _drop_env_overrides(
    values: dict[str, Any], settings_cls: type[BaseSettings],
) -> dict[str, Any]:
    """Remove keys an environment variable already sets for settings_cls."""
    prefix = settings_cls.model_config.get("env_prefix", "")
    env = {name.upper() for name in os.environ}
    return {k: v for k, v in values.items() if f"{prefix}{k}".upper() not in env}
