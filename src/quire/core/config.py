import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_FILENAME = "quire.toml"


def _deep_merge(destination: dict[str, Any], source: dict[str, Any]) -> dict[str, Any]:
    """Merge source into destination, with source values overwriting."""
    for key, value in source.items():
        if isinstance(value, Mapping) and key in destination and isinstance(destination[key], Mapping):
            destination[key] = _deep_merge(dict(destination[key]), dict(value))
        else:
            destination[key] = value
    return destination


class SiteConfig(BaseSettings):
    """Site-wide configuration read by the rendering helpers.

    Supports environment variable overrides with the pattern
    QUIRE_KEY (e.g., QUIRE_BASE_URL).
    """

    base_url: str | None = Field(
        default=None,
        description="URL of the site without trailing slash, e.g. 'http://example.com'",
    )
    output_dir: Path = Field(default=Path("output"), description="Directory compiled files are written to")
    sitemap_path: Path = Field(default=Path("sitemap.xml"), description="Sitemap location inside output_dir")

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="QUIRE_",
        env_nested_delimiter="__",
    )

    @classmethod
    def load(cls, site_root: Path | None = None) -> "SiteConfig":
        """Loads configuration from quire.toml and environment variables.

        Priority (highest to lowest):
        1. Environment variables (QUIRE_KEY)
        2. Config file (quire.toml)
        3. Defaults
        """
        root_path = site_root if site_root is not None else Path.cwd()
        config_file = root_path / CONFIG_FILENAME

        file_settings: dict[str, Any] = {}
        if config_file.is_file():
            with config_file.open("rb") as f:
                file_settings = tomllib.load(f)

        env_settings = cls().model_dump(exclude_unset=True)
        merged = _deep_merge(file_settings, env_settings)

        return cls.model_validate(merged)

    @property
    def abs_sitemap_path(self) -> Path:
        if self.sitemap_path.is_absolute():
            return self.sitemap_path
        return self.output_dir / self.sitemap_path

    @property
    def has_output_location(self) -> bool:
        """Whether output_dir or sitemap_path was set explicitly."""
        return bool(self.model_fields_set & {"output_dir", "sitemap_path"})
