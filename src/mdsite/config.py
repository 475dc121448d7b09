"""Application configuration: settings schema and mdsite.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from markdown_it import MarkdownIt
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "mdsite.yaml"


class SiteConfig(BaseModel, frozen=True):
    """Site-wide values substituted verbatim into pages, feed, and sitemap."""
    title:       str = "My Blog"
    url:         str = ""
    description: str = ""
    author:      str = ""
    language:    str = "en"


class Settings(BaseModel):
    site_title:       str = "My Blog"
    site_url:         str = Field(default="",   description="Public base URL used for canonical links, feed, and sitemap")
    site_description: str = ""
    site_author:      str = ""
    site_language:    str = "en"
    source_dir:       str = Field(default="posts",     description="Directory containing markdown documents")
    output_dir:       str = Field(default="dist",      description="Directory for generated HTML/XML files")
    templates_dir:    str = Field(default="templates", description="Directory holding post/index/tags/404 templates")
    static_files:     list[str] = Field(default_factory=lambda: ["styles.css"], description="Files copied into output_dir")
    excerpt_length:   int = Field(default=200, ge=1, description="Max derived excerpt length before truncation")
    words_per_minute: int = Field(default=200, ge=1, description="Reading speed used for reading-time estimates")
    parser_config:    str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    workers:          int = Field(default=1,   ge=1, description="Threads used to parse documents")
    clean:            bool = Field(default=True, description="Remove output_dir before building")

    @field_validator("parser_config")
    @classmethod
    def _known_preset(cls, v: str) -> str:
        try:
            MarkdownIt(v)
        except KeyError as e:
            raise ValueError(f"unknown markdown-it preset {v!r}") from e
        return v

    def site(self) -> SiteConfig:
        return SiteConfig(
            title=self.site_title,
            url=self.site_url,
            description=self.site_description,
            author=self.site_author,
            language=self.site_language,
        )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from mdsite.yaml, then MDSITE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDSITE_{name.upper()}"):
            data[name] = [v.strip() for v in val.split(",") if v.strip()] if name == "static_files" else val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
