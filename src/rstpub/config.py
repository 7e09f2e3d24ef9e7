"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
LIST_FIELDS = {"content_types", "directives"}


class Settings(BaseModel):
    app_name:      str = "rstpub"
    content_dir:   str = Field(default="_content",     description="Root holding one directory per content type")
    output_dir:    str = Field(default="_build/data",  description="Directory for index, chunk, tag and search JSON")
    chunk_size:    int = Field(default=1000, ge=1,     description="Max items per content chunk file")
    content_types: list[str] = Field(default_factory=lambda: ["posts", "snippets", "projects"])
    directives:    list[str] = Field(default_factory=lambda: ["snippet-card"], description="Enabled directive kinds")
    json_indent:   int = Field(default=2, ge=0,        description="Indent for written JSON; 0 = compact")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then RSTPUB_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"RSTPUB_{name.upper()}"):
            data[name] = [v.strip() for v in val.split(",") if v.strip()] if name in LIST_FIELDS else val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
