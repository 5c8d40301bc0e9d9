"""Diff configuration: settings schema and config.yaml loader"""

import codecs
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    diff_disabled:           bool = Field(default=False, description="Suppress all diff output")
    diff_filesize_threshold: int  = Field(default=10_000_000, ge=0, description="Max input size in bytes")
    diff_output_threshold:   int  = Field(default=1_000_000,  ge=0, description="Max rendered diff length in characters")
    context_lines:           int  = Field(default=3, ge=0, description="Unchanged lines shown around each change")
    encoding:        str = Field(default="utf-8", description="Encoding used to read both inputs")
    output_encoding: str = Field(default="utf-8", description="Encoding the rendered diff is repaired into")

    @field_validator("encoding", "output_encoding")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e
        return value


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then CFGDIFF_<FIELD> env vars, then non-None overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"CFGDIFF_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
