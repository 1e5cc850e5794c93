import os
import sys
from pathlib import Path
from typing import Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


def _default_notifier() -> str:
    return "dialog" if sys.platform == "darwin" else "console"


class SourceSettings(BaseModel):
    """Where reminders are read from"""
    backend: Literal["reminders", "postgres"] = "reminders"
    script_timeout_seconds: float = 120.0
    database_url: str | None = Field(default_factory=lambda: os.getenv('DATABASE_URL'))


class ExportSettings(BaseModel):
    """Where the CSV goes"""
    output_dir: str | None = None
    reveal_folder: bool = True


class NotificationSettings(BaseModel):
    backend: Literal["dialog", "console"] = Field(default_factory=_default_notifier)


class LoggingSettings(BaseModel):
    directory: str | None = None
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class Settings(BaseModel):
    source: SourceSettings = Field(default_factory=SourceSettings)
    export: ExportSettings = Field(default_factory=ExportSettings)
    notifications: NotificationSettings = Field(default_factory=NotificationSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def load_settings(path: str | Path = 'config.yaml') -> Settings:
    """
    Load settings from a YAML file.

    A missing file, or missing keys, fall back to the defaults. Raises
    pydantic.ValidationError on invalid values.
    """
    path = Path(path).expanduser()
    if not path.exists():
        return Settings()

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    return Settings.model_validate(data)
