# survey_api/config.py
"""
Runtime settings, read from environment variables.
"""
import os
from dataclasses import dataclass, field
from typing import List


def _split_origins(value: str) -> List[str]:
    return [o.strip() for o in value.split(",") if o.strip()]


@dataclass
class Settings:
    data_dir: str = field(default_factory=lambda: os.getenv("SURVEY_DATA_DIR", "data"))
    survey_file: str = field(default_factory=lambda: os.getenv("SURVEY_FILE", "survey.json"))
    cors_origins: List[str] = field(
        default_factory=lambda: _split_origins(os.getenv("CORS_ORIGINS", "http://localhost:5173"))
    )
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))
