# config.py
# Settings for the stock filter: .env -> environment, then config.yaml, then defaults.
# Environment wins over config.yaml; config.yaml wins over the defaults below.

import logging
import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables from .env file at startup
load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent.parent
CONFIG_PATH = BASE_DIR / "config.yaml"

DEFAULT_CONFIG = {
    "data_source": "sample",
    "api_url": "http://localhost:8000/api/stocks",
    "request_timeout_seconds": 8,
    "log_level": "INFO",
}

ENV_KEYS = {
    "data_source": "STOCKS_DATA_SOURCE",
    "api_url": "STOCKS_API_URL",
    "request_timeout_seconds": "STOCKS_REQUEST_TIMEOUT",
    "log_level": "LOG_LEVEL",
}


class Settings(BaseModel):
    data_source: Literal["sample", "remote"] = Field("sample", description="Where records come from")
    api_url: str = Field(DEFAULT_CONFIG["api_url"], description="Remote /api/stocks endpoint")
    request_timeout_seconds: float = Field(8, gt=0, description="Timeout for the remote fetch")
    log_level: str = Field("INFO", description="Root logging level")


def _read_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    with open(path, "r") as f:
        data = yaml.safe_load(f)
    return data or {}


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """Build Settings from defaults, config.yaml and the environment (in that order)."""
    path = Path(config_path or os.getenv("CONFIG_PATH") or CONFIG_PATH)
    config = dict(DEFAULT_CONFIG)
    config.update({k: v for k, v in _read_yaml(path).items() if k in DEFAULT_CONFIG})
    for key, env_name in ENV_KEYS.items():
        value = os.getenv(env_name, "").strip()
        if value:
            config[key] = value
    return Settings(**config)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
