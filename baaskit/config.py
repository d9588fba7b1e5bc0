# Client configuration: environment (optionally from a .env file) or a
# YAML/JSON settings file.

from __future__ import annotations
import json, logging, os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from dotenv import load_dotenv

log = logging.getLogger("baaskit.config")

DEFAULT_BASE_URL = "http://localhost:9000"
DEFAULT_APP_CODE = "1234567890"
DEFAULT_TIMEOUT = 10.0
DEFAULT_RECORDS_PER_PAGE = 20


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    app_code: str = DEFAULT_APP_CODE
    timeout: float = DEFAULT_TIMEOUT
    default_records_per_page: int = DEFAULT_RECORDS_PER_PAGE

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Read BAASBOX_* variables, after loading a .env file if there is one."""
        load_dotenv()
        return cls(
            base_url=os.getenv("BAASBOX_BASE_URL", DEFAULT_BASE_URL),
            app_code=os.getenv("BAASBOX_APP_CODE", DEFAULT_APP_CODE),
            timeout=float(os.getenv("BAASBOX_TIMEOUT", str(DEFAULT_TIMEOUT))),
            default_records_per_page=int(
                os.getenv("BAASBOX_RECORDS_PER_PAGE", str(DEFAULT_RECORDS_PER_PAGE))
            ),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClientConfig":
        return cls(
            base_url=str(data.get("baseUrl", DEFAULT_BASE_URL)),
            app_code=str(data.get("appCode", DEFAULT_APP_CODE)),
            timeout=float(data.get("timeout", DEFAULT_TIMEOUT)),
            default_records_per_page=int(
                data.get("recordsPerPage", DEFAULT_RECORDS_PER_PAGE)
            ),
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ClientConfig":
        path = Path(path)
        if not path.exists():
            raise RuntimeError(f"Config file not found: {path}")
        with path.open("r", encoding="utf-8") as f:
            if path.suffix.lower() in (".yaml", ".yml"):
                cfg = yaml.safe_load(f) or {}
            else:
                cfg = json.load(f)
        if not isinstance(cfg, dict):
            raise RuntimeError(f"Bad config in {path}: expected a mapping")
        log.debug("Loaded client config from %s", path)
        return cls.from_dict(cfg)


__all__ = ["ClientConfig"]
