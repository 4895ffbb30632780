import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

TIKWM_API_URL = "https://www.tikwm.com/api/"
DEFAULT_API_BASE_URL = "http://127.0.0.1:8000/api/download"
SERVER_VARIANTS = ("fastapi", "worker")

logger = logging.getLogger("tikdl")


@dataclass
class Settings:
    tikwm_api_url: str = TIKWM_API_URL
    server_host: str = "0.0.0.0"
    server_port: int = 8000
    server_variant: str = "fastapi"
    log_level: str = "INFO"
    telegram_bot_token: str = ""
    downloader_api_base_url: str = DEFAULT_API_BASE_URL
    http_connect_timeout: int = 10
    http_read_timeout: int = 60
    http_total_timeout: int = 120


def getenv_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except (TypeError, ValueError):
        return default


def _load_yaml_config(path: Path) -> Dict[str, Any]:
    """Read endpoint and server overrides from config.yml if present.

    Returns a flat dict keyed by Settings field names. A file that fails to
    parse is ignored so env-only deployments keep working.
    """
    out: Dict[str, Any] = {}
    if not path.exists():
        return out
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("config_yaml_ignored path=%s error=%s", path, e)
        return out
    if not isinstance(data, dict):
        return out

    endpoints = data.get("endpoints") or {}
    if isinstance(endpoints, dict):
        if isinstance(endpoints.get("tikwm"), str) and endpoints["tikwm"]:
            out["tikwm_api_url"] = endpoints["tikwm"]
        if isinstance(endpoints.get("api"), str) and endpoints["api"]:
            out["downloader_api_base_url"] = endpoints["api"]

    server = data.get("server") or {}
    if isinstance(server, dict):
        if isinstance(server.get("host"), str) and server["host"]:
            out["server_host"] = server["host"]
        try:
            if server.get("port") is not None:
                out["server_port"] = int(server["port"])
        except (TypeError, ValueError):
            pass
        variant = server.get("variant")
        if isinstance(variant, str) and variant.lower() in SERVER_VARIANTS:
            out["server_variant"] = variant.lower()
    return out


def load_settings(config_path: str | Path = "config.yml") -> Settings:
    defaults = Settings()
    file_cfg = _load_yaml_config(Path(config_path))

    def pick(field_name: str, env_name: str) -> str:
        return os.getenv(env_name) or file_cfg.get(field_name) or getattr(defaults, field_name)

    variant = pick("server_variant", "SERVER_VARIANT").lower()
    if variant not in SERVER_VARIANTS:
        variant = defaults.server_variant

    return Settings(
        tikwm_api_url=pick("tikwm_api_url", "TIKWM_API_URL"),
        server_host=pick("server_host", "SERVER_HOST"),
        server_port=getenv_int("SERVER_PORT", file_cfg.get("server_port", defaults.server_port)),
        server_variant=variant,
        log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper(),
        telegram_bot_token=os.getenv("TELEGRAM_BOT_TOKEN", ""),
        downloader_api_base_url=pick("downloader_api_base_url", "DOWNLOADER_API_BASE_URL"),
        http_connect_timeout=getenv_int("HTTP_CONNECT_TIMEOUT", defaults.http_connect_timeout),
        http_read_timeout=getenv_int("HTTP_READ_TIMEOUT", defaults.http_read_timeout),
        http_total_timeout=getenv_int("HTTP_TOTAL_TIMEOUT", defaults.http_total_timeout),
    )
