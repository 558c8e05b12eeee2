import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

LOG_FORMATS = ("text", "json")
TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    reload: bool = False
    log_level: str = "INFO"
    log_format: str = "text"


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"RECEIPT_PROCESSOR_PORT must be an integer, got {raw!r}")
    if not 1 <= port <= 65535:
        raise ValueError(f"RECEIPT_PROCESSOR_PORT must be between 1 and 65535, got {port}")
    return port


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def load_settings(environ=None) -> Settings:
    env = os.environ if environ is None else environ

    log_format = env.get("LOG_FORMAT", "text").lower()
    if log_format not in LOG_FORMATS:
        raise ValueError(f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got {log_format!r}")

    return Settings(
        host=env.get("RECEIPT_PROCESSOR_HOST", "0.0.0.0"),
        port=_parse_port(env.get("RECEIPT_PROCESSOR_PORT", "8080")),
        reload=_parse_bool("RECEIPT_PROCESSOR_RELOAD", env.get("RECEIPT_PROCESSOR_RELOAD", "false")),
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
        log_format=log_format,
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
