import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

# Load environment variables if present
load_dotenv()

VALID_CHART_TYPES = ("bar", "line", "pie", "scatter")


@dataclass(frozen=True)
class Settings:
    log_level: str
    default_chart_type: str
    preview_rows: int


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return max(int(raw), 0)
    except ValueError:
        logging.getLogger(__name__).warning("Ignoring non-integer %s=%r", name, raw)
        return default


def _log_level(raw: Optional[str], default: str = "WARNING") -> str:
    level = (raw or default).strip().upper()
    # getLevelName maps known names to their numeric level
    if not isinstance(logging.getLevelName(level), int):
        logging.getLogger(__name__).warning("Ignoring unknown log level %r", raw)
        return default
    return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Read settings from the environment once per process."""
    chart_type = os.getenv("CHARTNEXUS_DEFAULT_CHART_TYPE", "bar").strip().lower()
    if chart_type not in VALID_CHART_TYPES:
        chart_type = "bar"
    return Settings(
        log_level=_log_level(os.getenv("CHARTNEXUS_LOG_LEVEL")),
        default_chart_type=chart_type,
        preview_rows=_int_env("CHARTNEXUS_PREVIEW_ROWS", 10),
    )


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(_log_level(level, get_settings().log_level))
