from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()

DEFAULT_MAX_NODES = 5000
DEFAULT_MAX_EDGES = 20000


@dataclass(frozen=True)
class Settings:
    max_nodes: int = DEFAULT_MAX_NODES
    max_edges: int = DEFAULT_MAX_EDGES
    workflow_document: Optional[str] = None
    log_level: str = "INFO"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not an integer, using {default}")
        return default
    if value <= 0:
        logger.warning(f"{name}={value} must be positive, using {default}")
        return default
    return value


def _log_level_env(name: str, default: str) -> str:
    raw = (os.getenv(name) or default).upper()
    if not isinstance(logging.getLevelName(raw), int):
        logger.warning(f"{name}={raw!r} is not a logging level, using {default}")
        return default
    return raw


def load_settings() -> Settings:
    """Read settings from the environment (and a .env file, if present)"""
    return Settings(
        max_nodes=_int_env("WORKFLOW_MAX_NODES", DEFAULT_MAX_NODES),
        max_edges=_int_env("WORKFLOW_MAX_EDGES", DEFAULT_MAX_EDGES),
        workflow_document=os.getenv("WORKFLOW_DOCUMENT") or None,
        log_level=_log_level_env("WORKFLOW_LOG_LEVEL", "INFO"),
    )
