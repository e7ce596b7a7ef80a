import json
import logging
import logging.handlers
import os
import sys
from typing import Any, Dict, List, Optional, Union

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

BASE = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# ---------------- Logging ----------------

LOG_FORMAT = '{"ts":"%(asctime)s","level":"%(levelname)s","step":"%(name)s","msg":"%(message)s"}'
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_logger(name="multiavatar", log_file=None, level=None):
    """
    Configure and return a package logger.

    Modules log through ``logging.getLogger(__name__)`` and propagate here, so
    only the top-level ``multiavatar`` logger carries handlers.
    """
    logger = logging.getLogger(name)
    if level:
        logger.setLevel(level.upper() if isinstance(level, str) else level)
    fmt = logging.Formatter(LOG_FORMAT)
    if not logger.handlers:
        if not level:
            env_level = os.getenv("MULTIAVATAR_LOG_LEVEL", "WARNING").upper()
            logger.setLevel(env_level if env_level in LOG_LEVELS else "WARNING")
        # stdout carries the SVG documents written by the command line
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(fmt)
        logger.addHandler(sh)
        logger.propagate = False
    if log_file and not any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
    ):
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(log_file, maxBytes=5_000_000, backupCount=5)
        fh.setFormatter(fmt)
        logger.addHandler(fh)
    return logger


log = get_logger("multiavatar")

# ---------------- Config Models ----------------


class LoggingCfg(BaseModel):
    level: str = "WARNING"
    file: Optional[str] = None

    @field_validator("level")
    @classmethod
    def validate_level(cls, v):
        v = str(v).strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return v


class CatalogCfg(BaseModel):
    # None means the catalog bundled with the package
    path: Optional[str] = None


class DefaultsCfg(BaseModel):
    """Options the command line applies before any explicit flag."""

    transparent: bool = False
    theme: Optional[str] = None
    gender: Optional[str] = None
    colors: Dict[str, Union[List[str], str]] = Field(default_factory=dict)


class AvatarSettings(BaseModel):
    logging: LoggingCfg = Field(default_factory=LoggingCfg)
    catalog: CatalogCfg = Field(default_factory=CatalogCfg)
    defaults: DefaultsCfg = Field(default_factory=DefaultsCfg)


def load_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML at {path} must be a mapping/object.")
    return data


def _deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(a)
    for k, v in (b or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _env_overlay() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    if os.getenv("MULTIAVATAR_LOG_LEVEL"):
        out.setdefault("logging", {})["level"] = os.getenv("MULTIAVATAR_LOG_LEVEL")
    if os.getenv("MULTIAVATAR_LOG_FILE"):
        out.setdefault("logging", {})["file"] = os.getenv("MULTIAVATAR_LOG_FILE")
    if os.getenv("MULTIAVATAR_CATALOG"):
        out.setdefault("catalog", {})["path"] = os.getenv("MULTIAVATAR_CATALOG")
    if os.getenv("MULTIAVATAR_THEME"):
        out.setdefault("defaults", {})["theme"] = os.getenv("MULTIAVATAR_THEME")
    if os.getenv("MULTIAVATAR_GENDER"):
        out.setdefault("defaults", {})["gender"] = os.getenv("MULTIAVATAR_GENDER")
    return out


def _default_config_path() -> Optional[str]:
    for name in ("avatar.yaml", "avatar.example.yaml"):
        path = os.path.join(BASE, "conf", name)
        if os.path.exists(path):
            return path
    return None


def load_env() -> dict:
    load_dotenv(os.path.join(BASE, ".env"))
    return {k: v for k, v in os.environ.items() if k.startswith("MULTIAVATAR_")}


def load_config(path: Optional[str] = None) -> AvatarSettings:
    """
    Load settings with precedence (low -> high):
      1) Defaults baked into the models
      2) conf/avatar.yaml (or conf/avatar.example.yaml), or the explicit path
      3) Environment variables (a .env file at the repo root is honoured)
    """
    if path is not None and not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found: {path}")
    path = path or _default_config_path()
    raw = load_yaml(path) if path else {}

    load_env()
    raw = _deep_merge(raw, _env_overlay())

    try:
        cfg = AvatarSettings(**raw)
    except ValidationError as e:
        log.error(f"Config validation failed: {e}")
        raise

    get_logger("multiavatar", log_file=cfg.logging.file, level=cfg.logging.level)
    log.debug(f"Loaded settings from {path or 'defaults'}: {json.dumps(cfg.model_dump())}")
    return cfg
