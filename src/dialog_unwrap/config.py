"""Optional YAML configuration for the error dialogs.

Looked up at ``$DIALOG_UNWRAP_CONFIG`` or ``<cwd>/config/dialog_unwrap.yaml``.
A missing or broken file never blocks a dialog: problems are logged and the
defaults are used.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Optional
import logging
import os

import yaml
from jsonschema import Draft202012Validator

from dialog_unwrap.errors import Ok, Err, Result, AppError, ErrorKind

LOG_CONFIG = logging.getLogger("dialog_unwrap.config")

ENV_CONFIG_PATH = "DIALOG_UNWRAP_CONFIG"
ENV_LOCALE = "DIALOG_UNWRAP_LOCALE"
ENV_PRESENTER = "DIALOG_UNWRAP_PRESENTER"

CONFIG_SCHEMA: dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "locale": {"type": "string", "minLength": 1},
        "title": {"type": "string", "minLength": 1},
        "presenter": {"enum": ["qt", "console"]},
        "exit_code": {"type": "integer", "minimum": 1, "maximum": 255},
    },
}


@dataclass(frozen=True)
class DialogConfig:
    locale: str = "en"
    title: Optional[str] = None
    presenter: str = "qt"
    exit_code: int = 1


def default_config_path() -> Path:
    env = os.environ.get(ENV_CONFIG_PATH)
    if env:
        return Path(env)
    return Path.cwd() / "config" / "dialog_unwrap.yaml"


def _read_config_yaml(path: Path) -> Result[dict, AppError]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as ex:
        return Err(AppError(ErrorKind.GENERIC, f"Failed to read config: {path}", str(ex)))
    if not isinstance(data, dict):
        return Err(AppError(ErrorKind.GENERIC, f"Config root must be a mapping: {path}"))
    errors = sorted(Draft202012Validator(CONFIG_SCHEMA).iter_errors(data), key=lambda e: list(e.path))
    if errors:
        detail = "; ".join(e.message for e in errors)
        return Err(AppError(ErrorKind.GENERIC, f"Invalid config: {path}", detail))
    return Ok(data)


def _apply_env(cfg: DialogConfig, environ: Mapping[str, str]) -> DialogConfig:
    overrides: dict[str, Any] = {}
    if environ.get(ENV_LOCALE):
        overrides["locale"] = environ[ENV_LOCALE]
    presenter = environ.get(ENV_PRESENTER)
    if presenter:
        if presenter in CONFIG_SCHEMA["properties"]["presenter"]["enum"]:
            overrides["presenter"] = presenter
        else:
            LOG_CONFIG.warning("Ignoring %s=%r (expected qt or console)", ENV_PRESENTER, presenter)
    return replace(cfg, **overrides) if overrides else cfg


def load_config(path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> DialogConfig:
    """Build a :class:`DialogConfig` from the YAML file and the environment."""
    path = path if path is not None else default_config_path()
    environ = os.environ if environ is None else environ
    cfg = DialogConfig()
    if path.exists():
        res = _read_config_yaml(path)
        if isinstance(res, Ok):
            cfg = DialogConfig(**res.value)
            LOG_CONFIG.debug("Loaded dialog config from %s", path)
        else:
            LOG_CONFIG.warning("Using default dialog config: %s", res.error)
    return _apply_env(cfg, environ)


_CACHED: Optional[DialogConfig] = None


def get_config() -> DialogConfig:
    global _CACHED
    if _CACHED is None:
        try:
            _CACHED = load_config()
        except OSError as ex:
            # unreadable cwd or config location; the dialog must still show
            LOG_CONFIG.warning("Using default dialog config: %s", ex)
            _CACHED = _apply_env(DialogConfig(), os.environ)
    return _CACHED


def reset_config() -> None:
    global _CACHED
    _CACHED = None
