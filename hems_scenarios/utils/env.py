# hems_scenarios/utils/env.py
from __future__ import annotations
import os
from pathlib import Path

from dotenv import load_dotenv

from hems_scenarios.utils.constants import DEFAULT_APPLIANCES_PATH, DEFAULT_LOG_LEVEL


def load_env() -> None:
    dotenv_path = _find_env_file()
    if dotenv_path:
        load_dotenv(dotenv_path=str(dotenv_path), override=False)
    else:
        load_dotenv(override=False)


def _find_env_file() -> Path | None:
    candidates = []
    here = Path(__file__).resolve()
    package_dir = here.parent.parent
    root = package_dir.parent

    candidates.append(root / ".env")
    candidates.append(package_dir / ".env")
    candidates.append(Path.cwd() / ".env")

    for p in candidates:
        if p.exists() and p.is_file():
            return p
    return None


def get_env(key: str, default: str | None = None) -> str | None:
    return os.environ.get(key, default)


def get_appliances_path() -> str:
    return get_env("HEMS_APPLIANCES_FILE") or DEFAULT_APPLIANCES_PATH


def get_log_level() -> str:
    return (get_env("HEMS_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
