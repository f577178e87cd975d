from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, Dict

from .errors import ToastConfigError
from .models import DEFAULT_STYLE, ToastStyle

LOGGER = logging.getLogger(__name__)

PREFS_FILE = "toast_prefs.json"
STYLE_KEY = "style"


def prefs_path(base_dir: str) -> str:
    return os.path.join(base_dir, PREFS_FILE)


def load_prefs(base_dir: str) -> Dict[str, Any]:
    path = prefs_path(base_dir)
    if not os.path.exists(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        LOGGER.warning("Não foi possível ler %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_prefs(base_dir: str, data: Dict[str, Any]) -> None:
    path = prefs_path(base_dir)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data or {}, f, ensure_ascii=False, indent=2)


def load_style(base_dir: str) -> ToastStyle:
    prefs = load_prefs(base_dir)
    try:
        return ToastStyle.from_dict(prefs.get(STYLE_KEY))
    except ToastConfigError as exc:
        LOGGER.warning("Estilo de toast inválido em %s: %s", prefs_path(base_dir), exc)
        return DEFAULT_STYLE


def save_style(base_dir: str, style: ToastStyle) -> None:
    prefs = load_prefs(base_dir)
    prefs[STYLE_KEY] = style.to_dict()
    save_prefs(base_dir, prefs)


PREFS_DIR_ENV = "TOAST_PREFS_DIR"


def resolve_prefs_root(executable_path: str | None = None) -> str | None:
    """Directory holding ``toast_prefs.json``: $TOAST_PREFS_DIR or next to the executable.

    Returns ``None`` when the directory is missing and cannot be created.
    """
    root = os.environ.get(PREFS_DIR_ENV) or os.path.dirname(
        os.path.abspath(executable_path or sys.argv[0])
    )
    try:
        os.makedirs(root, exist_ok=True)
    except OSError as exc:
        LOGGER.warning("Diretório de preferências indisponível (%s): %s", root, exc)
        return None
    return root
