from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Resolve installation dir (minirack package directory)
_MINIRACK_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _MINIRACK_DIR / 'prelude'
_DEFAULT_REPL_HOST = '127.0.0.1'
_DEFAULT_REPL_PORT = 8765
_TRUTHY = {'1', 'true', 'yes', 'on'}


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_prelude_roots() -> List[Path]:
    """Directories searched, in order, for the prelude file."""
    return paths_from_env('MINIRACK_PRELUDE_PATH', [_DEFAULT_PRELUDE_DIR])


def debugging_enabled() -> bool:
    return os.environ.get('MINIRACK_DEBUG', '').strip().lower() in _TRUTHY


def get_repl_address() -> tuple[str, int]:
    host = os.environ.get('MINIRACK_REPL_HOST') or _DEFAULT_REPL_HOST
    port = os.environ.get('MINIRACK_REPL_PORT')
    return host, int(port) if port else _DEFAULT_REPL_PORT
