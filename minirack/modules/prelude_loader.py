from __future__ import annotations
from pathlib import Path
from typing import Optional, Protocol

from minirack.config import get_prelude_roots


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


PRELUDE_FILE = 'core.rkt'


def resolve_prelude() -> Optional[Path]:
    for root in get_prelude_roots():
        candidate = root / PRELUDE_FILE
        if candidate.is_file():
            return candidate
    return None


def load_prelude(itp: _HasEvalPrelude) -> None:
    path = resolve_prelude()
    if path is None:
        raise FileNotFoundError(f"Cannot find '{PRELUDE_FILE}' in MINIRACK_PRELUDE_PATH")
    itp.eval_prelude(path.read_text(encoding='utf-8'))
