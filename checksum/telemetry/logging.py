"""Diagnostic logging for checksum.

Everything hangs off the ``checksum`` logger, which writes to stderr so
stdout carries only the digest or the verdict.

Environment variables:
- CHECKSUM_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default WARNING)
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict, MutableMapping, Optional, Tuple

ROOT_LOGGER = "checksum"
LEVEL_ENV = "CHECKSUM_LOG_LEVEL"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def _level_from_env() -> int:
    lvl = logging.getLevelName(os.getenv(LEVEL_ENV, "WARNING").strip().upper())
    return lvl if isinstance(lvl, int) else logging.WARNING


def _install_handler() -> None:
    global _handler
    if _handler is not None:
        return
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(_FORMAT))
    root = logging.getLogger(ROOT_LOGGER)
    root.addHandler(_handler)
    root.setLevel(_level_from_env())


class _ContextAdapter(logging.LoggerAdapter):
    """Prefixes messages with ``[key=value ...]`` from the adapter's extra."""

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        if not self.extra:
            return msg, kwargs
        ctx = " ".join(f"{k}={v}" for k, v in self.extra.items())
        return f"[{ctx}] {msg}", kwargs


def get_logger(name: str, context: Optional[Dict[str, object]] = None) -> logging.LoggerAdapter:
    _install_handler()
    return _ContextAdapter(logging.getLogger(name), dict(context or {}))
