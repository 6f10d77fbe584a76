"""Streaming file digests."""
from __future__ import annotations

import hashlib
import os
from pathlib import Path

from .config import DEFAULT_HASH
from .core.algorithms import HashType
from .telemetry.logging import get_logger
from .telemetry.metrics import Timer


def file_digest(
    path: os.PathLike[str] | str,
    hash_type: HashType,
    block_size: int = DEFAULT_HASH.block_size,
) -> bytes:
    """Return the raw digest of ``path``.

    The file is read in ``block_size`` chunks so memory stays flat for any
    file size. Plain ``open`` takes no lock, so other readers and writers
    are not blocked. Read errors propagate.
    """
    h = hashlib.new(hash_type.algo)
    with Timer(hash_type.algo) as t:
        with Path(path).open("rb") as f:
            for chunk in iter(lambda: f.read(block_size), b""):
                h.update(chunk)
                t.count(len(chunk))
    get_logger(__name__, {"algo": hash_type.algo}).debug(
        "hashed %d bytes of %s in %.2f ms (%.1f MiB/s)", t.nbytes, path, t.elapsed_ms, t.mib_per_s
    )
    return h.digest()
