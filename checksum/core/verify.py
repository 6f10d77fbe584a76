"""Compute-or-check pipeline.

`run` never prints and never exits; it returns an `Outcome` that the CLI
maps to output text and a process exit code.
"""
from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Optional

from ..config import Configuration
from ..digest import file_digest
from ..encoding import encode_digest
from ..telemetry.logging import get_logger
from .algorithms import HashType, resolve_hash_type


EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = -1


class Status(enum.Enum):
    COMPUTED = "computed"
    MATCH = "match"
    MISMATCH = "mismatch"
    FILE_MISSING = "file_missing"
    IO_ERROR = "io_error"


@dataclass(frozen=True)
class Outcome:
    status: Status
    path: str
    message: str
    digest: Optional[str] = None
    hash_type: Optional[HashType] = None

    @property
    def ok(self) -> bool:
        return self.status in (Status.COMPUTED, Status.MATCH)

    @property
    def exit_code(self) -> int:
        return EXIT_OK if self.ok else EXIT_FAILURE


def digests_match(expected: str, actual: str) -> bool:
    """Ordinal comparison that ignores letter case."""
    return expected.upper() == actual.upper()


def run(config: Configuration) -> Outcome:
    path = os.path.abspath(config.file_path)
    log = get_logger(__name__, {"file": path})
    if not os.path.isfile(path):
        return Outcome(Status.FILE_MISSING, path, f"File '{path}' doesn't exist.")

    hash_type = resolve_hash_type(config.hash_type, config.expected_hash)
    log.debug("using %s, output=%s", hash_type.algo, config.output_type)
    try:
        raw = file_digest(path, hash_type)
    except OSError as e:
        return Outcome(Status.IO_ERROR, path, f"Error reading '{path}': {e}", hash_type=hash_type)
    digest = encode_digest(raw, config.output_type)

    if not config.checking:
        return Outcome(Status.COMPUTED, path, digest, digest=digest, hash_type=hash_type)
    if digests_match(config.expected_hash or "", digest):
        return Outcome(Status.MATCH, path, "Hashes match.", digest=digest, hash_type=hash_type)
    return Outcome(
        Status.MISMATCH,
        path,
        f"Error - hashes do not match. Actual value was '{digest}'.",
        digest=digest,
        hash_type=hash_type,
    )
