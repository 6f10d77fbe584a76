"""Digest algorithm selection.

An explicit type always wins. Without one, the algorithm is inferred from
the character length of the expected hex digest; everything else lands on
MD5.
"""
from __future__ import annotations

import enum
from typing import Dict, Optional

from ..config import DEFAULT_HASH
from ..telemetry.logging import get_logger


class HashType(enum.Enum):
    MD5 = ("md5", 16)
    SHA1 = ("sha1", 20)
    SHA256 = ("sha256", 32)
    SHA512 = ("sha512", 64)

    def __init__(self, algo: str, digest_size: int) -> None:
        self.algo = algo
        self.digest_size = digest_size

    @property
    def hex_length(self) -> int:
        return self.digest_size * 2

    @classmethod
    def from_name(cls, name: str) -> Optional["HashType"]:
        key = name.strip().lower()
        for member in cls:
            if member.algo == key:
                return member
        return None


DEFAULT_HASH_TYPE = HashType.from_name(DEFAULT_HASH.name) or HashType.MD5

_BY_HEX_LENGTH: Dict[int, HashType] = {h.hex_length: h for h in HashType}


def infer_hash_type(expected_hash: Optional[str]) -> Optional[HashType]:
    """Map an expected digest's length (32/40/64/128) to its algorithm."""
    if not expected_hash:
        return None
    return _BY_HEX_LENGTH.get(len(expected_hash))


def resolve_hash_type(hash_type: Optional[str], expected_hash: Optional[str] = None) -> HashType:
    if hash_type:
        resolved = HashType.from_name(hash_type)
        if resolved is None:
            get_logger(__name__).warning(
                "unknown hash type %r, falling back to %s", hash_type, DEFAULT_HASH_TYPE.algo
            )
            return DEFAULT_HASH_TYPE
        return resolved
    inferred = infer_hash_type(expected_hash)
    if inferred is None:
        return DEFAULT_HASH_TYPE
    return inferred
