"""Configuration for checksum.

`Configuration` is built once from the command line and passed read-only
to every later stage.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


@dataclass(slots=True)
class HashAlgo:
    name: str = "md5"
    block_size: int = 1024 * 1024


DEFAULT_HASH = HashAlgo()

OUTPUT_HEX = "hex"
OUTPUT_B64 = "b64"

_QUOTES_AND_SPACE = " \t\r\n'\""


class Configuration(BaseModel):
    file_path: str
    hash_type: Optional[str] = None
    expected_hash: Optional[str] = None
    output_type: str = OUTPUT_HEX

    model_config = ConfigDict(frozen=True)

    @field_validator("file_path")
    @classmethod
    def _clean_path(cls, value: str) -> str:
        cleaned = value.strip(_QUOTES_AND_SPACE)
        if not cleaned:
            raise ValueError("file path is empty")
        return cleaned

    @field_validator("hash_type", "expected_hash")
    @classmethod
    def _blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value.strip()

    @field_validator("output_type", mode="before")
    @classmethod
    def _default_output(cls, value: Optional[str]) -> str:
        if value is None or not str(value).strip():
            return OUTPUT_HEX
        return str(value).strip()

    @property
    def checking(self) -> bool:
        """True when an expected hash was given (check mode)."""
        return self.expected_hash is not None
