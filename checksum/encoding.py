"""Text renderings of raw digests: uppercase hex (default) or base64."""
from __future__ import annotations

import base64
import binascii
from typing import Optional

from .config import OUTPUT_B64


def _is_b64(output_type: Optional[str]) -> bool:
    return bool(output_type) and output_type.strip().lower() == OUTPUT_B64


def encode_digest(raw: bytes, output_type: Optional[str] = None) -> str:
    if _is_b64(output_type):
        return base64.b64encode(raw).decode("ascii")
    return raw.hex().upper()


def decode_digest(text: str, output_type: Optional[str] = None) -> bytes:
    if _is_b64(output_type):
        return base64.b64decode(text, validate=True)
    return binascii.unhexlify(text)
