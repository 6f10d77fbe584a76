from __future__ import annotations

import logging

import pytest

from checksum.core.algorithms import HashType, infer_hash_type, resolve_hash_type


@pytest.mark.parametrize(
    "length, expected",
    [(32, HashType.MD5), (40, HashType.SHA1), (64, HashType.SHA256), (128, HashType.SHA512)],
)
def test_infer_from_length(length: int, expected: HashType) -> None:
    assert infer_hash_type("a" * length) is expected
    assert resolve_hash_type(None, "a" * length) is expected


def test_other_lengths_default_to_md5() -> None:
    for n in (0, 1, 24, 31, 33, 44, 88, 127, 129):
        assert resolve_hash_type(None, "f" * n) is HashType.MD5
    assert infer_hash_type("f" * 24) is None
    assert resolve_hash_type(None, None) is HashType.MD5


def test_explicit_type_wins_over_length() -> None:
    # 32 chars would infer MD5
    assert resolve_hash_type("sha512", "0" * 32) is HashType.SHA512
    assert resolve_hash_type("SHA1", None) is HashType.SHA1
    assert resolve_hash_type("  Sha256 ", None) is HashType.SHA256


def test_unknown_explicit_type_falls_back_to_md5() -> None:
    assert resolve_hash_type("crc32", "0" * 64) is HashType.MD5


def test_digest_sizes() -> None:
    assert [h.digest_size for h in HashType] == [16, 20, 32, 64]
    assert [h.hex_length for h in HashType] == [32, 40, 64, 128]
    assert HashType.from_name("md5") is HashType.MD5
    assert HashType.from_name("whirlpool") is None


def test_unknown_explicit_type_logs_warning(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="checksum"):
        assert resolve_hash_type("crc32", None) is HashType.MD5
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "crc32" in warnings[0].getMessage()
    assert "md5" in warnings[0].getMessage()


def test_known_type_does_not_warn(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="checksum"):
        resolve_hash_type("sha256", None)
    assert not caplog.records
