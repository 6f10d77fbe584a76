from __future__ import annotations

import pytest
from pydantic import ValidationError

from checksum.config import Configuration


def test_strips_quotes_and_whitespace() -> None:
    c = Configuration(file_path=' "some file.txt" ', hash_type=" sha1 ")
    assert c.file_path == "some file.txt"
    assert c.hash_type == "sha1"
    c = Configuration(file_path="'x.bin'")
    assert c.file_path == "x.bin"


def test_blank_values_are_absent() -> None:
    c = Configuration(file_path="f", hash_type="  ", expected_hash="", output_type=None)
    assert c.hash_type is None
    assert c.expected_hash is None
    assert c.output_type == "hex"
    assert c.checking is False


def test_empty_path_rejected() -> None:
    with pytest.raises(ValidationError):
        Configuration(file_path="''")


def test_frozen() -> None:
    c = Configuration(file_path="f", expected_hash="abc")
    assert c.checking is True
    with pytest.raises(ValidationError):
        c.file_path = "g"  # type: ignore[misc]
