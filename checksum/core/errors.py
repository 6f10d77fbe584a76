"""Common exceptions for the checksum tool."""
from __future__ import annotations


class ChecksumError(Exception):
    pass


class UsageError(ChecksumError):
    """Bad or missing arguments, or help was asked for explicitly."""

    def __init__(self, message: str = "", help_requested: bool = False) -> None:
        super().__init__(message)
        self.help_requested = help_requested
