"""checksum CLI."""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence, TextIO

from pydantic import ValidationError

from .config import Configuration
from .core.errors import UsageError
from .core.verify import EXIT_USAGE, Status, run
from .telemetry.logging import get_logger


_BANNER = """\
checksum - File CheckSum Validator - Apache v2
checksum checks a file and returns a check sum for md5, sha1, sha256 and sha512.
To use checksum you would simply provide a file path and it will return the sum for the file.
  Example: checksum -f="a/relative/path"
  Example: checksum "a/relative/path" -t=sha256
You can also check against an existing signature.
To validate against an existing signature (hash) you would simply provide
 the file and the expected signature. When checking a signature, if the
 signature is valid it exits with 0, otherwise it exits with a non-zero exit code.
  Example: checksum -f="/path/to/somefile.exe" -c="thehash"
  Example: checksum "/path/to/somefile.exe" -c="thehash" -t=sha256
"""


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message: str):  # type: ignore[override]
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(
        prog="checksum",
        usage="checksum [-t=sha1|sha256|sha512|md5] [-c=signature] [-o=hex|b64] [-f=]filepath",
        description=_BANNER,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    p.add_argument("-?", "-h", "--help", dest="help", action="store_true", help="Prints out the options.")
    p.add_argument(
        "-f",
        "--file",
        dest="file_path",
        metavar="PATH",
        default=None,
        help="REQUIRED: the file to hash. The file should exist. "
        "The -f/--file prefix is optional.",
    )
    p.add_argument(
        "-t",
        "--type",
        "--hashtype",
        dest="hash_type",
        metavar="TYPE",
        default=None,
        help="Optional: 'md5', 'sha1', 'sha256' or 'sha512'. Defaults to 'md5' "
        "or is determined by the length of the check value.",
    )
    p.add_argument(
        "-c",
        "--check",
        dest="expected_hash",
        metavar="HASH",
        default=None,
        help="Optional: the signature to check against. Not case sensitive.",
    )
    p.add_argument(
        "-o",
        "--output",
        dest="output_type",
        metavar="FORMAT",
        default=None,
        help="Optional: output type - 'b64' for base64, 'hex' for hexadecimal (default).",
    )
    p.add_argument("paths", nargs="*", help=argparse.SUPPRESS)
    return p


def parse_args(argv: Optional[Sequence[str]] = None) -> Configuration:
    """Parse ``argv`` into a Configuration or raise UsageError."""
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)
    if args.help:
        raise UsageError("help requested", help_requested=True)

    file_path = args.file_path
    if not (file_path and file_path.strip()) and args.paths:
        file_path = args.paths[0]
    if not (file_path and file_path.strip()):
        raise UsageError("no file given")

    try:
        config = Configuration(
            file_path=file_path,
            hash_type=args.hash_type,
            expected_hash=args.expected_hash,
            output_type=args.output_type,
        )
    except ValidationError as e:
        raise UsageError(str(e)) from e
    get_logger(__name__).debug(
        "file_path=%r hash_type=%r expected_hash=%r output_type=%r",
        config.file_path,
        config.hash_type,
        config.expected_hash,
        config.output_type,
    )
    return config


def show_help(out: TextIO | None = None) -> int:
    out = out or sys.stdout
    build_parser().print_help(out)
    return EXIT_USAGE


def main(argv: List[str] | None = None) -> int:
    try:
        config = parse_args(argv)
    except UsageError as e:
        if not e.help_requested:
            get_logger(__name__).debug("usage error: %s", e)
        return show_help()

    outcome = run(config)
    if outcome.status is Status.IO_ERROR:
        print(outcome.message, file=sys.stderr)
    else:
        print(outcome.message)
    return outcome.exit_code


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
