"""checksum: compute and verify file digests (MD5/SHA1/SHA256/SHA512)."""

__version__ = "0.1.0"
