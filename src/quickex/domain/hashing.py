"""Hash utility — deterministic SHA-256 digests over byte sequences."""

from __future__ import annotations

import hashlib

DIGEST_SIZE = 32


def sha256_digest(data: bytes) -> bytes:
    """Return the 32-byte SHA-256 digest of *data*."""
    return hashlib.sha256(data).digest()
