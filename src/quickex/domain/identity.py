"""Account identities.

Identities are opaque account references. The module never interprets
them beyond validation: two identities are the same account only when
their strings are exactly equal.

Generated identities follow the Stellar strkey shape (``G`` + 55 base32
characters) so that they read like real account addresses in tests and
local tooling.
"""

from __future__ import annotations

import base64
import re
import secrets

MAX_IDENTITY_LENGTH = 256

_WHITESPACE = re.compile(r"\s")


def validate_identity(raw: str) -> str:
    """Return *raw* unchanged if it is a usable identity.

    Raises:
        ValueError: If *raw* is empty, contains whitespace, or is too long.
    """
    if not raw:
        msg = "Identity must not be empty"
        raise ValueError(msg)
    if _WHITESPACE.search(raw):
        msg = f"Identity must not contain whitespace: {raw!r}"
        raise ValueError(msg)
    if len(raw) > MAX_IDENTITY_LENGTH:
        msg = f"Identity exceeds {MAX_IDENTITY_LENGTH} characters"
        raise ValueError(msg)
    return raw


def generate_identity(prefix: str = "G") -> str:
    """Generate a random account-style identity (``G`` + 55 base32 chars)."""
    body = base64.b32encode(secrets.token_bytes(35)).decode("ascii")
    return f"{prefix}{body[:55]}"
