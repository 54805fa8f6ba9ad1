"""Amount commitments — bind an owner to a secret amount with a salt.

Canonical encoding (version 1). Every field is fixed-width or
length-prefixed, so no two distinct ``(owner, amount, salt)`` tuples
serialize to the same bytes::

    DOMAIN_TAG
    || u32_be(len(owner_utf8)) || owner_utf8
    || i128_be(amount)                       (16 bytes, two's complement)
    || u32_be(len(salt))       || salt

The commitment is ``SHA-256`` of that blob. Clients in any language can
reproduce it from this description.

INVARIANT: Verification never raises. A mismatch of any kind is ``False``.
"""

from __future__ import annotations

import hmac
import struct

from quickex.domain.hashing import DIGEST_SIZE, sha256_digest

DOMAIN_TAG = b"QUICKEX:AMOUNT_COMMITMENT:V1"

AMOUNT_BYTES = 16
AMOUNT_MIN = -(2**127)
AMOUNT_MAX = 2**127 - 1

_MAX_FIELD_LENGTH = 0xFFFFFFFF


def _length_prefixed(field: bytes) -> bytes:
    if len(field) > _MAX_FIELD_LENGTH:
        msg = "Field too long for a u32 length prefix"
        raise ValueError(msg)
    return struct.pack(">I", len(field)) + field


def encode_amount(amount: int) -> bytes:
    """Encode *amount* as a 16-byte big-endian two's complement integer.

    Raises:
        ValueError: If *amount* is outside the signed 128-bit range.
    """
    if isinstance(amount, bool) or not AMOUNT_MIN <= amount <= AMOUNT_MAX:
        msg = f"Amount out of signed 128-bit range: {amount!r}"
        raise ValueError(msg)
    return amount.to_bytes(AMOUNT_BYTES, "big", signed=True)


def encode_commitment_payload(owner: str, amount: int, salt: bytes) -> bytes:
    """Build the canonical byte encoding of ``(owner, amount, salt)``."""
    return (
        DOMAIN_TAG
        + _length_prefixed(owner.encode("utf-8"))
        + encode_amount(amount)
        + _length_prefixed(bytes(salt))
    )


def create_amount_commitment(owner: str, amount: int, salt: bytes) -> bytes:
    """Return the 32-byte commitment to *amount* held by *owner*, salted by *salt*.

    Raises:
        ValueError: If *amount* is outside the signed 128-bit range.
    """
    return sha256_digest(encode_commitment_payload(owner, amount, salt))


def verify_amount_commitment(commitment: bytes, owner: str, amount: int, salt: bytes) -> bool:
    """Check that *commitment* was created from exactly ``(owner, amount, salt)``."""
    if len(commitment) != DIGEST_SIZE:
        return False
    try:
        expected = create_amount_commitment(owner, amount, salt)
    except ValueError:
        return False
    return hmac.compare_digest(expected, bytes(commitment))
