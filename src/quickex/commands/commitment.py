"""Command group: amount commitments."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from quickex.commands._base import QxGroup

if TYPE_CHECKING:
    from quickex.commands._context import AppContext


def _salt_options(func: Any) -> Any:
    func = click.option("--salt-hex", default=None, help="Salt as hex bytes.")(func)
    func = click.option("--salt", default=None, help="Salt as UTF-8 text.")(func)
    return func


def _resolve_salt(salt: str | None, salt_hex: str | None) -> bytes:
    """Salt bytes from whichever option was given.

    Raises :class:`click.UsageError` unless exactly one is set, and
    :class:`ValueError` when ``--salt-hex`` is not hex.
    """
    if (salt is None) == (salt_hex is None):
        msg = "Provide exactly one of --salt or --salt-hex"
        raise click.UsageError(msg)
    if salt is not None:
        return salt.encode("utf-8")
    return _from_hex(salt_hex or "", "--salt-hex")


def _from_hex(value: str, label: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError as exc:
        msg = f"{label} is not valid hex: {exc}"
        raise ValueError(msg) from exc


@click.group(
    cls=QxGroup,
    examples="""\
  quickex commitment create GOWNER... 1000000 --salt random_salt
  quickex commitment verify <hex> GOWNER... 1000000 --salt random_salt
  quickex -q commitment create GOWNER... 42 --salt-hex 00ff10""",
)
def commitment() -> None:
    """Create and verify hiding commitments to amounts."""


@commitment.command()
@click.argument("owner")
@click.argument("amount", type=int)
@_salt_options
@click.pass_obj
def create(
    app: AppContext, owner: str, amount: int, salt: str | None, salt_hex: str | None
) -> None:
    """Commit OWNER to AMOUNT. Prints the 32-byte digest as hex."""
    from quickex.services._helpers import invalid_input
    from quickex.services.commitment import CommitmentService

    try:
        salt_bytes = _resolve_salt(salt, salt_hex)
    except ValueError as exc:
        app.emit(invalid_input("create_amount_commitment", str(exc)))
        return
    app.emit(CommitmentService(app.ledger).create_amount_commitment(owner, amount, salt_bytes))


@commitment.command()
@click.argument("digest")
@click.argument("owner")
@click.argument("amount", type=int)
@_salt_options
@click.pass_obj
def verify(
    app: AppContext,
    digest: str,
    owner: str,
    amount: int,
    salt: str | None,
    salt_hex: str | None,
) -> None:
    """Check DIGEST against OWNER, AMOUNT and the salt."""
    from quickex.services._helpers import invalid_input
    from quickex.services.commitment import CommitmentService

    try:
        digest_bytes = _from_hex(digest, "DIGEST")
        salt_bytes = _resolve_salt(salt, salt_hex)
    except ValueError as exc:
        app.emit(invalid_input("verify_amount_commitment", str(exc)))
        return
    app.emit(
        CommitmentService(app.ledger).verify_amount_commitment(
            digest_bytes, owner, amount, salt_bytes
        )
    )
