"""quickex — permissioned ledger state with privacy flags and amount commitments."""

__version__ = "0.1.0"
