"""Mini README: Session orchestration for the ledger simulator.

``LedgerService`` is constructed once per session and owns the rate table,
the account registry and the interest projector. The console driver calls it
with already-parsed primitive values.
"""

from .service import LedgerService

__all__ = ["LedgerService"]
