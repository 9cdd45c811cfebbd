"""Mini README: Account bookkeeping for the ledger simulator.

Accounts settle in the home currency only. The registry keeps them keyed by
exact name for the lifetime of a session, and the ``deposit``/``withdraw``
helpers are the only code paths that change a balance.
"""

from .registry import Account, AccountRegistry, deposit, withdraw

__all__ = ["Account", "AccountRegistry", "deposit", "withdraw"]
