"""Mini README: Core package initializer for the ledger simulator.

The package is split into small leaf-first subpackages: ``currency`` (codes,
rate table and pivot conversion), ``accounts`` (account registry and balance
mutation), ``interest`` (daily compounding projections) and ``ledger`` (the
session-scoped service the console driver talks to). Only the logging
factory is re-exported here so importing the package stays cheap.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
