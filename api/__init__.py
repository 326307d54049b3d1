"""HTTP layer for the expense ledger."""

from .app import create_app

__all__ = ["create_app"]
