"""HTTP routers."""

from . import accounts, transfers, users

__all__ = ["accounts", "transfers", "users"]
