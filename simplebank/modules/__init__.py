"""Domain modules and shared exports."""

from . import accounts, common, tokens, transfers, users

__all__ = [
    "accounts",
    "common",
    "tokens",
    "transfers",
    "users",
]
