"""Supported account currencies."""

from __future__ import annotations

from enum import Enum


class Currency(str, Enum):
    USD = "USD"
    EUR = "EUR"
    CAD = "CAD"
    WON = "WON"


def is_supported_currency(currency: str) -> bool:
    return currency in Currency._value2member_map_
