"""Domain models for accounts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class Account:
    id: int
    owner: str
    balance: int
    currency: str
    created_at: Optional[datetime] = None

    def is_owned_by(self, username: str) -> bool:
        return self.owner == username


@dataclass(slots=True)
class AccountCreateInput:
    owner: str
    currency: str
    balance: int = 0
