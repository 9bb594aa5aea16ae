"""Domain models for users."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class User:
    username: str
    full_name: str
    email: str
    hashed_password: str = field(repr=False)
    password_changed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None


@dataclass(slots=True)
class UserCreateInput:
    username: str
    password: str
    full_name: str
    email: str
