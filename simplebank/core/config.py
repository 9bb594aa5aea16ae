"""Application configuration using pydantic settings loaded from ``app.env``."""

from __future__ import annotations

import re
from datetime import timedelta
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url

_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)(ns|us|µs|ms|s|m|h)")
_DURATION_UNITS = {
    "ns": timedelta(microseconds=1) / 1000,
    "us": timedelta(microseconds=1),
    "µs": timedelta(microseconds=1),
    "ms": timedelta(milliseconds=1),
    "s": timedelta(seconds=1),
    "m": timedelta(minutes=1),
    "h": timedelta(hours=1),
}

_ASYNC_DRIVERS = {
    "postgres": "postgresql+asyncpg",
    "postgresql": "postgresql+asyncpg",
    "sqlite": "sqlite+aiosqlite",
    "sqlite3": "sqlite+aiosqlite",
}


def parse_duration(value: str) -> timedelta:
    """Parse a duration such as ``15m``, ``1h30m``, ``-1m`` or ``900`` (seconds)."""
    text = value.strip()
    if not text:
        raise ValueError("empty duration")
    sign = 1
    if text[0] in "+-":
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    try:
        return timedelta(seconds=sign * float(text))
    except (ValueError, OverflowError):
        pass

    total = timedelta()
    position = 0
    for match in _DURATION_PART.finditer(text):
        if match.start() != position:
            break
        total += float(match.group(1)) * _DURATION_UNITS[match.group(2)]
        position = match.end()
    if position != len(text) or position == 0:
        raise ValueError(f"invalid duration {value!r}")
    return sign * total


def split_address(address: str) -> tuple[str, int]:
    host, sep, port = address.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"invalid server address {address!r}, expected host:port")
    return host or "0.0.0.0", int(port)


class Settings(BaseSettings):
    """Top-level application settings."""

    model_config = SettingsConfigDict(
        env_file="app.env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    project_name: str = "Simple Bank"

    db_driver: str = "sqlite"
    db_source: str = "sqlite:///./simplebank.db"
    db_echo: bool = False
    db_pool_size: Optional[int] = None
    db_max_overflow: Optional[int] = None

    server_address: str = "0.0.0.0:8080"
    request_timeout: float = Field(default=10.0, gt=0)

    token_symmetric_key: str = Field(..., min_length=32)
    token_scheme: Literal["local", "jwt"] = "local"
    access_token_duration: timedelta = timedelta(minutes=15)

    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("access_token_duration", mode="before")
    @classmethod
    def _parse_duration(cls, value):
        if isinstance(value, str):
            return parse_duration(value)
        return value

    @field_validator("access_token_duration")
    @classmethod
    def _positive_duration(cls, value: timedelta) -> timedelta:
        if value <= timedelta(0):
            raise ValueError("ACCESS_TOKEN_DURATION must be positive")
        return value

    @field_validator("server_address")
    @classmethod
    def _valid_address(cls, value: str) -> str:
        split_address(value)
        return value

    @property
    def host(self) -> str:
        return split_address(self.server_address)[0]

    @property
    def port(self) -> int:
        return split_address(self.server_address)[1]

    @property
    def database_url(self) -> URL:
        url = make_url(self.db_source)
        if "+" in url.drivername:
            return url
        driver = _ASYNC_DRIVERS.get(url.drivername) or _ASYNC_DRIVERS.get(self.db_driver.lower())
        if driver is None:
            raise ValueError(f"unsupported DB_DRIVER {self.db_driver!r}")
        return url.set(drivername=driver)


@lru_cache()
def get_settings() -> Settings:
    return Settings()
