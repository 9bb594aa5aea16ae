"""SQLAlchemy ORM models."""
from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.sql import func

from simplebank.infrastructure.database.base import Base

# SQLite only auto-increments an INTEGER PRIMARY KEY.
Identity = BigInteger().with_variant(Integer, "sqlite")


class User(Base):
    __tablename__ = "users"

    username = Column(String(64), primary_key=True)
    hashed_password = Column(String(255), nullable=False)
    full_name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password_changed_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class Account(Base):
    __tablename__ = "accounts"
    __table_args__ = (UniqueConstraint("owner", "currency", name="owner_currency_key"),)

    id = Column(Identity, primary_key=True, autoincrement=True)
    owner = Column(String(64), ForeignKey("users.username"), nullable=False, index=True)
    balance = Column(BigInteger, nullable=False)
    currency = Column(String(8), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class Entry(Base):
    __tablename__ = "entries"

    id = Column(Identity, primary_key=True, autoincrement=True)
    account_id = Column(Identity, ForeignKey("accounts.id"), nullable=False, index=True)
    # Signed: negative for debits, positive for credits.
    amount = Column(BigInteger, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class Transfer(Base):
    __tablename__ = "transfers"
    __table_args__ = (
        CheckConstraint("amount > 0", name="transfers_amount_positive"),
        CheckConstraint("from_account_id <> to_account_id", name="transfers_distinct_accounts"),
    )

    id = Column(Identity, primary_key=True, autoincrement=True)
    from_account_id = Column(Identity, ForeignKey("accounts.id"), nullable=False, index=True)
    to_account_id = Column(Identity, ForeignKey("accounts.id"), nullable=False, index=True)
    amount = Column(BigInteger, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
