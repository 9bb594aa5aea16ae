"""Pydantic schemas used across the project."""
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator

from simplebank.core.crypto import MAX_PASSWORD_BYTES
from simplebank.modules.accounts import Currency

Username = Annotated[str, Field(min_length=1, max_length=64, pattern=r"^[a-zA-Z0-9]+$")]
Password = Annotated[str, Field(min_length=6, max_length=72)]

# Ids and amounts are stored as signed 64-bit integers.
MAX_INT64 = 2**63 - 1
AccountId = Annotated[int, Field(ge=1, le=MAX_INT64)]
Amount = Annotated[int, Field(gt=0, le=MAX_INT64)]


class ErrorResponse(BaseModel):
    error: str


class CreateUserRequest(BaseModel):
    username: Username
    password: Password
    full_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr

    @field_validator("password")
    @classmethod
    def _password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class UserResponse(BaseModel):
    username: str
    full_name: str
    email: str
    password_changed_at: datetime
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class LoginUserRequest(BaseModel):
    username: Username
    password: Password


class LoginUserResponse(BaseModel):
    access_token: str
    access_token_expires_at: datetime
    user: UserResponse


class CreateAccountRequest(BaseModel):
    currency: Currency


class AccountResponse(BaseModel):
    id: int
    owner: str
    balance: int
    currency: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TransferRequest(BaseModel):
    from_account_id: AccountId
    to_account_id: AccountId
    amount: Amount
    currency: Currency

    @model_validator(mode="after")
    def _distinct_accounts(self) -> "TransferRequest":
        if self.from_account_id == self.to_account_id:
            raise ValueError("from_account_id and to_account_id must differ")
        return self


class TransferResponse(BaseModel):
    id: int
    from_account_id: int
    to_account_id: int
    amount: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class EntryResponse(BaseModel):
    id: int
    account_id: int
    amount: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TransferResultResponse(BaseModel):
    transfer: TransferResponse
    from_account: AccountResponse
    to_account: AccountResponse
    from_entry: EntryResponse
    to_entry: EntryResponse

    model_config = ConfigDict(from_attributes=True)


class HealthResponse(BaseModel):
    status: str
    service: str
