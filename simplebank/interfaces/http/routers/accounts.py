"""Account endpoints; every route requires a bearer token."""
from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from simplebank.core.security import get_authorization_payload
from simplebank.interfaces.http.deps import get_account_service, get_db_session
from simplebank.modules.accounts import (
    AccountAlreadyExistsError,
    AccountCreateInput,
    AccountNotFoundError,
    AccountOwnerNotFoundError,
    AccountOwnershipError,
    AccountService,
)
from simplebank.modules.tokens import TokenPayload
from simplebank.schemas import MAX_INT64, AccountResponse, CreateAccountRequest

MIN_PAGE_SIZE = 5
MAX_PAGE_SIZE = 10
# Keeps the list offset, (page_id - 1) * page_size, within a signed 64-bit integer.
MAX_PAGE_ID = MAX_INT64 // MAX_PAGE_SIZE + 1

router = APIRouter()


@router.post("", response_model=AccountResponse, summary="Open an account for the caller")
async def create_account(
    payload: CreateAccountRequest,
    auth: TokenPayload = Depends(get_authorization_payload),
    account_service: AccountService = Depends(get_account_service),
    db: AsyncSession = Depends(get_db_session),
) -> AccountResponse:
    try:
        account = await account_service.create_account(
            AccountCreateInput(owner=auth.username, currency=payload.currency.value)
        )
    except (AccountAlreadyExistsError, AccountOwnerNotFoundError) as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    await db.commit()
    return AccountResponse.model_validate(account)


@router.get("/{account_id}", response_model=AccountResponse, summary="Fetch one of the caller's accounts")
async def get_account(
    account_id: int = Path(..., ge=1, le=MAX_INT64),
    auth: TokenPayload = Depends(get_authorization_payload),
    account_service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    try:
        account = await account_service.get_owned(account_id, auth.username)
    except AccountNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except AccountOwnershipError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc
    return AccountResponse.model_validate(account)


@router.get("", response_model=list[AccountResponse], summary="List the caller's accounts")
async def list_accounts(
    page_id: int = Query(..., ge=1, le=MAX_PAGE_ID),
    page_size: int = Query(..., ge=MIN_PAGE_SIZE, le=MAX_PAGE_SIZE),
    auth: TokenPayload = Depends(get_authorization_payload),
    account_service: AccountService = Depends(get_account_service),
) -> list[AccountResponse]:
    accounts = await account_service.list_accounts(auth.username, page_id=page_id, page_size=page_size)
    return [AccountResponse.model_validate(account) for account in accounts]
