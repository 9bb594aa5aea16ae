"""Money transfer endpoint."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from simplebank.core.security import get_authorization_payload
from simplebank.interfaces.http.deps import get_db_session, get_transfer_service
from simplebank.modules.accounts import Account, AccountNotFoundError, AccountService
from simplebank.modules.tokens import TokenPayload
from simplebank.modules.transfers import CurrencyMismatchError, TransferParams, TransferService
from simplebank.schemas import TransferRequest, TransferResultResponse

router = APIRouter()


async def _valid_account(service: AccountService, account_id: int, currency: str) -> Account:
    try:
        account = await service.get_by_id(account_id)
    except AccountNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    if account.currency != currency:
        error = CurrencyMismatchError(account.id, account.currency, currency)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    return account


@router.post("", response_model=TransferResultResponse, summary="Transfer money between two accounts")
async def create_transfer(
    payload: TransferRequest,
    auth: TokenPayload = Depends(get_authorization_payload),
    db: AsyncSession = Depends(get_db_session),
    transfer_service: TransferService = Depends(get_transfer_service),
) -> TransferResultResponse:
    currency = payload.currency.value
    account_service = AccountService.with_session(db)

    from_account = await _valid_account(account_service, payload.from_account_id, currency)
    if not from_account.is_owned_by(auth.username):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="from account doesn't belong to the authenticated user",
        )
    await _valid_account(account_service, payload.to_account_id, currency)
    # Hand the read connection back to the pool; the transfer runs on its own.
    await db.rollback()

    result = await transfer_service.transfer_tx(
        TransferParams(
            from_account_id=payload.from_account_id,
            to_account_id=payload.to_account_id,
            amount=payload.amount,
        )
    )
    return TransferResultResponse.model_validate(result)
