"""Money transfer transaction.

A transfer writes five rows in one transaction: the transfer header, a debit
entry, a credit entry and the two balance updates. The balance updates always
run in ascending account id order, whatever the direction of the transfer, so
two concurrent transfers touching the same pair of accounts take their row
locks in the same order and can never wait on each other in a cycle.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from .models import TransferParams, TransferResult
from .repository import TransferRepository, TransferStore

logger = logging.getLogger(__name__)


def canonical_order(params: TransferParams) -> tuple[tuple[int, int], tuple[int, int]]:
    """Return ``((lo_id, lo_delta), (hi_id, hi_delta))`` with ``lo_id < hi_id``."""
    debit = (params.from_account_id, -params.amount)
    credit = (params.to_account_id, params.amount)
    if params.from_account_id < params.to_account_id:
        return debit, credit
    return credit, debit


@dataclass(slots=True)
class TransferService:
    store: TransferStore
    timeout: Optional[float] = None

    async def transfer_tx(self, params: TransferParams) -> TransferResult:
        """Move ``params.amount`` between two accounts atomically.

        Errors from any primitive roll the whole transaction back and are
        re-raised unchanged; retrying is left to the caller. When ``timeout``
        is set the transaction is cancelled and rolled back once it elapses,
        raising ``TimeoutError``.
        """

        async def execute(repo: TransferRepository) -> TransferResult:
            transfer = await repo.create_transfer(
                from_account_id=params.from_account_id,
                to_account_id=params.to_account_id,
                amount=params.amount,
            )
            from_entry = await repo.create_entry(account_id=params.from_account_id, amount=-params.amount)
            to_entry = await repo.create_entry(account_id=params.to_account_id, amount=params.amount)

            (lo_id, lo_delta), (hi_id, hi_delta) = canonical_order(params)
            lo_account = await repo.add_account_balance(lo_id, lo_delta)
            hi_account = await repo.add_account_balance(hi_id, hi_delta)
            if lo_id == params.from_account_id:
                from_account, to_account = lo_account, hi_account
            else:
                from_account, to_account = hi_account, lo_account

            return TransferResult(
                transfer=transfer,
                from_account=from_account,
                to_account=to_account,
                from_entry=from_entry,
                to_entry=to_entry,
            )

        try:
            if self.timeout is None:
                result = await self.store.run_in_tx(execute)
            else:
                async with asyncio.timeout(self.timeout):
                    result = await self.store.run_in_tx(execute)
        except Exception as exc:
            logger.warning(
                "transfer rolled back",
                extra={
                    "from_account_id": params.from_account_id,
                    "to_account_id": params.to_account_id,
                    "amount": params.amount,
                    "error": repr(exc),
                },
            )
            raise

        logger.info(
            "transfer committed",
            extra={
                "transfer_id": result.transfer.id,
                "from_account_id": params.from_account_id,
                "to_account_id": params.to_account_id,
                "amount": params.amount,
            },
        )
        return result
