"""
Transfer workflow: issue single or multi-recipient transfers, look them up,
and claim them on behalf of the logged-in user.

``claim_transfer`` is not made idempotent client-side; retrying it is only
safe if the backend treats repeated claims of the same parameter as a no-op.
"""

import logging
import math
import time
from decimal import Decimal
from typing import Any, Dict, Optional, Union

from ..errors import InvalidArgumentError, UnexpectedResponseError
from ..graphql import operations
from ..graphql.executor import OperationExecutor
from ..graphql.results import parse_model, require_bool, require_field
from ..session import Session
from .models import Transfer, TransferType


logger = logging.getLogger(__name__)

TRANSFER_TTL_SECONDS = 3600 * 24
TRANSFER_ID_HEADER = "x-hasura-trans-id"

Numeric = Union[int, float, Decimal, str]


def _now() -> int:
    return int(time.time())


def floor_to_int(value: Numeric, name: str) -> int:
    """Floor a number or numeric string; fractional parts are truncated toward -inf."""
    if isinstance(value, bool) or value is None:
        raise InvalidArgumentError(f"{name} must be numeric, got {value!r}")
    try:
        number = float(value.strip()) if isinstance(value, str) else value
        return int(math.floor(number))
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidArgumentError(f"{name} must be a finite number, got {value!r}") from e


class TransferService:
    """Issues and claims transfers."""

    def __init__(self, session: Session, executor: OperationExecutor):
        self.session = session
        self.executor = executor

    async def create_transfer(self, amount: Numeric, symbol: Optional[str] = None) -> str:
        """Create a single-recipient transfer expiring TRANSFER_TTL_SECONDS from now."""
        self.session.require_authenticated()
        variables = {
            "amount": floor_to_int(amount, "amount"),
            "expirationAt": _now() + TRANSFER_TTL_SECONDS,
            "symbol": symbol,
            "type": int(TransferType.SINGLE),
        }
        return await self._create(operations.CREATE_TRANSFER, variables)

    async def create_multiple_transfer(
        self,
        amount: Numeric,
        count: Numeric,
        symbol: Optional[str] = None,
    ) -> str:
        """Create a transfer claimable by ``floor(count)`` recipients."""
        self.session.require_authenticated()
        floored_count = floor_to_int(count, "count")
        if floored_count <= 0:
            raise InvalidArgumentError(f"count must be at least 1, got {count!r}")
        variables = {
            "amount": floor_to_int(amount, "amount"),
            "count": floored_count,
            "expirationAt": _now() + TRANSFER_TTL_SECONDS,
            "symbol": symbol,
            "type": int(TransferType.MULTIPLE),
        }
        return await self._create(operations.CREATE_MULTIPLE_TRANSFER, variables)

    async def fetch_transfer(self, transfer_id: str) -> Optional[Transfer]:
        """Transfer with its claims, or None when the id matches nothing."""
        self.session.require_authenticated()
        if not transfer_id:
            raise InvalidArgumentError("transfer_id is required")
        headers = {
            **self.session.authorization_headers(),
            TRANSFER_ID_HEADER: transfer_id,
        }

        data = await self.executor.execute(
            self.session.endpoint,
            operations.FETCH_TRANSFER,
            {"id": transfer_id},
            headers,
        )
        rows = require_field(data, "transferCreated", operations.FETCH_TRANSFER)
        if not rows:
            return None
        if not isinstance(rows, list):
            raise UnexpectedResponseError("fetchTransferQuery 'transferCreated' is not a list")
        return parse_model(Transfer, rows[0], operations.FETCH_TRANSFER)

    async def claim_transfer(self, claim_parameter: str) -> bool:
        """Claim a share of a transfer; ``claim_parameter`` is passed through untouched."""
        self.session.require_authenticated()
        if not claim_parameter:
            raise InvalidArgumentError("claim_parameter is required")
        headers = self.session.authorization_headers()

        data = await self.executor.execute(
            self.session.endpoint,
            operations.CLAIM_TRANSFER,
            {"transferId": claim_parameter},
            headers,
        )
        claimed = require_bool(data, "claimTransfer", operations.CLAIM_TRANSFER)
        if not claimed:
            logger.info("Transfer claim was not accepted by the backend")
        return claimed

    async def _create(self, operation: operations.OperationSpec, variables: Dict[str, Any]) -> str:
        headers = self.session.authorization_headers()
        data = await self.executor.execute(self.session.endpoint, operation, variables, headers)
        transfer_id = require_field(data, "createTransfer", operation)
        if transfer_id is None or transfer_id == "":
            raise UnexpectedResponseError(f"{operation.name} returned no transfer id")
        return str(transfer_id)
