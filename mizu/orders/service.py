"""
Order workflow: create -> simulate -> confirm, plus paginated history.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..errors import DecodeError, InvalidArgumentError, UnexpectedResponseError
from ..graphql import operations
from ..graphql.executor import OperationExecutor
from ..graphql.results import parse_model, require_bool, require_field
from ..session import Session
from .models import Order, OrderPage, OrderStatus, Pagination
from .payload import decode_payload, encode_payload


logger = logging.getLogger(__name__)

DEFAULT_PAGE_LIMIT = 10
DEFAULT_STATUS_FILTER = (OrderStatus.SUCCESS,)


class OrderService:
    """Drives payment orders against the wallet backend."""

    def __init__(self, session: Session, executor: OperationExecutor):
        self.session = session
        self.executor = executor

    async def create_order(self, payload: Any) -> str:
        """Create an order for ``payload`` and return its id."""
        self.session.require_authenticated()
        headers = self.session.authorization_headers()
        encoded = encode_payload(payload)

        data = await self.executor.execute(
            self.session.endpoint,
            operations.CREATE_ORDER,
            {"appId": self.session.app_id, "payload": encoded},
            headers,
        )
        order_id = require_field(data, "createOrder", operations.CREATE_ORDER)
        if order_id is None or order_id == "":
            raise UnexpectedResponseError("CreateOrderQuery returned no order id")
        return str(order_id)

    async def simulate_order(self, payload: Any) -> Any:
        """Dry-run ``payload``; no order is persisted."""
        self.session.require_authenticated()
        headers = self.session.authorization_headers()
        encoded = encode_payload(payload)

        data = await self.executor.execute(
            self.session.endpoint,
            operations.SIMULATE_ORDER,
            {"payload": encoded},
            headers,
        )
        return require_field(data, "simulateOrder", operations.SIMULATE_ORDER)

    async def confirm_order(self, order_id: str) -> bool:
        """User-interactive commit of a previously created order."""
        self.session.require_authenticated()
        if not order_id:
            raise InvalidArgumentError("order_id is required")
        headers = self.session.authorization_headers()

        data = await self.executor.execute(
            self.session.endpoint,
            operations.CONFIRM_ORDER,
            {"orderId": order_id},
            headers,
        )
        return require_bool(data, "confirmOrder", operations.CONFIRM_ORDER)

    async def fetch_order_list(
        self,
        limit: int = DEFAULT_PAGE_LIMIT,
        offset: int = 0,
        status: Optional[Sequence[OrderStatus]] = None,
    ) -> OrderPage:
        """
        Fetch one page of the current user's orders.

        Args:
            limit: page size, must be positive
            offset: number of orders to skip
            status: statuses to include (default: SUCCESS only)

        Returns:
            OrderPage whose entries keep the backend's most-recent-first order.
            A payload that fails to decode is replaced with ``{}`` for that
            entry only.
        """
        self.session.require_authenticated()
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise InvalidArgumentError(f"limit must be a positive integer, got {limit!r}")
        if isinstance(offset, bool) or not isinstance(offset, int) or offset < 0:
            raise InvalidArgumentError(f"offset must be a non-negative integer, got {offset!r}")
        statuses = self._status_codes(status)
        headers = self.session.authorization_headers()

        data = await self.executor.execute(
            self.session.endpoint,
            operations.FETCH_ORDER_LIST,
            {
                "walletUserId": self.session.user_id,
                "limit": limit,
                "offset": offset,
                "status": statuses,
            },
            headers,
        )

        rows = require_field(data, "order", operations.FETCH_ORDER_LIST) or []
        if not isinstance(rows, list):
            raise UnexpectedResponseError("fetchOrderListQuery 'order' is not a list")
        aggregate = require_field(data, "orderAggregate", operations.FETCH_ORDER_LIST)
        try:
            total = int(aggregate["aggregate"]["count"])
        except (KeyError, TypeError, ValueError) as e:
            raise UnexpectedResponseError(
                "fetchOrderListQuery returned no aggregate count"
            ) from e

        orders = [self._decode_row(row) for row in rows]
        return OrderPage(
            data=orders,
            pagination=Pagination(total=total, limit=limit, offset=offset),
        )

    def _decode_row(self, row: Dict[str, Any]) -> Order:
        if not isinstance(row, dict):
            raise UnexpectedResponseError("fetchOrderListQuery returned a non-object order")
        try:
            payload = decode_payload(row.get("payload"))
        except DecodeError as e:
            logger.warning(f"Order {row.get('id')} payload could not be decoded: {e}")
            payload = {}
        return parse_model(Order, {**row, "payload": payload}, operations.FETCH_ORDER_LIST)

    @staticmethod
    def _status_codes(status: Optional[Sequence[OrderStatus]]) -> List[int]:
        if status is None:
            return [int(s) for s in DEFAULT_STATUS_FILTER]
        try:
            return [
                int(OrderStatus[s.upper()] if isinstance(s, str) else OrderStatus(s))
                for s in status
            ]
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidArgumentError(f"Invalid order status filter: {status!r}") from e
