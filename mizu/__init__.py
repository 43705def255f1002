"""
Mizu wallet core client.

Session-authenticated client for the custodial wallet backend: Telegram
login, payment orders (create, simulate, confirm, list) and claimable
transfers (create, fetch, claim).
"""

from .client import MizuClient
from .errors import (
    MizuError,
    ConfigurationError,
    NotInitializedError,
    NotAuthenticatedError,
    InvalidArgumentError,
    ExpiredTokenError,
    DecodeError,
    TransportError,
    GraphQLError,
    UnexpectedResponseError,
)
from .network import Network
from .orders import Order, OrderPage, OrderStatus
from .session import Session
from .transfers import Transfer, TransferType

__all__ = [
    "MizuClient",
    "Session",
    "Network",
    "Order",
    "OrderPage",
    "OrderStatus",
    "Transfer",
    "TransferType",
    "MizuError",
    "ConfigurationError",
    "NotInitializedError",
    "NotAuthenticatedError",
    "InvalidArgumentError",
    "ExpiredTokenError",
    "DecodeError",
    "TransportError",
    "GraphQLError",
    "UnexpectedResponseError",
]
