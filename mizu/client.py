"""
Mizu wallet core client.

Usage:
    async with MizuClient(app_id="my-app", network=Network.TESTNET) as client:
        if await client.check_user_exists(tg_id):
            await client.login_with_identity(init_data)
        order_id = await client.create_order(payload)
        await client.simulate_order(payload)
        await client.confirm_order(order_id)
        page = await client.fetch_order_list(limit=10)
"""

from typing import Any, Mapping, Optional, Sequence

from .auth.service import LoginService
from .config import Settings, settings as default_settings
from .errors import ConfigurationError
from .graphql.executor import GraphQLExecutor, OperationExecutor
from .network import Network, NetworkLike
from .orders.models import OrderPage, OrderStatus
from .orders.service import DEFAULT_PAGE_LIMIT, OrderService
from .session import Session
from .transfers.models import Transfer
from .transfers.service import Numeric, TransferService


class MizuClient:
    """Session-authenticated facade over the login, order and transfer workflows."""

    def __init__(
        self,
        app_id: str,
        network: Optional[NetworkLike],
        executor: Optional[OperationExecutor] = None,
        endpoints: Optional[Mapping[Network, str]] = None,
        keyless_google_url: Optional[str] = None,
    ):
        self.session = Session(app_id, network, endpoints=endpoints)
        self._owns_executor = executor is None
        self.executor = executor or GraphQLExecutor()

        self.auth = LoginService(self.session, self.executor, keyless_google_url)
        self.orders = OrderService(self.session, self.executor)
        self.transfers = TransferService(self.session, self.executor)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        executor: Optional[OperationExecutor] = None,
    ) -> "MizuClient":
        cfg = settings or default_settings
        if not cfg.app_id:
            raise ConfigurationError("MIZU_APP_ID must be set")
        client = cls(
            app_id=cfg.app_id,
            network=cfg.network,
            executor=executor or GraphQLExecutor(timeout=cfg.request_timeout_seconds),
            endpoints={
                Network.MAINNET: cfg.graphql_mainnet_url,
                Network.TESTNET: cfg.graphql_testnet_url,
            },
            keyless_google_url=cfg.keyless_google_url,
        )
        client._owns_executor = executor is None
        return client

    async def close(self) -> None:
        if self._owns_executor:
            await self.executor.close()

    async def __aenter__(self) -> "MizuClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    # Session

    @property
    def user_id(self) -> str:
        return self.session.user_id

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_authenticated

    def update_network(self, network: NetworkLike) -> None:
        self.session.update_network(network)

    def logout(self) -> None:
        self.session.logout()

    # Login protocol

    async def login_with_identity(self, init_data: str) -> str:
        return await self.auth.login_with_identity(init_data)

    async def check_user_exists(self, tg_id: str) -> bool:
        return await self.auth.check_user_exists(tg_id)

    async def get_user_wallet_address(self) -> Optional[str]:
        return await self.auth.get_user_wallet_address()

    async def bind_google_account(self, address: str, id_token: str) -> bool:
        return await self.auth.bind_google_account(address, id_token)

    def build_bind_google_url(self, redirect_uri: str) -> str:
        return self.auth.build_bind_google_url(redirect_uri)

    # Orders

    async def create_order(self, payload: Any) -> str:
        return await self.orders.create_order(payload)

    async def simulate_order(self, payload: Any) -> Any:
        return await self.orders.simulate_order(payload)

    async def confirm_order(self, order_id: str) -> bool:
        return await self.orders.confirm_order(order_id)

    async def fetch_order_list(
        self,
        limit: int = DEFAULT_PAGE_LIMIT,
        offset: int = 0,
        status: Optional[Sequence[OrderStatus]] = None,
    ) -> OrderPage:
        return await self.orders.fetch_order_list(limit=limit, offset=offset, status=status)

    # Transfers

    async def create_transfer(self, amount: Numeric, symbol: Optional[str] = None) -> str:
        return await self.transfers.create_transfer(amount, symbol=symbol)

    async def create_multiple_transfer(
        self,
        amount: Numeric,
        count: Numeric,
        symbol: Optional[str] = None,
    ) -> str:
        return await self.transfers.create_multiple_transfer(amount, count, symbol=symbol)

    async def fetch_transfer(self, transfer_id: str) -> Optional[Transfer]:
        return await self.transfers.fetch_transfer(transfer_id)

    async def claim_transfer(self, claim_parameter: str) -> bool:
        return await self.transfers.claim_transfer(claim_parameter)
