"""
Login protocol: exchanges a Telegram Mini App ``initData`` assertion for a
session token and manages identity lookups around it.

Token contract: the token returned by ``tgLogin`` is decoded locally.
An expired token raises ExpiredTokenError and a malformed one raises
DecodeError. In both cases, and when the response carries no token at all,
the session is logged out before raising, so a failed login leaves no
partial state behind.
"""

import logging
from typing import List, Optional
from urllib.parse import urlencode

from pydantic import TypeAdapter

from ..config import settings
from ..errors import DecodeError, ExpiredTokenError, InvalidArgumentError, UnexpectedResponseError
from ..graphql import operations
from ..graphql.executor import OperationExecutor
from ..graphql.results import parse_model, require_bool, require_field
from ..session import Session
from .models import TelegramUser, WalletUser
from .tokens import decode_session_token


logger = logging.getLogger(__name__)

TG_ID_HEADER = "x-hasura-tg-id"

_telegram_users = TypeAdapter(List[TelegramUser])


class LoginService:
    """Obtains and inspects the session identity."""

    def __init__(
        self,
        session: Session,
        executor: OperationExecutor,
        keyless_google_url: Optional[str] = None,
    ):
        self.session = session
        self.executor = executor
        self.keyless_google_url = keyless_google_url or settings.keyless_google_url

    async def login_with_identity(self, init_data: str) -> str:
        """
        Log in with Telegram ``initData`` and return the wallet user id.

        Raises:
            InvalidArgumentError: ``init_data`` is empty
            ExpiredTokenError: backend issued an already expired token
            DecodeError: backend issued a token the client cannot read
        """
        self.session.require_initialized()
        if not init_data:
            raise InvalidArgumentError("init_data is required")

        data = await self.executor.execute(
            self.session.endpoint,
            operations.LOGIN,
            {"appId": self.session.app_id, "initData": init_data},
        )
        try:
            token = require_field(data, "tgLogin", operations.LOGIN)
            claims = decode_session_token(token)
        except (DecodeError, ExpiredTokenError, UnexpectedResponseError) as e:
            logger.warning(f"Login rejected: {e}")
            self.session.logout()
            raise

        self.session.establish(claims.user_id, token)
        logger.info(f"Logged in wallet user {claims.user_id}")
        return claims.user_id

    async def check_user_exists(self, tg_id: str) -> bool:
        """Pre-login lookup of a wallet user by Telegram id."""
        self.session.require_initialized()
        if not tg_id:
            raise InvalidArgumentError("tg_id is required")

        data = await self.executor.execute(
            self.session.endpoint,
            operations.CHECK_USER_EXISTS,
            {},
            {TG_ID_HEADER: str(tg_id)},
        )
        raw = require_field(data, "telegramUser", operations.CHECK_USER_EXISTS)
        users = parse_model(_telegram_users, raw, operations.CHECK_USER_EXISTS) if raw else []
        return len(users) > 0

    async def get_user_wallet_address(self) -> Optional[str]:
        """Address of the user's first sub-wallet, or None if there is none."""
        self.session.require_authenticated()
        headers = self.session.authorization_headers()

        data = await self.executor.execute(
            self.session.endpoint,
            operations.USER_WALLET_ADDRESS,
            {"id": self.session.user_id},
            headers,
        )
        raw = require_field(data, "walletUserByPk", operations.USER_WALLET_ADDRESS)
        if raw is None:
            return None
        user = parse_model(WalletUser, raw, operations.USER_WALLET_ADDRESS)
        return user.sub_wallets[0].address if user.sub_wallets else None

    async def bind_google_account(self, address: str, id_token: str) -> bool:
        """Bind a keyless Google account (address + Google id token) to the user."""
        self.session.require_authenticated()
        if not address:
            raise InvalidArgumentError("address is required")
        if not id_token:
            raise InvalidArgumentError("id_token is required")
        headers = self.session.authorization_headers()

        data = await self.executor.execute(
            self.session.endpoint,
            operations.BIND_GOOGLE,
            {"address": address, "idToken": id_token},
            headers,
        )
        return require_bool(data, "bindGoogle", operations.BIND_GOOGLE)

    def build_bind_google_url(self, redirect_uri: str) -> str:
        """URL of the keyless Google binding page for the current session."""
        self.session.require_authenticated()
        if not redirect_uri:
            raise InvalidArgumentError("redirect_uri is required")

        query = urlencode(
            {
                "token": self.session.session_token,
                "appId": self.session.app_id,
                "redirect_uri": redirect_uri,
            }
        )
        return f"{self.keyless_google_url}?{query}"
