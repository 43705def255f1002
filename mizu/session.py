"""
In-memory session state for one logical wallet user.

A Session owns the application id, the selected network and its endpoint,
and the (user_id, session_token) pair obtained at login. The pair is only
ever set or cleared together.
"""

import logging
from typing import Dict, Mapping, Optional

from .errors import ConfigurationError, NotAuthenticatedError, NotInitializedError
from .network import Network, NetworkLike, parse_network, resolve_endpoint


logger = logging.getLogger(__name__)


class Session:
    """Authentication and network context shared by the workflows."""

    def __init__(
        self,
        app_id: str,
        network: Optional[NetworkLike],
        endpoints: Optional[Mapping[Network, str]] = None,
    ):
        if not app_id:
            raise ConfigurationError("app_id is required")

        self._app_id = app_id
        self._endpoints = dict(endpoints) if endpoints is not None else None
        self.network = parse_network(network)
        self.endpoint = resolve_endpoint(self.network, self._endpoints)

        self._user_id = ""
        self._session_token = ""

        # after all
        self.initialized = True

    @property
    def app_id(self) -> str:
        return self._app_id

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def session_token(self) -> str:
        return self._session_token

    @property
    def is_authenticated(self) -> bool:
        return bool(self._session_token)

    def require_initialized(self) -> None:
        if not getattr(self, "initialized", False):
            raise NotInitializedError("Wallet client not initialized")

    def require_authenticated(self) -> None:
        self.require_initialized()
        if not self._session_token:
            raise NotAuthenticatedError("Session token not found. Please login first.")

    def update_network(self, network: NetworkLike) -> None:
        """Switch network; an existing session token is kept as-is."""
        self.require_initialized()
        parsed = parse_network(network)
        endpoint = resolve_endpoint(parsed, self._endpoints)
        self.network = parsed
        self.endpoint = endpoint
        logger.info(f"Switched network to {parsed.value}")

    def authorization_headers(self) -> Dict[str, str]:
        """Bearer header for the token held at call time."""
        self.require_authenticated()
        return {"Authorization": f"Bearer {self._session_token}"}

    def establish(self, user_id: str, session_token: str) -> None:
        if not user_id or not session_token:
            raise ValueError("user_id and session_token must both be set")
        self._user_id = user_id
        self._session_token = session_token

    def logout(self) -> None:
        had_session = bool(self._session_token)
        self._user_id = ""
        self._session_token = ""
        if had_session:
            logger.info("Session cleared")

    def __repr__(self) -> str:
        return (
            f"Session(app_id={self._app_id!r}, network={self.network.value!r}, "
            f"authenticated={self.is_authenticated})"
        )
