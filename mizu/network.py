"""
Network identifiers and the static network -> GraphQL endpoint table.
"""

from enum import Enum
from typing import Dict, Mapping, Optional, Union

from .errors import ConfigurationError


class Network(str, Enum):
    """Networks the wallet backend is deployed for."""
    MAINNET = "mainnet"
    TESTNET = "testnet"


NetworkLike = Union[Network, str]


def parse_network(value: Optional[NetworkLike]) -> Network:
    """Coerce a network name into a ``Network``; empty or unknown values are configuration errors."""
    if value is None or value == "":
        raise ConfigurationError("network is required")
    if isinstance(value, Network):
        return value
    try:
        return Network(str(value).strip().lower())
    except ValueError:
        raise ConfigurationError(f"Unknown network: {value!r}")


def default_endpoints() -> Dict[Network, str]:
    from .config import settings

    return {
        Network.MAINNET: settings.graphql_mainnet_url,
        Network.TESTNET: settings.graphql_testnet_url,
    }


def resolve_endpoint(network: Network, endpoints: Optional[Mapping[Network, str]] = None) -> str:
    table = endpoints if endpoints is not None else default_endpoints()
    endpoint = table.get(network)
    if not endpoint:
        raise ConfigurationError(f"No GraphQL endpoint configured for {network.value}")
    return endpoint
