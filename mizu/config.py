from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .network import Network


BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        env_prefix="MIZU_",
        case_sensitive=False,
        extra="ignore"
    )

    # Application
    app_id: str = Field(default="", description="Application ID issued by the wallet backend")
    network: Network = Field(default=Network.TESTNET, description="Default network (mainnet or testnet)")
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=True, description="Render logs as JSON lines instead of console output")

    # Endpoints
    graphql_mainnet_url: str = Field(
        default="https://api.mz.xyz/v1/graphql/",
        description="GraphQL endpoint for mainnet",
    )
    graphql_testnet_url: str = Field(
        default="https://hasura-wallet.groupwar.xyz/v1/graphql",
        description="GraphQL endpoint for testnet",
    )
    keyless_google_url: str = Field(
        default="https://dev.fuzzwallet.com:7654/keyless_google",
        description="Site that binds a Google account to a keyless wallet",
    )

    # Transport
    request_timeout_seconds: float = Field(default=30.0, gt=0, description="GraphQL request timeout")

    @property
    def has_app_id(self) -> bool:
        return bool(self.app_id)


# Global settings instance
settings = Settings()
