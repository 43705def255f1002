"""
Login protocol models.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenClaims(BaseModel):
    """Claims the client reads from a session token."""
    exp: float  # expiration timestamp (unix seconds)
    user_id: str = Field(min_length=1)


class TelegramUser(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    wallet_user_id: Optional[str] = Field(default=None, alias="walletUserId")
    tg_id: Optional[str] = Field(default=None, alias="tgId")


class SubWallet(BaseModel):
    address: str


class WalletUser(BaseModel):
    sub_wallets: List[SubWallet] = Field(default_factory=list)
