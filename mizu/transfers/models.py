"""
Transfer models.

A transfer is a pre-funded grant claimable before ``expiration_at`` by one
recipient (SINGLE) or up to ``total_count`` recipients (MULTIPLE). Claim
records only accumulate.
"""

from datetime import datetime
from enum import IntEnum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TransferType(IntEnum):
    SINGLE = 0  # 1 vs 1
    MULTIPLE = 1  # 1 vs many


class TransferClaim(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    wallet_user_id: str = Field(alias="walletUserId")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")


class Transfer(BaseModel):
    """Transfer record with its claims and the backend's claim count."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    wallet_user_id: Optional[str] = Field(default=None, alias="walletUserId")
    is_refund: bool = Field(default=False, alias="isRefund")
    total_amount: Optional[Union[int, float]] = Field(default=None, alias="totalAmount")
    total_count: Optional[int] = Field(default=None, alias="totalCount")
    expiration_at: Optional[Union[int, float, datetime]] = Field(default=None, alias="expirationAt")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    claims: List[TransferClaim] = Field(default_factory=list, alias="transfer_claimeds")
    claim_count: int = Field(default=0, alias="claimCount")

    @model_validator(mode="before")
    @classmethod
    def _flatten_claim_aggregate(cls, data: Any) -> Any:
        if isinstance(data, dict) and "transferClaimedsAggregate" in data:
            data = dict(data)
            aggregate = data.pop("transferClaimedsAggregate") or {}
            count = (aggregate.get("aggregate") or {}).get("count")
            if count is not None:
                data["claimCount"] = count
        return data

    @property
    def remaining_claims(self) -> Optional[int]:
        if self.total_count is None:
            return None
        return max(self.total_count - self.claim_count, 0)
