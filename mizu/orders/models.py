"""
Order models.

Status transitions are owned by the backend:
PENDING -> CONFIRMED -> EXECUTED -> SUCCESS | FAIL, and
PENDING | CONFIRMED -> CANCELED. ``confirm_order`` is the only client trigger.
"""

from datetime import datetime
from enum import IntEnum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class OrderStatus(IntEnum):
    """Order lifecycle status (integer codes on the wire)."""
    PENDING = 0
    CONFIRMED = 1
    EXECUTED = 2
    SUCCESS = 3
    FAIL = 4
    CANCELED = 5


class OrderTransaction(BaseModel):
    """On-chain transaction submitted for an order."""
    model_config = ConfigDict(populate_by_name=True)

    hash: Optional[str] = None
    gas_fee: Optional[Union[int, float, str]] = Field(default=None, alias="gasFee")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    status: Optional[int] = None
    type: Optional[int] = None


class Order(BaseModel):
    """Order as listed by the backend, with its payload already decoded."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    application_id: Optional[str] = Field(default=None, alias="applicationId")
    wallet_user_id: Optional[str] = Field(default=None, alias="walletUserId")
    payload: Any = Field(default_factory=dict)
    status: OrderStatus
    transaction_seq_no: Optional[int] = Field(default=None, alias="transactionSeqNo")
    type: Optional[int] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")
    transactions: List[OrderTransaction] = Field(default_factory=list)


class Pagination(BaseModel):
    total: int
    limit: int
    offset: int


class OrderPage(BaseModel):
    """One page of orders, most recent first as returned by the backend."""
    data: List[Order]
    pagination: Pagination
