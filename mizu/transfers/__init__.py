from .models import Transfer, TransferClaim, TransferType
from .service import TRANSFER_TTL_SECONDS, TransferService, floor_to_int

__all__ = [
    "Transfer",
    "TransferClaim",
    "TransferType",
    "TRANSFER_TTL_SECONDS",
    "TransferService",
    "floor_to_int",
]
