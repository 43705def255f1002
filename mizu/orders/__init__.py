from .models import Order, OrderPage, OrderStatus, OrderTransaction, Pagination
from .payload import decode_payload, encode_payload
from .service import OrderService

__all__ = [
    "Order",
    "OrderPage",
    "OrderStatus",
    "OrderTransaction",
    "Pagination",
    "decode_payload",
    "encode_payload",
    "OrderService",
]
