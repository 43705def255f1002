"""Order payload transport encoding: compact JSON, UTF-8, standard base64."""

import base64
import binascii
import json
from typing import Any

from ..errors import DecodeError, InvalidArgumentError


_ASCII_WHITESPACE = {ord(c): None for c in " \t\n\f\r"}


def _check_keys(value: Any) -> None:
    # json.dumps would stringify non-str keys and let colliding keys overwrite each other
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise InvalidArgumentError(f"Order payload keys must be strings, got {key!r}")
            _check_keys(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _check_keys(item)


def encode_payload(payload: Any) -> str:
    _check_keys(payload)
    try:
        text = json.dumps(payload, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"Order payload is not JSON-serializable: {e}") from e
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_payload(encoded: str) -> Any:
    """
    Inverse of ``encode_payload``.

    Accepts what browsers' ``atob`` accepts: ASCII whitespace is ignored and
    missing ``=`` padding is restored before the strict decode.
    """
    if not isinstance(encoded, str):
        raise DecodeError("Order payload is empty")
    compact = encoded.translate(_ASCII_WHITESPACE)
    if not compact:
        raise DecodeError("Order payload is empty")
    compact += "=" * (-len(compact) % 4)
    try:
        raw = base64.b64decode(compact, validate=True)
        return json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise DecodeError(f"Order payload could not be decoded: {e}") from e
