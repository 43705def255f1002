"""Shared test doubles and data builders."""

import base64
import json
import os
import time
from typing import Any, Callable, Dict, List, Optional, Union

import jwt

from mizu import config
from mizu.auth.tokens import HASURA_CLAIMS_NAMESPACE, HASURA_USER_ID_CLAIM
from mizu.config import Settings
from mizu.graphql.executor import OperationExecutor
from mizu.network import Network


APP_ID = "test-app"
USER_ID = "7b6f9a7e-1c1f-4a57-9d7e-3c2b5b8c0f11"
ENDPOINTS = {
    Network.MAINNET: "https://mainnet.example/v1/graphql",
    Network.TESTNET: "https://testnet.example/v1/graphql",
}


def make_token(
    user_id: Optional[str] = USER_ID,
    expires_in: int = 3600,
    **extra: Any,
) -> str:
    """Mint a session token shaped like the ones the backend issues."""
    claims: Dict[str, Any] = {"exp": int(time.time()) + expires_in, **extra}
    if user_id is not None:
        claims[HASURA_CLAIMS_NAMESPACE] = {HASURA_USER_ID_CLAIM: user_id}
    return jwt.encode(claims, "backend-secret-with-at-least-32-bytes", algorithm="HS256")


def b64_json(value: Any) -> str:
    return base64.b64encode(json.dumps(value).encode("utf-8")).decode("ascii")


def order_row(index: int, payload: Any = None, **overrides: Any) -> Dict[str, Any]:
    row = {
        "applicationId": APP_ID,
        "createdAt": f"2024-05-{index + 1:02d}T12:00:00+00:00",
        "id": f"order-{index}",
        "payload": b64_json(payload if payload is not None else {"function": f"0x1::coin::transfer_{index}"}),
        "status": 3,
        "transactionSeqNo": index,
        "type": 0,
        "updatedAt": f"2024-05-{index + 1:02d}T12:05:00+00:00",
        "walletUserId": USER_ID,
        "transactions": [
            {
                "hash": f"0xhash{index}",
                "gasFee": 120,
                "createdAt": f"2024-05-{index + 1:02d}T12:01:00+00:00",
                "status": 1,
                "type": 0,
            }
        ],
    }
    row.update(overrides)
    return row


Response = Union[Dict[str, Any], Exception, Callable[[Dict[str, Any]], Dict[str, Any]]]


class RecordingExecutor(OperationExecutor):
    """Executor double that records calls and replays canned responses per operation."""

    def __init__(self):
        self.calls: List[Dict[str, Any]] = []
        self.responses: Dict[str, List[Response]] = {}
        self.closed = False

    def respond(self, operation_name: str, response: Response) -> None:
        self.responses.setdefault(operation_name, []).append(response)

    async def execute(self, endpoint, operation, variables, headers=None):
        call = {
            "endpoint": endpoint,
            "operation": operation.name,
            "variables": dict(variables),
            "headers": dict(headers or {}),
        }
        self.calls.append(call)
        queue = self.responses.get(operation.name)
        if not queue:
            raise AssertionError(f"No canned response for {operation.name}")
        # The last queued response keeps answering once the others are used up
        response = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(call)
        return response

    async def close(self) -> None:
        self.closed = True


def pristine_settings(monkeypatch) -> Settings:
    """Install default settings, ignoring MIZU_* variables and any .env file."""
    for name in list(os.environ):
        if name.upper().startswith("MIZU_"):
            monkeypatch.delenv(name)
    fresh = Settings(_env_file=None)
    monkeypatch.setattr(config, "settings", fresh)
    return fresh
