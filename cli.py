#!/usr/bin/env python3
"""Simple CLI for exercising the Mizu wallet backend locally"""

import argparse
import asyncio
import sys
from typing import Optional

from mizu import MizuClient, MizuError
from mizu.config import settings
from mizu.logging_config import setup_logging
from mizu.orders import OrderPage
from mizu.transfers import Transfer


def print_orders(page: OrderPage):
    """Pretty print a page of orders"""
    pagination = page.pagination
    print(f"\n📦 Orders {pagination.offset + 1}-{pagination.offset + len(page.data)} of {pagination.total}")
    print("=" * 50)

    if not page.data:
        print("No orders found")
        return

    for order in page.data:
        created = order.created_at.isoformat() if order.created_at else "-"
        print(f"{order.id}  {order.status.name:<10} {created}")
        for tx in order.transactions:
            print(f"    tx {tx.hash or '-'} gas={tx.gas_fee}")


def print_transfer(transfer: Optional[Transfer]):
    """Pretty print a transfer and its claims"""
    if transfer is None:
        print("❌ Transfer not found")
        return

    print(f"\n🎁 Transfer {transfer.id}")
    print("=" * 50)
    print(f"Owner:      {transfer.wallet_user_id}")
    print(f"Amount:     {transfer.total_amount}")
    print(f"Claims:     {transfer.claim_count}/{transfer.total_count}")
    print(f"Expires at: {transfer.expiration_at}")
    print(f"Refunded:   {'yes' if transfer.is_refund else 'no'}")
    for claim in transfer.claims:
        print(f"  - {claim.wallet_user_id} at {claim.created_at}")


def build_client(args) -> MizuClient:
    app_id = args.app_id or settings.app_id
    network = args.network or settings.network
    return MizuClient(app_id=app_id, network=network)


async def cli_user_exists(args):
    async with build_client(args) as client:
        exists = await client.check_user_exists(args.tg_id)
    print("✅ User exists" if exists else "❌ No wallet user for this Telegram id")


async def cli_orders(args):
    async with build_client(args) as client:
        await client.login_with_identity(args.init_data)
        page = await client.fetch_order_list(
            limit=args.limit,
            offset=args.offset,
            status=args.status,
        )
    print_orders(page)


async def cli_transfer(args):
    async with build_client(args) as client:
        await client.login_with_identity(args.init_data)
        transfer = await client.fetch_transfer(args.transfer_id)
    print_transfer(transfer)


async def cli_claim(args):
    async with build_client(args) as client:
        await client.login_with_identity(args.init_data)
        claimed = await client.claim_transfer(args.claim_parameter)
    print("✅ Claimed" if claimed else "❌ Claim rejected")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mizu wallet CLI")
    parser.add_argument("--app-id", help="Application ID (default: MIZU_APP_ID)")
    parser.add_argument("--network", choices=["mainnet", "testnet"], help="Network (default: MIZU_NETWORK)")
    parser.add_argument("--log-level", help="Log level (default: MIZU_LOG_LEVEL)")
    parser.add_argument(
        "--console-logs",
        action="store_true",
        help="Human-readable logs instead of JSON (default: MIZU_LOG_JSON)",
    )
    subparsers = parser.add_subparsers(dest="command")

    exists_parser = subparsers.add_parser("user-exists", help="Check whether a Telegram user has a wallet")
    exists_parser.add_argument("tg_id", help="Telegram user id")

    orders_parser = subparsers.add_parser("orders", help="List orders of the logged-in user")
    orders_parser.add_argument("--init-data", required=True, help="Telegram Mini App initData")
    orders_parser.add_argument("--limit", type=int, default=10, help="Page size (default: 10)")
    orders_parser.add_argument("--offset", type=int, default=0, help="Orders to skip (default: 0)")
    orders_parser.add_argument(
        "--status",
        action="append",
        choices=["PENDING", "CONFIRMED", "EXECUTED", "SUCCESS", "FAIL", "CANCELED"],
        help="Status filter, repeatable (default: SUCCESS)",
    )

    transfer_parser = subparsers.add_parser("transfer", help="Show a transfer and its claims")
    transfer_parser.add_argument("transfer_id", help="Transfer ID")
    transfer_parser.add_argument("--init-data", required=True, help="Telegram Mini App initData")

    claim_parser = subparsers.add_parser("claim", help="Claim a transfer")
    claim_parser.add_argument("claim_parameter", help="Claim parameter from the transfer link")
    claim_parser.add_argument("--init-data", required=True, help="Telegram Mini App initData")

    return parser


COMMANDS = {
    "user-exists": cli_user_exists,
    "orders": cli_orders,
    "transfer": cli_transfer,
    "claim": cli_claim,
}


async def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_logging(args.log_level, json_logs=False if args.console_logs else None)

    handler = COMMANDS.get(args.command)
    if handler is None:
        print(f"❌ Unknown command: {args.command}")
        parser.print_help()
        return 2

    try:
        await handler(args)
    except MizuError as e:
        print(f"❌ {type(e).__name__}: {e}")
        return 1
    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
