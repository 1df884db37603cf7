"""
Polymarket Adapter - CLI.

============================================================
RESPONSIBILITY
============================================================
Command-line access to the adapter for manual checks.

- markets : print the market catalog
- account : print the account snapshot
- submit  : submit one order (dry-run unless disabled)

Configuration comes from the environment, optionally loaded
from a .env file first.

============================================================
USAGE
============================================================
python -m polymarket_adapter.cli markets
python -m polymarket_adapter.cli account
python -m polymarket_adapter.cli submit PM_BTC_15M_UP_YES_USDC --price 0.5 --quantity 10

============================================================
"""

import argparse
import asyncio
import logging
import sys
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from .errors import PolymarketAdapterError
from .exchange import PolymarketExchange
from .types import OrderSide, OrderType, SubmitOrder, TimeInForce


logger = logging.getLogger(__name__)


# ============================================================
# LOGGING
# ============================================================

def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# ============================================================
# CLI ARGUMENT PARSER
# ============================================================

def _decimal_arg(value: str) -> Decimal:
    """argparse type for decimal amounts."""
    try:
        return Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid decimal value: {value!r}")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="polymarket-adapter",
        description="Dry-run Polymarket exchange adapter",
    )

    parser.add_argument(
        "--env-file",
        type=str,
        metavar="PATH",
        help="Load environment variables from this .env file",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("markets", help="Print the market catalog")
    subparsers.add_parser("account", help="Print the account snapshot")

    submit = subparsers.add_parser("submit", help="Submit one order")
    submit.add_argument("symbol", type=str)
    submit.add_argument(
        "--side",
        type=str,
        choices=[s.value for s in OrderSide],
        default=OrderSide.BUY.value,
    )
    submit.add_argument(
        "--type",
        dest="order_type",
        type=str,
        choices=[t.value for t in OrderType],
        default=OrderType.LIMIT.value,
    )
    submit.add_argument("--price", type=_decimal_arg, default=Decimal("0"))
    submit.add_argument("--quantity", type=_decimal_arg, required=True)
    submit.add_argument(
        "--time-in-force",
        type=str,
        choices=[t.value for t in TimeInForce],
        default=TimeInForce.GTC.value,
    )
    submit.add_argument("--tag", type=str, default="cli")

    return parser


# ============================================================
# COMMANDS
# ============================================================

async def run_command(args: argparse.Namespace, exchange: PolymarketExchange) -> None:
    """Run the selected command and print its result."""
    if args.command == "markets":
        markets = await exchange.query_markets()
        for symbol in sorted(markets):
            market = markets[symbol]
            print(
                f"{symbol:32s} local={market.local_symbol} "
                f"{market.base_currency}/{market.quote_currency} "
                f"tick={market.tick_size} step={market.step_size} "
                f"min_notional={market.min_notional} min_qty={market.min_quantity}"
            )

    elif args.command == "account":
        account = await exchange.query_account()
        if not account.balances:
            print("No balances configured")
        for currency, balance in sorted(account.balances.items()):
            print(f"{currency}: available={balance.available} locked={balance.locked}")
        print(f"maker_fee={account.maker_fee_rate} taker_fee={account.taker_fee_rate}")

    elif args.command == "submit":
        order = await exchange.submit_order(SubmitOrder(
            symbol=args.symbol,
            side=OrderSide(args.side),
            order_type=OrderType(args.order_type),
            price=args.price,
            quantity=args.quantity,
            time_in_force=TimeInForce(args.time_in_force),
            tag=args.tag,
        ))
        print(order)


# ============================================================
# MAIN ENTRY POINT
# ============================================================

def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Command line arguments (default: sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    if args.env_file:
        load_dotenv(args.env_file)
    else:
        load_dotenv(find_dotenv(usecwd=True))

    exchange = PolymarketExchange()

    try:
        asyncio.run(run_command(args, exchange))
    except PolymarketAdapterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


# ============================================================
# MODULE EXECUTION
# ============================================================

if __name__ == "__main__":
    sys.exit(main())
