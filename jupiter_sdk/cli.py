"""CLI entry point: query the Jupiter APIs from the command line."""

import argparse
import json
import logging
from typing import Any

from pydantic import BaseModel

from jupiter_sdk.client import JupiterClient
from jupiter_sdk.config.defaults import DEFAULT_CONFIG_PATH
from jupiter_sdk.config.loader import get_config_value, load_config
from jupiter_sdk.config.schema import JupiterConfig
from jupiter_sdk.errors import RequestError
from jupiter_sdk.models.common import JUP_MINT, SOL_MINT, USDC_MINT, OrderStatus
from jupiter_sdk.models.recurring import GetRecurringOrders, RecurringOrderType
from jupiter_sdk.models.swap import QuoteRequest, SwapMode
from jupiter_sdk.models.trigger import GetTriggerOrders
from jupiter_sdk.models.ultra import UltraOrderRequest

KNOWN_MINTS = {"SOL": SOL_MINT, "USDC": USDC_MINT, "JUP": JUP_MINT}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="jupiter",
        description="Jupiter aggregator API client",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG_PATH, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # quote
    quote_p = sub.add_parser("quote", help="Swap API quote")
    _add_pair_args(quote_p)
    quote_p.add_argument("--slippage-bps", type=int, help="Override configured slippage")
    quote_p.add_argument(
        "--exact-out", action="store_true", help="Treat amount as the output amount"
    )

    # ultra-order
    ultra_p = sub.add_parser("ultra-order", help="Ultra API order (unsigned)")
    _add_pair_args(ultra_p)
    ultra_p.add_argument("--taker", help="Taker wallet, defaults to wallet.address")

    # balances / shield / search / routers / price
    bal_p = sub.add_parser("balances", help="Token balances of a wallet")
    bal_p.add_argument("address", nargs="?", help="Wallet, defaults to wallet.address")
    shield_p = sub.add_parser("shield", help="Token safety warnings")
    shield_p.add_argument("mints", nargs="+")
    search_p = sub.add_parser("search", help="Search tokens by symbol, name or mint")
    search_p.add_argument("query", nargs="+")
    sub.add_parser("routers", help="List Ultra routers")
    price_p = sub.add_parser("price", help="USD prices")
    price_p.add_argument("mints", nargs="+")

    # trigger-orders / recurring-orders
    trig_p = sub.add_parser("trigger-orders", help="List trigger orders")
    _add_order_list_args(trig_p)
    rec_p = sub.add_parser("recurring-orders", help="List recurring orders")
    _add_order_list_args(rec_p)
    rec_p.add_argument(
        "--type", choices=[t.value for t in RecurringOrderType], default="all"
    )

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. client.base_url")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except ValueError as e:
        # pydantic ValidationError included
        print(f"Invalid config: {e}")
        return 1

    if args.command == "config":
        return _cmd_config(config, args)

    client = JupiterClient.from_config(config)
    handlers = {
        "quote": _cmd_quote,
        "ultra-order": _cmd_ultra_order,
        "balances": _cmd_balances,
        "shield": _cmd_shield,
        "search": _cmd_search,
        "routers": _cmd_routers,
        "price": _cmd_price,
        "trigger-orders": _cmd_trigger_orders,
        "recurring-orders": _cmd_recurring_orders,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(client, config, args)
    except RequestError as e:
        print(f"Error: {e}")
        return 1
    except ValueError as e:
        # pydantic ValidationError from request construction
        print(f"Invalid arguments: {e}")
        return 1


def _add_pair_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--input-mint", required=True, help="Mint address or SOL/USDC/JUP")
    p.add_argument("--output-mint", required=True, help="Mint address or SOL/USDC/JUP")
    p.add_argument("--amount", type=int, required=True, help="Raw amount (before decimals)")


def _add_order_list_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--user", help="Wallet, defaults to wallet.address")
    p.add_argument("--history", action="store_true", help="Closed orders instead of active")
    p.add_argument("--page", type=int, default=1)


def _resolve_mint(value: str) -> str:
    return KNOWN_MINTS.get(value.upper(), value)


def _wallet(value: str | None, config: JupiterConfig) -> str:
    address = value or config.wallet.address
    if not address:
        raise ValueError("no wallet address given and wallet.address is not configured")
    return address


def _to_jsonable(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(obj, dict):
        return {k: _to_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_to_jsonable(v) for v in obj]
    return obj


def _print_json(obj: Any) -> None:
    print(json.dumps(_to_jsonable(obj), indent=2))


def _cmd_quote(client: JupiterClient, config: JupiterConfig, args) -> int:
    request = (
        QuoteRequest(
            input_mint=_resolve_mint(args.input_mint),
            output_mint=_resolve_mint(args.output_mint),
            amount=args.amount,
        )
        .with_slippage_bps(
            args.slippage_bps if args.slippage_bps is not None else config.swap.slippage_bps
        )
        .with_swap_mode(SwapMode.EXACT_OUT if args.exact_out else config.swap.swap_mode)
        .with_restrict_intermediate_tokens(config.swap.restrict_intermediate_tokens)
    )
    _print_json(client.get_quote(request))
    return 0


def _cmd_ultra_order(client: JupiterClient, config: JupiterConfig, args) -> int:
    request = UltraOrderRequest(
        input_mint=_resolve_mint(args.input_mint),
        output_mint=_resolve_mint(args.output_mint),
        amount=args.amount,
    )
    taker = args.taker or config.wallet.address
    if taker:
        request.with_taker(taker)
    if config.swap.exclude_routers:
        request.with_exclude_routers(config.swap.exclude_routers)
    _print_json(client.get_ultra_order(request))
    return 0


def _cmd_balances(client: JupiterClient, config: JupiterConfig, args) -> int:
    _print_json(client.get_token_balances(_wallet(args.address, config)))
    return 0


def _cmd_shield(client: JupiterClient, config: JupiterConfig, args) -> int:
    _print_json(client.shield([_resolve_mint(m) for m in args.mints]))
    return 0


def _cmd_search(client: JupiterClient, config: JupiterConfig, args) -> int:
    tokens = client.token_search(args.query)
    for t in tokens:
        price = f"${t.usd_price:.6f}" if t.usd_price is not None else "n/a"
        print(f"{t.symbol:<10} {t.id} {price}")
    return 0


def _cmd_routers(client: JupiterClient, config: JupiterConfig, args) -> int:
    for r in client.routers():
        print(f"{r.id:<12} {r.name}")
    return 0


def _cmd_price(client: JupiterClient, config: JupiterConfig, args) -> int:
    mints = [_resolve_mint(m) for m in args.mints]
    prices = client.get_tokens_price(mints)
    for mint in mints:
        p = prices.get(mint)
        print(f"{mint}: {p.usd_price if p is not None else 'no price'}")
    return 0


def _cmd_trigger_orders(client: JupiterClient, config: JupiterConfig, args) -> int:
    request = GetTriggerOrders(
        user=_wallet(args.user, config),
        order_status=OrderStatus.HISTORY if args.history else OrderStatus.ACTIVE,
    ).with_page(args.page)
    result = client.get_trigger_orders(request)
    print(f"Page {result.page}/{result.total_pages} | Orders: {len(result.orders)}")
    for o in result.orders:
        print(
            f"  {o.order_key} {o.making_amount} {o.input_mint[:6]}.. -> "
            f"{o.taking_amount} {o.output_mint[:6]}.. [{o.status}]"
        )
    return 0


def _cmd_recurring_orders(client: JupiterClient, config: JupiterConfig, args) -> int:
    request = GetRecurringOrders(
        recurring_type=RecurringOrderType(args.type),
        order_status=OrderStatus.HISTORY if args.history else OrderStatus.ACTIVE,
        user=_wallet(args.user, config),
    ).with_page(args.page)
    _print_json(client.get_recurring_orders(request))
    return 0


def _cmd_config(config: JupiterConfig, args) -> int:
    if args.config_command == "show":
        masked = "***" if config.client.api_key else ""
        shown = config.model_copy(
            update={"client": config.client.model_copy(update={"api_key": masked})}
        )
        print(shown.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
            return 0
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config get key")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
