#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright (C) 2023 Benjamin Thomas Schwertfeger
# GitHub: https://github.com/btschwertfeger
#

import sys
from collections.abc import Callable
from logging import DEBUG, INFO, WARNING, basicConfig, getLogger
from typing import Any, TypeVar

from click import STRING, Context, echo, pass_context
from cloup import Choice, HelpFormatter, HelpTheme, Style, argument, group, option
from pydantic import BaseModel, TypeAdapter, ValidationError

from easybit.client import EasybitClient
from easybit.exceptions import EasybitError
from easybit.models.domain import (
    AmountType,
    OrderStatus,
    SortDirection,
    VolatilityProtection,
)
from easybit.models.dto.configuration import DEFAULT_URL

T = TypeVar("T")

FORMATTER_SETTINGS = HelpFormatter.settings(
    theme=HelpTheme(
        invoked_command=Style(fg="bright_yellow"),
        heading=Style(fg="bright_white", bold=True),
        constraint=Style(fg="magenta"),
        col1=Style(fg="bright_yellow"),
    ),
)


def print_version(ctx: Context, param: Any, value: Any) -> None:  # noqa: ANN401, ARG001
    """Prints the version of the package"""
    if not value or ctx.resilient_parsing:
        return
    from importlib.metadata import (  # noqa: PLC0415 # pylint: disable=import-outside-toplevel
        version,
    )

    echo(version("easybit"))
    ctx.exit()


def run_and_print(ctx: Context, func: Callable[[EasybitClient], T]) -> T:
    """
    Run an operation with the client of the context and print its result as
    JSON. Errors are reported on stderr with exit code 1.
    """
    try:
        result = func(ctx.obj["client"])
    except ValidationError as exc:
        ctx.fail(str(exc))
    except EasybitError as exc:
        echo(f"Error: {exc}", err=True)
        ctx.exit(1)

    if result is None:
        echo("OK")
    elif isinstance(result, BaseModel):
        echo(result.model_dump_json(indent=2))
    else:
        echo(TypeAdapter(type(result)).dump_json(result, indent=2).decode())
    return result


@group(
    context_settings={
        "auto_envvar_prefix": "EASYBIT",
        "help_option_names": ["-h", "--help"],
    },
    formatter_settings=FORMATTER_SETTINGS,
    no_args_is_help=True,
)
@option(
    "--version",
    is_flag=True,
    callback=print_version,
    expose_value=False,
    is_eager=True,
)
@option(
    "--url",
    required=False,
    type=STRING,
    default=DEFAULT_URL,
    show_default=True,
    help="The base URL of the easybit API",
)
@option(
    "--api-key",
    required=True,
    type=STRING,
    help="The easybit API key",
)
@option(
    "-v",
    "--verbose",
    count=True,
    help="Increase the verbosity of output. Use -vv for even more verbosity.",
)
@pass_context
def cli(ctx: Context, **kwargs: dict) -> None:
    """
    Command-line interface entry point
    """
    ctx.ensure_object(dict)
    ctx.obj |= kwargs

    verbosity = kwargs.get("verbose", 0)

    basicConfig(
        format="%(asctime)s %(levelname)8s | %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S",
        level=WARNING if verbosity == 0 else (INFO if verbosity == 1 else DEBUG),
    )

    if verbosity > 1:  # type: ignore[operator]
        getLogger("requests").setLevel(DEBUG)
        getLogger("urllib3").setLevel(DEBUG)
    else:
        getLogger("requests").setLevel(WARNING)
        getLogger("urllib3").setLevel(WARNING)

    try:
        client = EasybitClient(url=kwargs["url"], api_key=kwargs["api_key"])
    except ValidationError as exc:
        ctx.fail(str(exc))
    ctx.obj["client"] = client
    ctx.call_on_close(client.close)


@cli.command(formatter_settings=FORMATTER_SETTINGS)
@pass_context
def account(ctx: Context) -> None:
    """Show level, volume and fees of the account."""
    run_and_print(ctx, lambda client: client.get_account())


@cli.command(name="set-fee", formatter_settings=FORMATTER_SETTINGS)
@argument("fee", type=STRING)
@pass_context
def set_fee(ctx: Context, fee: str) -> None:
    """Set the extra fee (0-0.1, step 0.0001), e.g. 0.004 for 0.4 %."""
    run_and_print(ctx, lambda client: client.set_fee(fee))


@cli.command(formatter_settings=FORMATTER_SETTINGS)
@option("--currency", type=STRING, help="Only list this currency.")
@pass_context
def currencies(ctx: Context, currency: str | None) -> None:
    """List the supported currencies and their networks."""
    run_and_print(ctx, lambda client: client.get_currency_list(currency=currency))


@cli.command(formatter_settings=FORMATTER_SETTINGS)
@argument("code", type=STRING)
@pass_context
def currency(ctx: Context, code: str) -> None:
    """Show a single currency."""
    run_and_print(ctx, lambda client: client.get_single_currency(code))


@cli.command(formatter_settings=FORMATTER_SETTINGS)
@pass_context
def pairs(ctx: Context) -> None:
    """List the supported pairs."""
    run_and_print(ctx, lambda client: client.get_pair_list())


@cli.command(name="pair-info", formatter_settings=FORMATTER_SETTINGS)
@option("--send", required=True, type=STRING, help="The currency to send.")
@option("--receive", required=True, type=STRING, help="The currency to receive.")
@option("--send-network", type=STRING, help="The network to send on.")
@option("--receive-network", type=STRING, help="The network to receive on.")
@option(
    "--amount-type",
    type=Choice(choices=[a.value for a in AmountType], case_sensitive=True),
    help="Whether amounts refer to the sent or the received currency.",
)
@pass_context
def pair_info(ctx: Context, **kwargs: Any) -> None:  # noqa: ANN401
    """Show the bounds and fees of a pair."""
    run_and_print(ctx, lambda client: client.get_pair_info(**kwargs))


@cli.command(formatter_settings=FORMATTER_SETTINGS)
@option("--send", required=True, type=STRING, help="The currency to send.")
@option("--receive", required=True, type=STRING, help="The currency to receive.")
@option("--amount", required=True, type=STRING, help="The amount to exchange.")
@option("--send-network", type=STRING, help="The network to send on.")
@option("--receive-network", type=STRING, help="The network to receive on.")
@option(
    "--amount-type",
    type=Choice(choices=[a.value for a in AmountType], case_sensitive=True),
    help="Whether the amount refers to the sent or the received currency.",
)
@option("--extra-fee-override", type=STRING, help="Replaces the account extra fee.")
@pass_context
def rate(ctx: Context, **kwargs: Any) -> None:  # noqa: ANN401
    """Get an exchange rate quote."""
    run_and_print(ctx, lambda client: client.get_exchange_rate(**kwargs))


@cli.command(name="validate-address", formatter_settings=FORMATTER_SETTINGS)
@option("--currency", required=True, type=STRING, help="The currency code.")
@option("--address", required=True, type=STRING, help="The address to validate.")
@option("--network", type=STRING, help="The network of the address.")
@option("--tag", type=STRING, help="The tag/memo of the address.")
@pass_context
def validate_address(ctx: Context, **kwargs: Any) -> None:  # noqa: ANN401
    """Validate an address."""
    run_and_print(ctx, lambda client: client.validate_address(**kwargs))


@cli.command(name="create-order", formatter_settings=FORMATTER_SETTINGS)
@option("--send", required=True, type=STRING, help="The currency to send.")
@option("--receive", required=True, type=STRING, help="The currency to receive.")
@option("--amount", required=True, type=STRING, help="The amount to send.")
@option("--receive-address", required=True, type=STRING, help="The payout address.")
@option("--send-network", type=STRING, help="The network to send on.")
@option("--receive-network", type=STRING, help="The network to receive on.")
@option("--receive-tag", type=STRING, help="The tag/memo of the payout address.")
@option("--extra-fee-override", type=STRING, help="Replaces the account extra fee.")
@option(
    "--vpm",
    type=Choice(choices=[v.value for v in VolatilityProtection], case_sensitive=True),
    help="The volatility protection mode.",
)
@option("--refund-address", type=STRING, help="The refund address.")
@option("--refund-tag", type=STRING, help="The tag/memo of the refund address.")
@option("--user-id", type=STRING, help="Your ID of the user, leave out for guests.")
@option("--user-device-id", type=STRING, help="Unique device ID of the user.")
@option("--payload", type=STRING, help="Hash of the easybit identification script.")
@pass_context
def create_order(ctx: Context, **kwargs: Any) -> None:  # noqa: ANN401
    """Create a new order."""
    run_and_print(ctx, lambda client: client.create_order(**kwargs))


@cli.command(name="order-status", formatter_settings=FORMATTER_SETTINGS)
@argument("order_id", type=STRING)
@pass_context
def order_status(ctx: Context, order_id: str) -> None:
    """Show the status of an order."""
    run_and_print(ctx, lambda client: client.get_order_status(order_id))


@cli.command(formatter_settings=FORMATTER_SETTINGS)
@option("--id", "order_id", type=STRING, help="Only show this order.")
@option("--limit", type=int, help="Maximum number of orders.")
@option("--date-from", type=int, help="Start date in milliseconds since epoch.")
@option("--date-to", type=int, help="End date in milliseconds since epoch.")
@option(
    "--sort-direction",
    type=Choice(choices=[s.value for s in SortDirection], case_sensitive=True),
    help="Sort by creation date.",
)
@option(
    "--status",
    type=Choice(choices=[s.value for s in OrderStatus], case_sensitive=True),
    help="Only show orders with this status.",
)
@pass_context
def orders(ctx: Context, **kwargs: Any) -> None:  # noqa: ANN401
    """List the orders of the account."""
    run_and_print(ctx, lambda client: client.get_orders(**kwargs))


@cli.command(formatter_settings=FORMATTER_SETTINGS)
@argument("order_id", type=STRING)
@option("--refund-address", required=True, type=STRING, help="The refund address.")
@option("--refund-tag", type=STRING, help="The tag/memo of the refund address.")
@option(
    "-f",
    "--force",
    required=False,
    is_flag=True,
    default=False,
    show_default=True,
)
@pass_context
def refund(
    ctx: Context,
    order_id: str,
    refund_address: str,
    refund_tag: str | None,
    force: bool,
) -> None:
    """Request the refund of an order in "Action Request"."""
    if not force:
        echo("Not refunding -f is required!", err=True)
        sys.exit(1)
    run_and_print(
        ctx,
        lambda client: client.refund_order(order_id, refund_address, refund_tag),
    )
