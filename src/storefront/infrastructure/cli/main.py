import logging

import click

from storefront.infrastructure.bootstrap import settings
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_checkout,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_inquire,
    product_list,
    product_update,
)


@click.group()
@click.option("--session", default=None, help="Cart session key (defaults to STOREFRONT_CART_SESSION).")
@click.pass_context
def cli(ctx: click.Context, session: str | None) -> None:
    """Storefront: cart and WhatsApp order handoff"""
    config = settings()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"settings": config, "session": session or config.cart_session}


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


# Register subcommands
cart.add_command(cart_add)
cart.add_command(cart_checkout)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
product.add_command(product_add)
product.add_command(product_inquire)
product.add_command(product_list)
product.add_command(product_update)
