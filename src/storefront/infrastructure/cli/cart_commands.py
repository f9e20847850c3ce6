"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.checkout import CheckoutHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.dto import CartDTO
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart_quantity import UpdateCartQuantityHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import cart_store, product_repository


def _store(obj: dict):
    return cart_store(obj["settings"], session=obj["session"])


def _display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying the cart."""
    if not dto.items:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'Line':<28} {'Product':<24} {'Qty':>4} {'Price':>10} {'Total':>12}")
    click.echo(f"  {'-'*82}")
    for item in dto.items:
        click.echo(
            f"  {item.id:<28} {item.product_name:<24} {item.quantity:>4} "
            f"{item.unit_price:>10} {item.line_total:>12}"
        )
    click.echo(f"  {'-'*82}")
    click.echo(f"  {'Items':<28} {dto.item_count:>29}")
    click.echo(f"  {'Cart Total':<28} {dto.total:>53}")
    if not dto.persistent:
        click.echo("Warning: cart storage unavailable, changes last only for this run.", err=True)


@click.command("add")
@click.option("--product", "product_ref", required=True, help="Product id, slug or name.")
@click.option("--size", default=None, help="Size (talle).")
@click.option("--color", default=None, help="Color.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
@click.pass_obj
def cart_add(obj: dict, product_ref: str, size: str | None, color: str | None, quantity: int) -> None:
    """Add a product to the cart."""
    config = obj["settings"]

    try:
        handler = AddToCartHandler(
            product_repo=product_repository(config),
            cart_store=_store(obj),
            locale=config.locale,
        )
        dto = handler.handle(product_ref, size=size, color=color, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added {quantity} x '{product_ref}' to the cart.")
    _display_cart(dto)


@click.command("remove")
@click.option("--line", "line_id", required=True, help="Cart line id (see 'cart show').")
@click.pass_obj
def cart_remove(obj: dict, line_id: str) -> None:
    """Remove a line from the cart."""
    handler = RemoveFromCartHandler(cart_store=_store(obj), locale=obj["settings"].locale)
    dto = handler.handle(line_id)
    _display_cart(dto)


@click.command("update")
@click.option("--line", "line_id", required=True, help="Cart line id (see 'cart show').")
@click.option("--quantity", required=True, type=int, help="New quantity; 0 removes the line.")
@click.pass_obj
def cart_update(obj: dict, line_id: str, quantity: int) -> None:
    """Change the quantity of a cart line."""
    handler = UpdateCartQuantityHandler(cart_store=_store(obj), locale=obj["settings"].locale)

    try:
        dto = handler.handle(line_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("clear")
@click.pass_obj
def cart_clear(obj: dict) -> None:
    """Empty the cart."""
    removed = ClearCartHandler(cart_store=_store(obj)).handle()
    click.echo(f"Cart cleared ({removed} unit(s) removed).")


@click.command("show")
@click.pass_obj
def cart_show(obj: dict) -> None:
    """Show the cart contents and total."""
    _display_cart(ShowCartHandler(cart_store=_store(obj), locale=obj["settings"].locale).handle())


@click.command("checkout")
@click.option("--keep", is_flag=True, default=False, help="Keep the cart after checkout.")
@click.option("--message-only", is_flag=True, default=False, help="Print the order text instead of the link.")
@click.pass_obj
def cart_checkout(obj: dict, keep: bool, message_only: bool) -> None:
    """Build the WhatsApp order link for the cart."""
    config = obj["settings"]
    handler = CheckoutHandler(
        cart_store=_store(obj),
        whatsapp_number=config.whatsapp_number,
        locale=config.locale,
    )

    try:
        dto = handler.handle(keep_cart=keep)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(dto.message if message_only else dto.link)
