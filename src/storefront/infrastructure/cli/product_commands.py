"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.dto import ProductDTO
from storefront.application.inquire_product import InquireProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import product_repository


def _split(raw: str | None) -> list[str]:
    """Parse 'S,M,L' into ['S', 'M', 'L']."""
    return [part.strip() for part in (raw or "").split(",") if part.strip()]


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price in pesos (e.g. 15000).")
@click.option("--sizes", default=None, help="Sizes as 'S,M,L'.")
@click.option("--colors", default=None, help="Colors as 'Negro,Blanco'.")
@click.pass_obj
def product_add(obj: dict, name: str, price: str, sizes: str | None, colors: str | None) -> None:
    """Add a new product to the catalog."""
    try:
        handler = AddProductHandler(product_repo=product_repository(obj["settings"]))
        product = handler.handle(name=name, price=price, sizes=_split(sizes), colors=_split(colors))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.option("--all", "show_all", is_flag=True, default=False, help="Include inactive products.")
@click.pass_obj
def product_list(obj: dict, show_all: bool) -> None:
    """List products in the catalog."""
    config = obj["settings"]

    try:
        catalog = product_repository(config).list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    products = [
        ProductDTO.from_product(p, config.locale)
        for p in catalog
        if show_all or p.is_active
    ]

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<28} {'Price':>10}  {'Sizes':<14} {'Colors'}")
    click.echo("-" * 72)
    for p in products:
        name = p.name if p.is_active else f"{p.name} (inactive)"
        click.echo(
            f"{p.id:<6} {name:<28} {p.price:>10}  {','.join(p.sizes):<14} {','.join(p.colors)}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 18500).")
@click.option("--active/--inactive", "is_active", default=None, help="Show or hide the product.")
@click.pass_obj
def product_update(obj: dict, product_id: str, price: str | None, is_active: bool | None) -> None:
    """Update a product's price or availability."""
    try:
        handler = UpdateProductHandler(product_repo=product_repository(obj["settings"]))
        product = handler.handle(product_id=product_id, new_price=price, is_active=is_active)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    dto = ProductDTO.from_product(product, obj["settings"].locale)
    state = "active" if dto.is_active else "inactive"
    click.echo(f"Product #{dto.id} updated: {dto.price} ({state})")


@click.command("inquire")
@click.option("--product", "product_ref", required=True, help="Product id, slug or name.")
@click.option("--size", default=None, help="Size (talle).")
@click.option("--color", default=None, help="Color.")
@click.pass_obj
def product_inquire(obj: dict, product_ref: str, size: str | None, color: str | None) -> None:
    """Print the WhatsApp link asking the shop about a product."""
    config = obj["settings"]

    try:
        handler = InquireProductHandler(
            product_repo=product_repository(config),
            whatsapp_number=config.whatsapp_number,
            storefront_url=config.storefront_url,
        )
        link = handler.handle(product_ref, size=size, color=color)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(link)
