"""Shared product resolution for use cases that take a product reference."""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


def resolve_product(product_repo: ProductRepository, product_ref: str) -> Product:
    """Find a product by id, then by slug, then by name."""
    ref = (product_ref or "").strip()
    product = (
        product_repo.get_by_id(ref)
        or product_repo.get_by_slug(ref)
        or product_repo.get_by_name(ref)
    )
    if product is None:
        raise EntityNotFoundError(f"Product not found: '{product_ref}'")
    return product
