"""Application service: Add Product use case."""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product, slugify
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        sizes: list[str] | None = None,
        colors: list[str] | None = None,
    ) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._product_repo.get_by_name(name.strip())
        if existing is not None:
            raise ValidationError(f"Product '{name}' already exists")

        slug = slugify(name)
        if not slug:
            raise ValidationError(f"Cannot derive a slug from '{name}'")
        if self._product_repo.get_by_slug(slug) is not None:
            raise ValidationError(f"Slug '{slug}' is already taken")

        # Auto-assign ID based on existing products
        all_products = self._product_repo.list_all()
        numeric_ids = [int(p.id) for p in all_products if str(p.id).isdigit()]
        next_id = str(max(numeric_ids) + 1) if numeric_ids else "1"

        product = Product(
            id=next_id,
            name=name.strip(),
            slug=slug,
            price=Money.of(price),
            sizes=[s.strip() for s in sizes or [] if s.strip()],
            colors=[c.strip() for c in colors or [] if c.strip()],
        )
        self._product_repo.save(product)
        return product
