"""Application service: Add To Cart use case.

Coordinates the catalog (Product lookup) with the session's cart store.
"""

from __future__ import annotations

from storefront.application.cart_store import CartStore
from storefront.application.dto import CartDTO
from storefront.application.product_lookup import resolve_product
from storefront.domain.repository.product_repository import ProductRepository


class AddToCartHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        cart_store: CartStore,
        locale: str = "es-AR",
    ) -> None:
        self._product_repo = product_repo
        self._cart_store = cart_store
        self._locale = locale

    def handle(
        self,
        product_ref: str,
        size: str | None = None,
        color: str | None = None,
        quantity: int = 1,
    ) -> CartDTO:
        """Put *quantity* units of the referenced product in the cart.

        Steps:
        1. Resolve the product by id, slug or name (fail if not found).
        2. Let the Cart aggregate validate and merge the line.
        3. Return the updated cart as a DTO.
        """
        product = resolve_product(self._product_repo, product_ref)
        self._cart_store.add_item(product, size=size, color=color, quantity=quantity)
        return CartDTO.from_cart(
            self._cart_store.snapshot(), self._locale, self._cart_store.is_persistent
        )
