"""Integration tests for the cart use cases.

Uses in-memory fake repositories, no file I/O.
"""

import pytest

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.cart_store import CartStore
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart_quantity import UpdateCartQuantityHandler
from storefront.domain.exceptions import EntityNotFoundError, InvalidProductError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeCartRepository, FakeProductRepository


def _setup() -> tuple[AddToCartHandler, CartStore, FakeProductRepository]:
    products = [
        Product(id="1", name="Conjunto Encaje", price=Money.of("15000"),
                sizes=["S", "M", "L"], colors=["Negro", "Rojo"]),
        Product(id="2", name="Bombacha Algodón", price=Money.of("4500")),
        Product(id="3", name="Sin Precio", price=None),
    ]
    product_repo = FakeProductRepository(products)
    store = CartStore(FakeCartRepository(), "test")
    return AddToCartHandler(product_repo, store), store, product_repo


class TestAddToCart:

    def test_adds_by_id(self):
        handler, _, _ = _setup()
        dto = handler.handle("1", size="M", color="Negro")
        assert dto.item_count == 1
        assert dto.total == "$15.000"
        assert dto.items[0].id == "1-M-Negro"

    def test_adds_by_slug(self):
        handler, _, _ = _setup()
        dto = handler.handle("bombacha-algodon", quantity=2)
        assert dto.items[0].product_name == "Bombacha Algodón"
        assert dto.total == "$9.000"

    def test_adds_by_name(self):
        handler, _, _ = _setup()
        dto = handler.handle("conjunto encaje", size="S")
        assert dto.items[0].size == "S"

    def test_adding_same_product_twice_merges_quantities(self):
        handler, store, product_repo = _setup()
        product_repo.save(Product(id="A", name="Producto A", price=Money.of("1000")))
        handler.handle("A", quantity=1)
        dto = handler.handle("A", quantity=2)
        assert len(dto.items) == 1
        assert dto.items[0].quantity == 3
        assert store.get_total() == Money.of("3000")

    def test_unknown_product_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            handler.handle("nope")

    def test_malformed_product_rejected(self):
        handler, store, _ = _setup()
        with pytest.raises(InvalidProductError, match="has no price"):
            handler.handle("3")
        assert store.is_empty

    def test_unoffered_size_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="Size 'XL'"):
            handler.handle("1", size="XL")


class TestOtherCartUseCases:

    def test_show_cart(self):
        handler, store, _ = _setup()
        handler.handle("1", size="M", quantity=2)
        dto = ShowCartHandler(store).handle()
        assert dto.item_count == 2
        assert dto.items[0].unit_price == "$15.000"
        assert dto.items[0].line_total == "$30.000"

    def test_update_quantity(self):
        handler, store, _ = _setup()
        handler.handle("2")
        dto = UpdateCartQuantityHandler(store).handle("2-no-size-no-color", 4)
        assert dto.item_count == 4
        assert dto.total == "$18.000"

    def test_update_to_zero_removes(self):
        handler, store, _ = _setup()
        handler.handle("2")
        dto = UpdateCartQuantityHandler(store).handle("2-no-size-no-color", 0)
        assert dto.items == []
        assert dto.total == "$0"

    def test_update_unknown_line_rejected(self):
        _, store, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            UpdateCartQuantityHandler(store).handle("missing", 2)

    def test_remove_unknown_line_is_noop(self):
        handler, store, _ = _setup()
        handler.handle("2")
        dto = RemoveFromCartHandler(store).handle("missing")
        assert dto.item_count == 1

    def test_clear_reports_removed_units(self):
        handler, store, _ = _setup()
        handler.handle("1", size="M", quantity=2)
        handler.handle("2")
        assert ClearCartHandler(store).handle() == 3
        assert store.get_item_count() == 0
