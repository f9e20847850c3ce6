"""Application service: Inquire Product use case.

Builds the WhatsApp link behind a product page's "ask about this"
button. Nothing is added to the cart.
"""

from __future__ import annotations

from storefront.application.product_lookup import resolve_product
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.order_message import build_product_inquiry_message
from storefront.domain.service.whatsapp_link import build_whatsapp_link


class InquireProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        whatsapp_number: str,
        storefront_url: str,
    ) -> None:
        self._product_repo = product_repo
        self._whatsapp_number = whatsapp_number
        self._storefront_url = storefront_url.rstrip("/")

    def handle(
        self,
        product_ref: str,
        size: str | None = None,
        color: str | None = None,
    ) -> str:
        product = resolve_product(self._product_repo, product_ref)
        product_url = f"{self._storefront_url}/productos/{product.slug}"
        message = build_product_inquiry_message(product.name, product_url, size=size, color=color)
        return build_whatsapp_link(self._whatsapp_number, message)
