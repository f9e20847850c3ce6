"""Domain service: WhatsApp deep links.

A deep link opens WhatsApp with a chat to the destination number and the
message already typed in. The message is escaped exactly like the
browser's ``encodeURIComponent`` so the receiving app decodes the very
same text, newlines and emoji included.
"""

from __future__ import annotations

import re
from urllib.parse import parse_qs, quote, urlsplit

from storefront.domain.exceptions import ValidationError

WHATSAPP_BASE_URL = "https://wa.me/"

# Unreserved marks left alone by encodeURIComponent on top of the
# characters urllib.parse.quote never escapes.
_URI_COMPONENT_SAFE = "!*'()"
_NON_DIGITS = re.compile(r"\D")


def clean_phone_number(phone_number: str) -> str:
    """``"+54 9 11 5630-8907"`` -> ``"5491156308907"``."""
    digits = _NON_DIGITS.sub("", phone_number or "")
    if not digits:
        raise ValidationError(f"Invalid WhatsApp number: {phone_number!r}")
    return digits


def encode_message(message: str) -> str:
    return quote(message, safe=_URI_COMPONENT_SAFE, encoding="utf-8")


def build_whatsapp_link(phone_number: str, message: str) -> str:
    """Return ``https://wa.me/<digits>?text=<escaped message>``."""
    return f"{WHATSAPP_BASE_URL}{clean_phone_number(phone_number)}?text={encode_message(message)}"


def parse_whatsapp_link(link: str) -> tuple[str, str]:
    """Inverse of ``build_whatsapp_link``: return ``(digits, message)``."""
    parts = urlsplit(link)
    if parts.netloc != "wa.me":
        raise ValidationError(f"Not a WhatsApp link: {link!r}")
    params = parse_qs(parts.query, keep_blank_values=True)
    message = params.get("text", [""])[0]
    return parts.path.lstrip("/"), message
