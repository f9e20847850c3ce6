"""Runtime settings read from the environment.

An optional ``.env`` file in the working directory is loaded first;
variables already set in the environment win over it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DEFAULT_WHATSAPP_NUMBER = "+5491156308907"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    whatsapp_number: str
    storefront_url: str
    cart_session: str
    locale: str
    log_level: str

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def carts_file(self) -> Path:
        return self.data_dir / "carts.json"

    @staticmethod
    def from_env() -> Settings:
        load_dotenv()
        data_dir = os.getenv("STOREFRONT_DATA_DIR", "").strip()
        return Settings(
            data_dir=Path(data_dir) if data_dir else DEFAULT_DATA_DIR,
            whatsapp_number=os.getenv("STOREFRONT_WHATSAPP_NUMBER", DEFAULT_WHATSAPP_NUMBER).strip(),
            storefront_url=os.getenv("STOREFRONT_URL", "http://localhost:3000").strip(),
            cart_session=os.getenv("STOREFRONT_CART_SESSION", "default").strip() or "default",
            locale=os.getenv("STOREFRONT_LOCALE", "es-AR").strip(),
            log_level=os.getenv("STOREFRONT_LOG_LEVEL", "WARNING").strip().upper(),
        )
