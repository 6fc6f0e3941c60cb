# src/shop/domain/models.py
from __future__ import annotations

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Entity: Product
# Identität ausschließlich über `id`; name/producer sind reine Nutzdaten.
# ---------------------------------------------------------------------------


class Product(BaseModel):
    """
    Produkt im Shop.
    Zwei Produkte mit gleicher `id` gelten als dieselbe Entität, unabhängig
    von `name` und `producer`. Der Shop bildet das über eine id-Map ab.
    """

    id: str = Field(description="Eindeutiger Identifier des Produkts")
    name: str = ""
    producer: str = ""

    model_config = {"frozen": True}

    @classmethod
    def identity(cls, product_id: str) -> Product:
        """Synthetic product carrying only an id, used for identity lookups."""
        return cls(id=product_id, name="", producer="")


# ---------------------------------------------------------------------------
# Value Object: ProductStorageData
# ---------------------------------------------------------------------------


class ProductStorageData(BaseModel):
    product: Product
    # Anzahl der Produkte mit exakt gleichem Namen im aktuellen Suchergebnis
    available: int = Field(ge=0)

    model_config = {"frozen": True}
