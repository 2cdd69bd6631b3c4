"""Catalog seeding at process start.

The catalog is either the built-in default set or a JSON file of the form::

    [{"id": 1, "name": "Product1", "category": "Premium",
      "price": 100.0, "availability": 10}, ...]

Seeding only happens once per process; nothing is written back.
"""

from __future__ import annotations

import json
from pathlib import Path

from orderflow.domain.exceptions import ValidationError
from orderflow.domain.model.product import Product
from orderflow.domain.model.value_objects import Money

DEFAULT_CATALOG: tuple[dict, ...] = (
    {"id": 1, "name": "Product1", "category": "Premium", "price": "100.0", "availability": 10},
    {"id": 2, "name": "Product2", "category": "Regular", "price": "150.0", "availability": 20},
    {"id": 3, "name": "Product3", "category": "Budget", "price": "200.0", "availability": 30},
    {"id": 4, "name": "Product4", "category": "Premium", "price": "100.0", "availability": 50},
    {"id": 5, "name": "Product5", "category": "Premium", "price": "90.0", "availability": 25},
    {"id": 6, "name": "Product6", "category": "Budget", "price": "200.0", "availability": 15},
)


def default_products() -> list[Product]:
    return [_to_domain(raw) for raw in DEFAULT_CATALOG]


def load_products(file_path: Path | None = None) -> list[Product]:
    """Load the seed catalog from *file_path*, or the defaults when None."""
    if file_path is None:
        return default_products()

    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ValidationError(f"Catalog file not found: {file_path}") from exc
    except OSError as exc:
        raise ValidationError(f"Cannot read catalog file {file_path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ValidationError(f"Catalog file {file_path} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Catalog file {file_path} is not valid JSON: {exc}") from exc

    if not isinstance(raw, list):
        raise ValidationError(f"Catalog file {file_path} must contain a JSON list")

    products = [_to_domain(item) for item in raw]
    seen: set[int] = set()
    for product in products:
        if product.id in seen:
            raise ValidationError(f"Duplicate product ID {product.id} in {file_path}")
        seen.add(product.id)
    return products


# --- Serialization ------------------------------------------------------------


def _to_domain(raw: dict) -> Product:
    if not isinstance(raw, dict):
        raise ValidationError(f"Catalog entry must be an object, got {raw!r}")
    try:
        product_id = raw["id"]
        availability = raw["availability"]
        if isinstance(product_id, bool) or not isinstance(product_id, int):
            raise ValidationError(f"Product ID must be an integer, got {product_id!r}")
        if isinstance(availability, bool) or not isinstance(availability, int):
            raise ValidationError(
                f"Availability of product #{product_id} must be an integer"
            )
        return Product(
            id=product_id,
            name=str(raw["name"]),
            category=str(raw["category"]),
            price=Money.of(raw["price"]),
            available_quantity=availability,
        )
    except KeyError as exc:
        raise ValidationError(f"Catalog entry {raw!r} is missing field {exc}") from exc
