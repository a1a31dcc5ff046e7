"""JSON-file-backed implementation of CategoryRepository.

Products are stored inside their category's record, so removing a
category removes its products with it.  Both the removal and a save that
drops a product are refused while an order line still points at one of
those products.  Category names are unique.
"""

from __future__ import annotations

import logging
from pathlib import Path

from petstore.domain import constraints
from petstore.domain.exceptions import DuplicateEntityError, EntityInUseError
from petstore.domain.model.category import Category, Product
from petstore.domain.repository.category_repository import CategoryRepository
from petstore.infrastructure.persistence.json_file import JsonFile, OrderReferences

logger = logging.getLogger(__name__)


class JsonCategoryRepository(CategoryRepository):

    def __init__(self, file_path: Path, orders_file: Path) -> None:
        self._file = JsonFile(file_path)
        self._orders = OrderReferences(orders_file)

    # --- CategoryRepository interface -----------------------------------------

    def get_by_id(self, category_id: int) -> Category | None:
        for raw in self._file.load():
            if raw["id"] == category_id:
                return self._to_domain(raw)
        return None

    def find_by_name(self, name: str) -> Category | None:
        for raw in self._file.load():
            if raw["name"] == name:
                return self._to_domain(raw)
        return None

    def get_product_by_id(self, product_id: int) -> Product | None:
        for raw in self._file.load():
            if any(p["id"] == product_id for p in raw["products"]):
                category = self._to_domain(raw)
                for product in category.products or []:
                    if product.id == product_id:
                        return product
        return None

    def find_all(self) -> list[Category]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, category: Category) -> None:
        constraints.check(category)
        for product in category.products or []:
            product.category = category
            constraints.check(product)

        categories = self._file.load()
        for raw in categories:
            if raw["name"] == category.name and raw["id"] != category.id:
                raise DuplicateEntityError(f"Category '{category.name}' already exists")
        self._guard_dropped_products(category, categories)
        if category.id is None:
            category.id = self._file.next_id(categories)

        next_product_id = self._next_product_id(categories)
        for product in category.products or []:
            if product.id is None:
                product.id = next_product_id
                next_product_id += 1

        self._file.upsert(categories, self._to_raw(category))
        self._file.persist(categories)
        logger.debug("Saved category #%s %r", category.id, category.name)

    def remove(self, category: Category) -> None:
        stored = self._file.load()
        for raw in stored:
            if raw["id"] == category.id:
                self._guard_products_in_use(raw["name"], {p["id"] for p in raw["products"]})
        categories = [c for c in stored if c["id"] != category.id]
        self._file.persist(categories)
        logger.debug("Removed category #%s %r and its products", category.id, category.name)

    # --- Referential checks ------------------------------------------------

    def _guard_dropped_products(self, category: Category, categories: list[dict]) -> None:
        if category.id is None:
            return
        kept = {p.id for p in category.products or []}
        for raw in categories:
            if raw["id"] == category.id:
                dropped = {p["id"] for p in raw["products"]} - kept
                self._guard_products_in_use(category.name, dropped)

    def _guard_products_in_use(self, category_name: str, product_ids: set[int]) -> None:
        in_use = product_ids & self._orders.product_ids()
        if in_use:
            ids = ", ".join(f"#{i}" for i in sorted(in_use))
            raise EntityInUseError(
                f"Category '{category_name}' has products still ordered: {ids}"
            )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(category: Category) -> dict:
        return {
            "id": category.id,
            "name": category.name,
            "description": category.description,
            "products": [
                {"id": p.id, "name": p.name, "description": p.description}
                for p in category.products or []
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Category:
        category = Category(
            id=raw["id"], name=raw["name"], description=raw["description"]
        )
        # products are read back ordered by name
        for p in sorted(raw["products"], key=lambda p: p["name"]):
            category.add_product(
                Product(
                    id=p["id"],
                    name=p["name"],
                    description=p["description"],
                    category=category,
                )
            )
        return category

    @staticmethod
    def _next_product_id(categories: list[dict]) -> int:
        ids = [p["id"] for c in categories for p in c["products"]]
        return max(ids) + 1 if ids else 1
