"""Abstract repository for the Category aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  Implementations return each category's products sorted
by name; the in-memory list itself keeps insertion order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from petstore.domain.model.category import Category, Product


class CategoryRepository(ABC):

    @abstractmethod
    def get_by_id(self, category_id: int) -> Category | None:
        """Return a category by its ID, or None if not found."""

    @abstractmethod
    def find_by_name(self, name: str) -> Category | None:
        """Return the category whose name equals *name* exactly, or None."""

    @abstractmethod
    def get_product_by_id(self, product_id: int) -> Product | None:
        """Return a product, attached to its category, or None."""

    @abstractmethod
    def find_all(self) -> list[Category]:
        """Return every category."""

    @abstractmethod
    def save(self, category: Category) -> None:
        """Validate and persist a new or updated category with its products.

        Raises DuplicateEntityError when another category has the same name,
        and EntityInUseError when a dropped product is still ordered.
        """

    @abstractmethod
    def remove(self, category: Category) -> None:
        """Delete a category together with its products.

        Raises EntityInUseError while an order line references one of them.
        """
