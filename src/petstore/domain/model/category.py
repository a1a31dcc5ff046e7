"""Category aggregate — the top level of the catalog.

A Category owns its Products: removing a category removes them too.
Categories are identified by their name, not by the surrogate id the
repository assigns on first save.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from petstore.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

CATEGORY_NAME_MAX_LENGTH = 30


@dataclass
class Product:
    """A catalog product.  Always belongs to exactly one Category."""

    id: int | None
    name: str
    description: str
    category: Category | None = field(default=None, repr=False, compare=False)

    @staticmethod
    def create(name: str, description: str, category: Category) -> Product:
        """Build a product pointing at *category*.

        The product is not added to the category's list; callers do that
        with ``Category.add_product`` so both sides stay in their hands.
        """
        return Product(id=None, name=name, description=description, category=category)


@dataclass(eq=False)
class Category:
    """Named grouping of products.

    Equality and hashing use ``name`` alone, so two in-memory categories
    with the same name are interchangeable as set members or dict keys.
    ``products`` stays ``None`` until the first product is added.
    """

    id: int | None
    name: str
    description: str
    products: list[Product] | None = field(default=None, repr=False)

    # --- Factory (used for NEW categories only) -------------------------------

    @staticmethod
    def create(name: str, description: str) -> Category:
        """Create a new category with no products."""
        if not name:
            raise ValidationError("Category name is required")
        if len(name) > CATEGORY_NAME_MAX_LENGTH:
            raise ValidationError(
                f"Category name must be at most {CATEGORY_NAME_MAX_LENGTH} "
                f"characters, got {len(name)}"
            )
        if not description:
            raise ValidationError("Category description is required")
        return Category(id=None, name=name, description=description)

    # --- Mutations ------------------------------------------------------------

    def add_product(self, product: Product) -> None:
        """Append *product*.  No duplicate check, no ordering."""
        if self.products is None:
            self.products = []
        self.products.append(product)
        logger.debug("Added product %r to category %r", product.name, self.name)

    # --- Identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Category):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)
