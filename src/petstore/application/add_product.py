"""Application service: Add Product use case.

Products are created through their category, which owns them.
"""

from __future__ import annotations

import logging

from petstore.application.dto import ProductDTO
from petstore.domain.exceptions import EntityNotFoundError, ValidationError
from petstore.domain.model.category import Product
from petstore.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, category_name: str, name: str, description: str) -> ProductDTO:
        """Add a product to an existing category."""
        category = self._category_repo.find_by_name(category_name)
        if category is None:
            raise EntityNotFoundError(f"Category '{category_name}' not found")

        if any(p.name == name for p in category.products or []):
            raise ValidationError(
                f"Product '{name}' already exists in category '{category_name}'"
            )

        product = Product.create(name=name, description=description, category=category)
        category.add_product(product)
        self._category_repo.save(category)

        logger.info("Added product #%s %r to %r", product.id, product.name, category.name)
        return ProductDTO(id=product.id, name=product.name, description=product.description)  # type: ignore[arg-type]
