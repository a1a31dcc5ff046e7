"""Application service: Create Category use case."""

from __future__ import annotations

import logging

from petstore.application.dto import CategoryDTO
from petstore.application.show_category import category_to_dto
from petstore.domain.exceptions import ValidationError
from petstore.domain.model.category import Category
from petstore.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class CreateCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, name: str, description: str) -> CategoryDTO:
        """Add a new category to the catalog.  Names are unique."""
        category = Category.create(name=name, description=description)

        if self._category_repo.find_by_name(category.name) is not None:
            raise ValidationError(f"Category '{name}' already exists")

        self._category_repo.save(category)
        logger.info("Created category #%s %r", category.id, category.name)
        return category_to_dto(category)
