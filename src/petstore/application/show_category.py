"""Application service: Show Category use case (query)."""

from __future__ import annotations

from petstore.application.dto import CategoryDTO, ProductDTO
from petstore.domain.exceptions import EntityNotFoundError
from petstore.domain.model.category import Category
from petstore.domain.repository.category_repository import CategoryRepository


class FindCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, name: str) -> CategoryDTO:
        category = self._category_repo.find_by_name(name)
        if category is None:
            raise EntityNotFoundError(f"Category '{name}' not found")
        return category_to_dto(category)


def category_to_dto(category: Category) -> CategoryDTO:
    return CategoryDTO(
        id=category.id,  # type: ignore[arg-type]
        name=category.name,
        description=category.description,
        products=[
            ProductDTO(id=p.id, name=p.name, description=p.description)  # type: ignore[arg-type]
            for p in category.products or []
        ],
    )
