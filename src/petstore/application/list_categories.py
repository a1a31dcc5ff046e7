"""Application service: List Categories use case (query)."""

from __future__ import annotations

from petstore.application.dto import CategoryDTO
from petstore.application.show_category import category_to_dto
from petstore.domain.repository.category_repository import CategoryRepository


class ListCategoriesHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self) -> list[CategoryDTO]:
        categories = sorted(self._category_repo.find_all(), key=lambda c: c.name)
        return [category_to_dto(c) for c in categories]
