"""Integration tests for the catalog use cases.

Uses in-memory fake repositories — no file I/O.
"""

import pytest

from petstore.application.add_product import AddProductHandler
from petstore.application.create_category import CreateCategoryHandler
from petstore.application.list_categories import ListCategoriesHandler
from petstore.application.show_category import FindCategoryHandler
from petstore.domain.exceptions import EntityNotFoundError, ValidationError
from tests.fakes import FakeCategoryRepository


class TestCreateCategory:

    def test_creates_and_assigns_id(self):
        repo = FakeCategoryRepository()
        dto = CreateCategoryHandler(repo).handle("Fish", "Aquatic animals")
        assert dto.id == 1
        assert dto.products == []
        assert repo.find_by_name("Fish") is not None

    def test_duplicate_name_rejected(self):
        repo = FakeCategoryRepository()
        handler = CreateCategoryHandler(repo)
        handler.handle("Fish", "Aquatic animals")
        with pytest.raises(ValidationError, match="already exists"):
            handler.handle("Fish", "Again")

    def test_invalid_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            CreateCategoryHandler(FakeCategoryRepository()).handle("", "Aquatic")


class TestAddProduct:

    def test_adds_product_to_category(self):
        repo = FakeCategoryRepository()
        CreateCategoryHandler(repo).handle("Fish", "Aquatic animals")

        dto = AddProductHandler(repo).handle("Fish", "Koi", "Fresh water fish from Japan")

        assert dto.id == 1
        category = repo.find_by_name("Fish")
        assert [p.name for p in category.products] == ["Koi"]
        assert category.products[0].category is category

    def test_unknown_category(self):
        with pytest.raises(EntityNotFoundError, match="Category 'Birds' not found"):
            AddProductHandler(FakeCategoryRepository()).handle("Birds", "Parrot", "Talks")

    def test_duplicate_product_in_category_rejected(self):
        repo = FakeCategoryRepository()
        CreateCategoryHandler(repo).handle("Fish", "Aquatic animals")
        handler = AddProductHandler(repo)
        handler.handle("Fish", "Koi", "From Japan")
        with pytest.raises(ValidationError, match="already exists"):
            handler.handle("Fish", "Koi", "Again")


class TestCategoryQueries:

    def test_find_by_name(self):
        repo = FakeCategoryRepository()
        CreateCategoryHandler(repo).handle("Fish", "Aquatic animals")
        AddProductHandler(repo).handle("Fish", "Koi", "From Japan")

        dto = FindCategoryHandler(repo).handle("Fish")

        assert dto.name == "Fish"
        assert [p.name for p in dto.products] == ["Koi"]

    def test_find_unknown_name(self):
        with pytest.raises(EntityNotFoundError):
            FindCategoryHandler(FakeCategoryRepository()).handle("Fish")

    def test_list_sorted_by_name(self):
        repo = FakeCategoryRepository()
        handler = CreateCategoryHandler(repo)
        handler.handle("Reptiles", "Cold blooded")
        handler.handle("Dogs", "Friendly")
        assert [c.name for c in ListCategoriesHandler(repo).handle()] == ["Dogs", "Reptiles"]
