"""Unit tests for the Category aggregate."""

import pytest

from petstore.domain.exceptions import ValidationError
from petstore.domain.model.category import Category, Product


class TestCategoryCreation:

    def test_happy_path(self):
        category = Category.create("Fish", "Any of numerous cold-blooded aquatic vertebrates")
        assert category.name == "Fish"
        assert category.id is None  # assigned by repository
        assert category.products is None

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Category.create("", "Some description")

    def test_name_of_30_characters_accepted(self):
        category = Category.create("x" * 30, "Some description")
        assert len(category.name) == 30

    def test_name_over_30_characters_rejected(self):
        with pytest.raises(ValidationError, match="at most 30"):
            Category.create("x" * 31, "Some description")

    def test_empty_description_rejected(self):
        with pytest.raises(ValidationError, match="description is required"):
            Category.create("Fish", "")


class TestAddProduct:

    def test_first_product_initializes_collection(self):
        category = Category.create("Fish", "Aquatic")
        koi = Product.create("Koi", "Fresh water fish from Japan", category)

        category.add_product(koi)

        assert category.products == [koi]

    def test_keeps_insertion_order(self):
        category = Category.create("Fish", "Aquatic")
        category.add_product(Product.create("Koi", "From Japan", category))
        category.add_product(Product.create("Angelfish", "From Australia", category))
        assert [p.name for p in category.products] == ["Koi", "Angelfish"]

    def test_no_duplicate_check(self):
        category = Category.create("Fish", "Aquatic")
        koi = Product.create("Koi", "From Japan", category)
        category.add_product(koi)
        category.add_product(koi)
        assert len(category.products) == 2

    def test_product_points_at_its_category(self):
        category = Category.create("Fish", "Aquatic")
        koi = Product.create("Koi", "From Japan", category)
        assert koi.category is category


class TestCategoryEquality:

    def test_same_name_is_equal(self):
        a = Category(id=1, name="Fish", description="Aquatic")
        b = Category(id=2, name="Fish", description="Something else")
        b.add_product(Product.create("Koi", "From Japan", b))
        assert a == b
        assert hash(a) == hash(b)

    def test_different_name_is_not_equal(self):
        assert Category(id=1, name="Fish", description="d") != Category(
            id=1, name="Dogs", description="d"
        )

    def test_name_comparison_is_case_sensitive(self):
        assert Category(id=None, name="Fish", description="d") != Category(
            id=None, name="fish", description="d"
        )

    def test_interchangeable_in_sets(self):
        a = Category(id=1, name="Fish", description="Aquatic")
        b = Category(id=None, name="Fish", description="Other")
        assert len({a, b}) == 1
        assert b in {a}

    def test_not_equal_to_other_types(self):
        assert Category(id=1, name="Fish", description="d") != "Fish"
