"""Integration tests for the Product use cases.

Uses in-memory fake repositories — no database.
"""

from datetime import date

import pytest

from wms.application.dto import ProductCreate, ProductUpdate
from wms.application.product_service import ProductService
from wms.domain.exceptions import ConflictError, EntityNotFoundError, ValidationError
from wms.domain.model.category import Category
from tests.fakes import FakeCategoryRepository, FakeProductRepository

TODAY = date(2025, 3, 14)


def _setup() -> tuple[ProductService, FakeProductRepository]:
    categories = FakeCategoryRepository([
        Category(id=None, name="Tools"),
        Category(id=None, name="Gifts"),
    ])
    products = FakeProductRepository(categories)
    return ProductService(products, categories, today=lambda: TODAY), products


class TestCreateProduct:

    def test_stamps_date_and_resolves_category_name(self):
        service, _ = _setup()
        dto = service.create(ProductCreate(name="Hammer", category_id=1))
        assert dto.id == 1
        assert dto.date_added == TODAY
        assert dto.category_name == "Tools"

    def test_same_name_in_two_categories(self):
        service, repo = _setup()
        service.create(ProductCreate(name="Hammer", category_id=1))
        service.create(ProductCreate(name="Hammer", category_id=2))
        assert repo.count() == 2

    def test_same_name_in_same_category_conflicts(self):
        service, _ = _setup()
        service.create(ProductCreate(name="Hammer", category_id=1))
        with pytest.raises(ConflictError):
            service.create(ProductCreate(name="Hammer", category_id=1))

    def test_unknown_category(self):
        service, repo = _setup()
        with pytest.raises(EntityNotFoundError, match="Category with ID 9"):
            service.create(ProductCreate(name="Hammer", category_id=9))
        assert repo.count() == 0

    @pytest.mark.parametrize(
        "data",
        [
            ProductCreate(name="H", category_id=1),
            ProductCreate(name="Hammer", category_id=0),
        ],
    )
    def test_invalid_shape(self, data):
        service, _ = _setup()
        with pytest.raises(ValidationError):
            service.create(data)


class TestListProducts:

    def test_list_by_category(self):
        service, _ = _setup()
        for name in ("Hammer", "Saw", "Drill"):
            service.create(ProductCreate(name=name, category_id=1))
        service.create(ProductCreate(name="Mug", category_id=2))

        page = service.list_by_category(1, page=1, page_size=2)
        assert [p.name for p in page.data] == ["Hammer", "Saw"]
        assert page.total_count == 3
        assert page.total_pages == 2

        assert service.list().total_count == 4

    def test_list_by_missing_category(self):
        service, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            service.list_by_category(42)


class TestUpdateProduct:

    def test_name_only_keeps_category(self):
        service, _ = _setup()
        service.create(ProductCreate(name="Hammer", category_id=2))
        dto = service.update(1, ProductUpdate(name="Claw hammer"))
        assert dto.name == "Claw hammer"
        assert dto.category_id == 2
        assert dto.date_added == TODAY

    def test_category_only_keeps_name(self):
        service, _ = _setup()
        service.create(ProductCreate(name="Hammer", category_id=1))
        dto = service.update(1, ProductUpdate(category_id=2))
        assert dto.name == "Hammer"
        assert dto.category_id == 2
        assert dto.category_name == "Gifts"

    def test_move_into_category_with_same_name_conflicts(self):
        service, _ = _setup()
        service.create(ProductCreate(name="Hammer", category_id=1))
        service.create(ProductCreate(name="Hammer", category_id=2))
        with pytest.raises(ConflictError):
            service.update(2, ProductUpdate(category_id=1))

    def test_unchanged_values_are_not_a_self_conflict(self):
        service, _ = _setup()
        service.create(ProductCreate(name="Hammer", category_id=1))
        dto = service.update(1, ProductUpdate(name="Hammer", category_id=1))
        assert dto.name == "Hammer"

    def test_unknown_target_category(self):
        service, _ = _setup()
        service.create(ProductCreate(name="Hammer", category_id=1))
        with pytest.raises(EntityNotFoundError):
            service.update(1, ProductUpdate(category_id=77))

    def test_missing_product(self):
        service, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            service.update(5, ProductUpdate(name="Hammer"))

    def test_supplied_name_is_validated(self):
        service, _ = _setup()
        service.create(ProductCreate(name="Hammer", category_id=1))
        with pytest.raises(ValidationError):
            service.update(1, ProductUpdate(name=""))


class TestDeleteProduct:

    def test_delete(self):
        service, repo = _setup()
        service.create(ProductCreate(name="Hammer", category_id=1))
        service.delete(1)
        assert repo.get_by_id(1) is None

    def test_missing(self):
        service, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            service.delete(1)
