import pytest

from constants import ResponseMessages
from domain.value_objects import ProductType, ResponseCode
from dtos.request import ProductCreateRequest, ProductUpdateRequest
from exceptions import ProductNotFoundError
from models import Product, ProductTypeLink


def _create(service, product_id=None, price=6.5, types=(ProductType.PIZZA,), **kwargs):
    result = service.create_product(ProductCreateRequest(
        id=product_id,
        name=kwargs.pop("name", "Margherita"),
        price=price,
        ingredients=kwargs.pop("ingredients", ["tomato", "mozzarella"]),
        product_types=list(types),
    ))
    assert result.code == ResponseCode.CREATED
    return result.payload


class TestCreateProduct:
    def test_creates_with_generated_id(self, product_service):
        product = _create(product_service)

        assert product.id
        assert product.ingredients == ["tomato", "mozzarella"]
        assert product.product_types == [ProductType.PIZZA]

    def test_keeps_assigned_id(self, product_service):
        product = _create(product_service, "P-1")

        assert product.id == "P-1"
        assert product_service.get_single_product("P-1").payload == product

    def test_existing_id_is_rejected(self, product_service, db_session):
        _create(product_service, "P-1")

        result = product_service.create_product(ProductCreateRequest(id="P-1", name="Other", price=1.0))

        assert result.code == ResponseCode.VALIDATION_FAILED
        assert result.message == ResponseMessages.PRODUCT_ID_TAKEN
        assert db_session.get(Product, "P-1").name == "Margherita"

    def test_invalid_product_is_rejected(self, product_service, db_session):
        result = product_service.create_product(ProductCreateRequest(name="Cola", price=-1))

        assert result.code == ResponseCode.VALIDATION_FAILED
        assert result.message == "Product price cannot be negative"
        assert db_session.query(Product).count() == 0


class TestQueries:
    def test_missing_product(self, product_service):
        result = product_service.get_single_product("nope")

        assert result.code == ResponseCode.NOT_FOUND
        assert result.message == ResponseMessages.PRODUCT_NOT_FOUND_BY_ID
        with pytest.raises(ProductNotFoundError):
            result.unwrap(ProductNotFoundError)

    def test_empty_catalogue(self, product_service):
        result = product_service.get_all_products()

        assert result.code == ResponseCode.NOT_FOUND
        assert result.message == ResponseMessages.PRODUCTS_EMPTY

    def test_list(self, product_service):
        _create(product_service, "a")
        _create(product_service, "b")

        result = product_service.get_all_products()

        assert result.code == ResponseCode.LIST_FOUND
        assert [p.id for p in result.payload] == ["a", "b"]

    def test_by_type(self, product_service):
        _create(product_service, "margherita", 6.5, (ProductType.PIZZA, ProductType.VEGETARIAN))
        _create(product_service, "diavola", 8.0, (ProductType.PIZZA,))
        _create(product_service, "tiramisu", 4.0, (ProductType.DESSERT,))

        vegetarian = product_service.get_products_by_type(ProductType.VEGETARIAN)
        cheap_pizza = product_service.get_products_by_type(ProductType.PIZZA, max_price=7.0)
        drinks = product_service.get_products_by_type(ProductType.DRINK)

        assert [p.id for p in vegetarian.payload] == ["margherita"]
        assert [p.id for p in cheap_pizza.payload] == ["margherita"]
        assert drinks.code == ResponseCode.NOT_FOUND
        assert drinks.message == ResponseMessages.PRODUCTS_NOT_FOUND_BY_TYPE


class TestUpdateProduct:
    def test_null_body(self, product_service):
        result = product_service.update_product("nope", None)

        assert result.code == ResponseCode.VALIDATION_FAILED
        assert result.message == ResponseMessages.NULL_BODY

    def test_missing_product(self, product_service):
        result = product_service.update_product("nope", ProductUpdateRequest(price=1.0))

        assert result.code == ResponseCode.NOT_FOUND

    def test_partial_update(self, product_service):
        _create(product_service, "P-1")

        result = product_service.update_product("P-1", ProductUpdateRequest(price=7.25))

        assert result.code == ResponseCode.UPDATED
        assert result.payload.price == 7.25
        assert result.payload.name == "Margherita"
        assert result.payload.ingredients == ["tomato", "mozzarella"]
        assert result.payload.product_types == [ProductType.PIZZA]

    def test_replaces_ingredients_and_types(self, product_service, db_session):
        _create(product_service, "P-1")

        result = product_service.update_product("P-1", ProductUpdateRequest(
            ingredients=["tomato"],
            product_types=[ProductType.VEGAN, ProductType.PIZZA],
        ))

        assert result.payload.ingredients == ["tomato"]
        assert result.payload.product_types == [ProductType.VEGAN, ProductType.PIZZA]
        assert db_session.query(ProductTypeLink).count() == 2
        assert product_service.get_products_by_type(ProductType.VEGAN).payload[0].id == "P-1"

    def test_invalid_update(self, product_service):
        _create(product_service, "P-1")

        result = product_service.update_product("P-1", ProductUpdateRequest(name=""))

        assert result.code == ResponseCode.VALIDATION_FAILED
        assert product_service.get_single_product("P-1").payload.name == "Margherita"


class TestDeleteProduct:
    def test_delete_then_not_found(self, product_service, db_session):
        _create(product_service, "P-1")

        assert product_service.delete_product("P-1").code == ResponseCode.DELETED
        assert product_service.delete_product("P-1").code == ResponseCode.NOT_FOUND
        assert db_session.query(ProductTypeLink).count() == 0

    def test_delete_all(self, product_service):
        _create(product_service, "a")
        _create(product_service, "b")

        result = product_service.delete_all_products()

        assert result.code == ResponseCode.DELETED
        assert result.message == ResponseMessages.PRODUCTS_DELETED
        assert product_service.get_all_products().code == ResponseCode.NOT_FOUND


@pytest.mark.parametrize("price", [float("nan"), float("inf")])
def test_non_finite_price_comes_back_as_envelope(product_service, db_session, price):
    created = product_service.create_product(ProductCreateRequest(name="Cola", price=price))

    assert created.code == ResponseCode.VALIDATION_FAILED
    assert created.message == "Product price must be a finite number"
    assert db_session.query(Product).count() == 0

    _create(product_service, "P-1")
    updated = product_service.update_product("P-1", ProductUpdateRequest(price=price))

    assert updated.code == ResponseCode.VALIDATION_FAILED
    assert product_service.get_single_product("P-1").payload.price == 6.5


def test_injected_mapper_is_used(db_session):
    from mappers import ProductMapper
    from repositories import ProductRepository
    from services.product_service import ProductService

    class UpperCaseNameMapper(ProductMapper):
        def to_dto(self, entity):
            dto = super().to_dto(entity)
            return dto.model_copy(update={"name": dto.name.upper()})

    service = ProductService(ProductRepository(db_session), mapper=UpperCaseNameMapper())

    assert _create(service, "P-1").name == "MARGHERITA"
