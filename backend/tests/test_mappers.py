from domain.value_objects import ProductType
from dtos.request import CustomerCreateRequest, ProductCreateRequest, UserDetailsRequest
from mappers import CustomerMapper, Mapper, ProductMapper, UserDetailsMapper
from models import Customer, UserDetails


def test_customer_mapper_builds_entity_with_details():
    dto = CustomerCreateRequest(
        email="ana@example.com",
        password="pw",
        is_verified=True,
        user_details=UserDetailsRequest(first_name="Ana", address="Via Roma 1"),
    )

    entity = CustomerMapper().to_entity(dto)

    assert isinstance(entity, Customer)
    assert entity.email == "ana@example.com"
    assert entity.password == "pw"
    assert entity.is_verified is True
    assert entity.is_deleted is False
    assert entity.user_details.first_name == "Ana"
    assert entity.user_details.address == "Via Roma 1"


def test_customer_dto_never_exposes_password():
    entity = Customer(id=7, email="ana@example.com", password="pw", is_deleted=False, is_verified=False)

    dto = CustomerMapper().to_dto(entity)

    assert dto.id == 7
    assert dto.user_details is None
    assert "password" not in dto.model_dump()


def test_user_details_apply_copies_only_sent_fields():
    entity = UserDetails(first_name="Ana", last_name="Bianchi", phone_number="123")

    UserDetailsMapper().apply(entity, UserDetailsRequest(last_name="Rossi", phone_number=None))

    assert entity.first_name == "Ana"
    assert entity.last_name == "Rossi"
    assert entity.phone_number is None


def test_product_mapper_generates_id_when_missing():
    mapper = ProductMapper()

    generated = mapper.to_entity(ProductCreateRequest(name="Cola", price=2.0))
    assigned = mapper.to_entity(ProductCreateRequest(id="P-1", name="Cola", price=2.0))

    assert generated.id
    assert assigned.id == "P-1"


def test_product_mapper_keeps_order_and_drops_repeated_types():
    dto = ProductCreateRequest(
        id="P-1",
        name="Margherita",
        price=6.5,
        ingredients=["tomato", "mozzarella", "tomato"],
        product_types=[ProductType.PIZZA, ProductType.VEGETARIAN, ProductType.PIZZA],
    )
    mapper = ProductMapper()

    result = mapper.to_dto(mapper.to_entity(dto))

    assert result.ingredients == ["tomato", "mozzarella", "tomato"]
    assert result.product_types == [ProductType.PIZZA, ProductType.VEGETARIAN]
    assert result.id == "P-1"
    assert result.price == 6.5


def test_mappers_satisfy_protocol():
    assert isinstance(CustomerMapper(), Mapper)
    assert isinstance(ProductMapper(), Mapper)
    assert isinstance(UserDetailsMapper(), Mapper)
