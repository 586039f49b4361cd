import pytest

from domain.value_objects import ProductType
from exceptions import DatabaseError
from mappers import ProductMapper
from models import Customer, Product, UserDetails
from repositories import CustomerRepository, ProductRepository, UserDetailsRepository
from repositories.customer_specifications import CustomersByDeletedStatusSpec, CustomersByVerifiedStatusSpec


def _customer(email, **kwargs):
    return Customer(email=email, password="pw", **kwargs)


def _product(product_id, price, *types):
    return Product(
        id=product_id,
        name=product_id,
        price=price,
        ingredients=[],
        type_links=ProductMapper.to_links(types),
    )


def test_save_assigns_id_and_defaults(db_session):
    repo = CustomerRepository(db_session)

    customer = repo.save(_customer("ana@example.com"))

    assert customer.id is not None
    assert customer.is_deleted is False
    assert customer.is_verified is False
    assert repo.exists(customer.id)
    assert repo.count() == 1


def test_get_by_email_is_exact(db_session):
    repo = CustomerRepository(db_session)
    repo.save(_customer("ana@example.com"))

    assert repo.get_by_email("ana@example.com") is not None
    assert repo.get_by_email("ANA@example.com") is None


def test_email_taken_ignores_excluded_customer(db_session):
    repo = CustomerRepository(db_session)
    ana = repo.save(_customer("ana@example.com"))

    assert repo.email_taken("ana@example.com")
    assert not repo.email_taken("ana@example.com", exclude_id=ana.id)


def test_duplicate_email_raises_database_error(db_session):
    repo = CustomerRepository(db_session)
    repo.save(_customer("ana@example.com"))

    with pytest.raises(DatabaseError):
        repo.save(_customer("ana@example.com"))


def test_status_filters(db_session):
    repo = CustomerRepository(db_session)
    repo.save(_customer("a@example.com", is_deleted=True))
    repo.save(_customer("b@example.com", is_verified=True))
    repo.save(_customer("c@example.com"))

    assert [c.email for c in repo.get_by_deleted_status(True)] == ["a@example.com"]
    assert [c.email for c in repo.get_by_verified_status(False)] == ["a@example.com", "c@example.com"]

    spec = ~CustomersByDeletedStatusSpec(True) & CustomersByVerifiedStatusSpec(False)
    assert [c.email for c in repo.find_by(spec)] == ["c@example.com"]
    assert spec.is_satisfied_by(_customer("d@example.com", is_deleted=False, is_verified=False))


def test_deleting_customer_deletes_owned_details(db_session):
    repo = CustomerRepository(db_session)
    details_repo = UserDetailsRepository(db_session)
    customer = _customer("ana@example.com")
    customer.user_details = UserDetails(first_name="Ana")
    repo.save(customer)
    assert details_repo.count() == 1

    assert repo.delete_by_id(customer.id)

    assert repo.count() == 0
    assert details_repo.count() == 0
    assert not repo.delete_by_id(customer.id)


def test_delete_all_returns_count_and_cascades(db_session):
    repo = CustomerRepository(db_session)
    for index in range(3):
        customer = _customer(f"c{index}@example.com")
        customer.user_details = UserDetails(first_name=f"C{index}")
        repo.save(customer)

    assert repo.delete_all() == 3
    assert repo.count() == 0
    assert UserDetailsRepository(db_session).count() == 0


def test_products_by_type_and_price(db_session):
    repo = ProductRepository(db_session)
    repo.save(_product("margherita", 6.5, ProductType.PIZZA, ProductType.VEGETARIAN))
    repo.save(_product("diavola", 8.0, ProductType.PIZZA))
    repo.save(_product("caesar", 7.0, ProductType.SALAD))

    pizzas = repo.get_by_type(ProductType.PIZZA)
    cheap_pizzas = repo.get_by_type(ProductType.PIZZA, max_price=7.0)

    assert [p.id for p in pizzas] == ["diavola", "margherita"]
    assert [p.id for p in cheap_pizzas] == ["margherita"]
    assert repo.get_by_type(ProductType.DRINK) == []


def test_deleting_product_removes_type_links(db_session):
    repo = ProductRepository(db_session)
    repo.save(_product("margherita", 6.5, ProductType.PIZZA))

    repo.delete_all()

    assert repo.get_by_type(ProductType.PIZZA) == []
    assert repo.get_all() == []
