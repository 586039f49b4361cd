import os
import sys
import tempfile
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Keep the app away from the real data directory
_test_data_dir = tempfile.mkdtemp(prefix="storefront-tests-")
os.environ.setdefault("STOREFRONT_DATA_DIR", _test_data_dir)
os.environ.setdefault("STOREFRONT_DATABASE_URL", "sqlite://")
os.environ.setdefault("STOREFRONT_LOG_DIR", str(Path(_test_data_dir) / "logs"))

# Now import after path is set
import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from models import Base
from repositories import CustomerRepository, UserDetailsRepository, ProductRepository
from services.customer_service import CustomerService
from services.product_service import ProductService


def _memory_engine():
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _foreign_keys(dbapi_conn, connection_record):
        dbapi_conn.execute("PRAGMA foreign_keys=ON")

    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def engine():
    """Fresh in-memory database per test"""
    engine = _memory_engine()
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create in-memory database for testing"""
    SessionLocal = sessionmaker(bind=engine, autoflush=False)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def customer_service(db_session):
    return CustomerService(CustomerRepository(db_session), UserDetailsRepository(db_session))


@pytest.fixture
def product_service(db_session):
    return ProductService(ProductRepository(db_session))


@pytest.fixture
def client(engine):
    """TestClient whose requests share the in-memory test database"""
    from fastapi.testclient import TestClient
    from database import get_db
    from main import app

    TestingSession = sessionmaker(bind=engine, autoflush=False)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
