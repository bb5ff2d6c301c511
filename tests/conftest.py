import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.db.base import Base
from app.db.session import get_db
from app.main import create_app

# One in-memory database shared by every connection in the test process
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture(autouse=True)
def create_test_schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def settings():
    return Settings(_env_file=None, DATABASE_URL="sqlite://", AUTO_CREATE_SCHEMA=False)


@pytest.fixture()
def app(settings, db_session):
    application = create_app(settings)

    def _get_db_override():
        yield db_session

    application.dependency_overrides[get_db] = _get_db_override
    yield application
    application.dependency_overrides.clear()


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def span_calls(app):
    """Records every span attribute the handlers attach."""
    calls = []
    app.state.span_attribute_hook = lambda key, value: calls.append((key, value))
    return calls


@pytest.fixture()
def make_client(db_session):
    """Builds a client for an app created with non-default settings."""
    def _make(**overrides) -> TestClient:
        application = create_app(Settings(_env_file=None, DATABASE_URL="sqlite://", AUTO_CREATE_SCHEMA=False, **overrides))

        def _get_db_override():
            yield db_session

        application.dependency_overrides[get_db] = _get_db_override
        return TestClient(application)

    return _make
