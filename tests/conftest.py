"""Shared pytest fixtures and configuration."""

from collections.abc import Iterator

import pytest
from loguru import logger
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from sluggable.services.config_resolver import ConfigResolver
from sluggable.services.observer import SluggableObserver, install
from sluggable.services.slug_service import SlugService
from sluggable.stores.sqlalchemy_store import SQLAlchemyRecordStore
from sluggable.utils.slug import SlugEngineRegistry
from tests.models import Base


@pytest.fixture
def session() -> Iterator[Session]:
    """In-memory SQLite session with all test tables."""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


@pytest.fixture
def store(session: Session) -> SQLAlchemyRecordStore:
    """Record store bound to the test session."""
    return SQLAlchemyRecordStore(session)


@pytest.fixture
def resolver() -> ConfigResolver:
    """Configuration resolver with built-in defaults."""
    return ConfigResolver()


@pytest.fixture
def service(store: SQLAlchemyRecordStore, resolver: ConfigResolver) -> SlugService:
    """Slug service without lifecycle integration."""
    return SlugService(store, resolver=resolver, engines=SlugEngineRegistry())


@pytest.fixture
def observer(session: Session, resolver: ConfigResolver) -> SluggableObserver:
    """Observer slugging records automatically on flush."""
    return install(session, resolver=resolver, engines=SlugEngineRegistry())


@pytest.fixture
def insert_raw(session: Session):
    """Insert and flush a row with explicit column values."""

    def _insert(model: type, **values) -> object:
        record = model(**values)
        session.add(record)
        session.flush()
        return record

    return _insert


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Drop sinks added during a test so they never outlive captured streams."""
    yield
    logger.remove()
