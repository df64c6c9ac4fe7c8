import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from listening_stats.models.db import Base


@pytest.fixture
def engine():
    engine = create_engine('sqlite://')
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(bind=engine)()
    yield session
    session.close()
