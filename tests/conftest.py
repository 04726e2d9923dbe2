"""
Pytest will auto-discover / import this file called 'conftest.py'. ]
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.models import PlayerModel
from src.db.schema import Base

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def session_factory() -> Generator[sessionmaker, None, None]:
    """Mock real setup with multiple sessions connecting to the same engine / database tables."""
    Base.metadata.create_all(bind=engine)
    try:
        yield TestingSessionLocal
    finally:
        Base.metadata.drop_all(bind=engine)


PlayerFactory = Callable[..., PlayerModel]


@pytest.fixture
def make_player() -> PlayerFactory:
    """Call the inner function with an index to get the profile of player `p{index}`"""

    def _create_player(
        index: int, region: str = "NL", levels_completed: int = 0
    ) -> PlayerModel:
        return PlayerModel(
            id=f"p{index}",
            display_name=f"Player {index}",
            region=region,
            email=f"player{index}@example.com",
            levels_completed=levels_completed,
        )

    return _create_player
