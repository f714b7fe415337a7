"""Shared test fixtures for Wanderer."""

from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

from wanderer.app import create_app
from wanderer.config import Config
from wanderer.engine.loader import load_world, packaged_world_path
from wanderer.engine.world import LocationRecord, World
from wanderer.models import Account

# Start -north-> Hall, Hall -south-> Start
SCENARIO_RECORDS = [
    LocationRecord("Start", "Where it all begins.", (("north", "Hall"),)),
    LocationRecord("Hall", "A long hall.", (("south", "Start"),)),
]


@pytest.fixture
def scenario_records() -> list[LocationRecord]:
    return list(SCENARIO_RECORDS)


@pytest.fixture
def scenario_world() -> World:
    return World.build(SCENARIO_RECORDS, "Start")


@pytest.fixture
def dungeon() -> World:
    return load_world(packaged_world_path("dungeon"))


@pytest.fixture
def db_engine(tmp_path: Path):
    engine = create_engine(f"sqlite:///{tmp_path}/test.db")
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture
def db_session(db_engine):
    with Session(db_engine) as session:
        yield session


@pytest.fixture
def test_account(db_session: Session) -> Account:
    account = Account(fingerprint="test-fingerprint-abc123")
    db_session.add(account)
    db_session.commit()
    db_session.refresh(account)
    return account


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    return Config(database_url=f"sqlite:///{tmp_path}/test.db", world="dungeon")


@pytest.fixture
def app(test_config: Config):
    return create_app(test_config)


@pytest.fixture
def client(app):
    from xitzin.testing import test_app

    with test_app(app) as client:
        yield client


@pytest.fixture
def auth_client(client):
    return client.with_certificate("test-fingerprint-abc123")
