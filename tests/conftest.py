"""Shared fixtures: a fresh SQLite database per test, services and a Flask client bound to it."""

import os

# Must be set before ``database`` is imported anywhere
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy.orm import sessionmaker

from database import Base, make_engine
from services.accounts import AccountService
from services.messages import MessageService


@pytest.fixture
def session_factory(tmp_path):
    """File-backed so that several threads can share the database."""
    engine = make_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def account_service(db):
    return AccountService(db)


@pytest.fixture
def message_service(db, account_service):
    return MessageService(db, account_service)


@pytest.fixture
def author(account_service):
    return account_service.register("author", "secret")


@pytest.fixture
def client(session_factory, monkeypatch):
    import main

    monkeypatch.setattr(main, "SessionLocal", session_factory)
    main.app.config["TESTING"] = True
    with main.app.test_client() as test_client:
        yield test_client
