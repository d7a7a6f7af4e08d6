# tests/conftest.py
import os

# Point the service at a throwaway database before any app module is imported.
os.environ["ENV"] = "local"
os.environ["DATABASE_URL_LOCAL"] = "sqlite://"

import pytest
from starlette.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from rsvp_service.main import app
from rsvp_service.api import deps
from rsvp_service.db.base_class import Base
from rsvp_service.services.verification import get_token_verifier
from rsvp_service.services.verification.development_verifier import (
    DevelopmentTokenVerifier,
)
from rsvp_service.services.wallet import get_pass_issuer

from tests.utils.fakes import FakePassIssuer


# --- Test Database Setup ---
@pytest.fixture(scope="function")
def engine():
    """A fresh in-memory database per test."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


# --- Mock Dependencies Setup ---
@pytest.fixture(scope="function")
def pass_issuer():
    return FakePassIssuer()


# --- Test Client Fixtures ---
@pytest.fixture(scope="function")
def client(session_factory, pass_issuer):
    """
    Provides a TestClient backed by the in-memory database, the development
    token verifier (tokens starting with "invalid" fail) and a fake pass issuer.
    """

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[deps.get_db] = override_get_db
    app.dependency_overrides[get_token_verifier] = lambda: DevelopmentTokenVerifier()
    app.dependency_overrides[get_pass_issuer] = lambda: pass_issuer

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
