"""Test configuration and fixtures."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.db import models  # noqa: F401
from app.db.models.discussion_thread import DiscussionThread
from app.db.models.org import Org, OrgMember
from app.db.models.user import User
from app.db.session import Base, get_db
from app.api.labels import services as label_services
from app.api.labels.schemas import LabelCreate


@pytest.fixture
def db():
    """Provide a session on a fresh in-memory database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def seed(db: Session) -> SimpleNamespace:
    """
    Two orgs and three users:
    alice is a member of acme, bob of globex, root is a site admin.
    Alice authored one thread.
    """
    alice = User(email="alice@example.com", name="Alice")
    bob = User(email="bob@example.com", name="Bob")
    root = User(email="root@example.com", name="Root", is_site_admin=True)
    acme = Org(name="acme", display_name="Acme Corp")
    globex = Org(name="globex")
    db.add_all([alice, bob, root, acme, globex])
    db.flush()

    db.add_all([
        OrgMember(org_id=acme.id, user_id=alice.id),
        OrgMember(org_id=globex.id, user_id=bob.id),
    ])
    thread = DiscussionThread(title="Release planning", author_user_id=alice.id)
    db.add(thread)
    db.commit()

    return SimpleNamespace(alice=alice, bob=bob, root=root, acme=acme, globex=globex, thread=thread)


@pytest.fixture
def make_label(db: Session):
    """Insert a label directly, bypassing permission checks."""
    def _make(org: Org, name: str, color: str = "#336699", description=None):
        return label_services.create_label(
            db, LabelCreate(org_id=org.id, name=name, color=color, description=description)
        )
    return _make


@pytest.fixture
def client(db: Session):
    """Provide a test client bound to the fixture database."""
    from app.main import app

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
