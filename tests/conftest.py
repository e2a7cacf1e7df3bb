"""Test configuration and fixtures."""

import random
from datetime import datetime

import pytest

from pronet.generator import DemoDataGenerator
from pronet.models import User
from pronet.session import Session
from pronet.stores import ChatStore, ConnectionStore, JobStore, NotificationStore, PostStore

FIXED_NOW = datetime(2025, 1, 15, 12, 0, 0)
TEST_SEED = 1234


@pytest.fixture
def now():
    return FIXED_NOW


@pytest.fixture
def generator():
    """Seeded generator with a frozen clock."""
    return DemoDataGenerator(rng=random.Random(TEST_SEED), now=lambda: FIXED_NOW)


@pytest.fixture
def user():
    return User(
        id="user-1",
        email="alex.morgan@example.com",
        full_name="Alex Morgan",
        headline="Software Engineer",
        skills=["Python", "AWS"],
    )


@pytest.fixture
def session(user):
    return Session(user)


@pytest.fixture
def anonymous_session():
    return Session()


@pytest.fixture
def job_store(session, generator):
    return JobStore(session, generator, page_size=20, catalog_size=100, initial_count=10)


@pytest.fixture
def post_store(session, generator):
    return PostStore(session, generator, page_size=20, catalog_size=100)


@pytest.fixture
def connection_store(session, generator):
    return ConnectionStore(session, generator)


@pytest.fixture
def notification_store(session, generator):
    return NotificationStore(session, generator)


@pytest.fixture
def chat_store(session, generator):
    return ChatStore(session, generator)


@pytest.fixture
def published(job_store):
    """Collects every state the job store publishes."""
    states = []
    job_store.subscribe(states.append)
    return states
