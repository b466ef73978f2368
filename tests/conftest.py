"""
Pytest configuration and shared fixtures.

Database tests run against a throwaway SQLite file (aiosqlite) with the
schema created from the ORM metadata.
"""

from datetime import datetime
from types import SimpleNamespace

import httpx
import pytest_asyncio

from ats_kanban.db.base import Base
from ats_kanban.db.session import Database
from ats_kanban.main import create_app
from ats_kanban.models import (
    Application,
    Candidate,
    Company,
    Interview,
    InterviewFlow,
    InterviewStep,
    InterviewType,
    Position,
)

TEST_BASE_URL = "http://testserver"


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests, no external deps")
    config.addinivalue_line("markers", "db: uses the SQLite test database")


@pytest_asyncio.fixture
async def empty_database(tmp_path):
    """An open database handle with no tables at all."""
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}").open()
    yield database
    await database.close()


@pytest_asyncio.fixture
async def database(tmp_path):
    """An open database handle with the full schema and no rows."""
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'ats.db'}").open()
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield database
    await database.close()


@pytest_asyncio.fixture
async def seeded(database):
    """
    Seed one company, two flows and three positions.

    * ``engineer``: company "Acme", standard flow, three applications
    * ``orphan``: no company, standard flow, no applications
    * ``no_flow``: no interview flow at all
    The standard flow's steps are inserted out of order (3, 1, 2).
    """
    async with database.session() as db:
        company = Company(name="Acme")
        interview_type = InterviewType(name="Technical Interview")
        flow = InterviewFlow(description="Standard development interview process")
        other_flow = InterviewFlow(description="Internship process")
        db.add_all([company, interview_type, flow, other_flow])
        await db.flush()

        manager = InterviewStep(interview_flow_id=flow.id, interview_type_id=interview_type.id, name="Manager Interview", order_index=3)
        screening = InterviewStep(interview_flow_id=flow.id, interview_type_id=interview_type.id, name="Initial Screening", order_index=1)
        technical = InterviewStep(interview_flow_id=flow.id, interview_type_id=interview_type.id, name="Technical Interview", order_index=2)
        foreign = InterviewStep(interview_flow_id=other_flow.id, interview_type_id=interview_type.id, name="Intern Chat", order_index=1)
        db.add_all([manager, screening, technical, foreign])

        engineer = Position(
            company_id=company.id,
            interview_flow_id=flow.id,
            title="Senior Full-Stack Engineer",
            status="Open",
            location="Remote",
            application_deadline=datetime(2025, 3, 5),
        )
        orphan = Position(
            interview_flow_id=flow.id,
            title="Data Scientist",
            status="Draft",
            location="Madrid",
        )
        no_flow = Position(
            company_id=company.id,
            title="Office Manager",
            status="Closed",
            location="Barcelona",
        )
        db.add_all([engineer, orphan, no_flow])

        john = Candidate(first_name="John", last_name="Doe", email="john@example.com")
        jane = Candidate(first_name="Jane", last_name="Smith", email="jane@example.com")
        carlos = Candidate(first_name="Carlos", last_name="García", email="carlos@example.com")
        db.add_all([john, jane, carlos])
        await db.flush()

        john_app = Application(position_id=engineer.id, candidate_id=john.id, current_interview_step=technical.id)
        jane_app = Application(position_id=engineer.id, candidate_id=jane.id, current_interview_step=screening.id)
        carlos_app = Application(position_id=engineer.id, candidate_id=carlos.id, current_interview_step=technical.id)
        db.add_all([john_app, jane_app, carlos_app])
        await db.flush()

        db.add_all(
            [
                Interview(application_id=john_app.id, score=3),
                Interview(application_id=john_app.id, score=5),
                Interview(application_id=carlos_app.id, score=4),
                Interview(application_id=carlos_app.id, score=None),
            ]
        )
        await db.flush()

        ids = SimpleNamespace(
            company=company.id,
            flow=flow.id,
            engineer=engineer.id,
            orphan=orphan.id,
            no_flow=no_flow.id,
            screening=screening.id,
            technical=technical.id,
            manager=manager.id,
            foreign=foreign.id,
            john=john.id,
            jane=jane.id,
            carlos=carlos.id,
            john_app=john_app.id,
            jane_app=jane_app.id,
            carlos_app=carlos_app.id,
        )
    return ids


def build_app(database, transport_factory=None):
    """
    Create an app whose UI client calls the app itself in-process.

    ``transport_factory(asgi_transport)`` may wrap the transport to fake
    API failures.
    """
    app = create_app(database=database)
    transport = httpx.ASGITransport(app=app)
    if transport_factory is not None:
        transport = transport_factory(transport)
    app.state.api_client = httpx.AsyncClient(transport=transport, base_url=TEST_BASE_URL)
    return app


@pytest_asyncio.fixture
async def app(database):
    app = build_app(database)
    yield app
    await app.state.api_client.aclose()


@pytest_asyncio.fixture
async def client(app):
    """HTTP client talking to the app in-process."""
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url=TEST_BASE_URL) as client:
        yield client
