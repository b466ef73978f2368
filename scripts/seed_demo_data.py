"""
Seed demo data for UI exploration.

Run after migrations. Creates one company, one interview flow with three
steps, two positions and a few candidates spread over the steps. Does
nothing when a company already exists.

Usage:
    python scripts/seed_demo_data.py
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ats_kanban.core.config import settings
from ats_kanban.core.logging_config import configure_logging
from ats_kanban.db.session import Database
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

logger = logging.getLogger("seed_demo_data")


async def seed_demo_data(db: AsyncSession) -> None:
    result = await db.execute(select(Company).limit(1))
    if result.scalar_one_or_none() is not None:
        logger.info("[SKIP] Company table already has data")
        return

    company = Company(name="LTI")
    db.add(company)

    # ---- Interview flow ----
    hr = InterviewType(name="HR Interview", description="Assesses overall fit, tech stack, salary range and availability")
    technical = InterviewType(name="Technical Interview", description="Assesses technical skills")
    manager = InterviewType(name="Manager Interview", description="Assesses cultural fit and professional goals")
    db.add_all([hr, technical, manager])

    flow = InterviewFlow(description="Standard development interview process")
    db.add(flow)
    await db.flush()

    screening = InterviewStep(interview_flow_id=flow.id, interview_type_id=hr.id, name="Initial Screening", order_index=1)
    tech_step = InterviewStep(interview_flow_id=flow.id, interview_type_id=technical.id, name="Technical Interview", order_index=2)
    manager_step = InterviewStep(interview_flow_id=flow.id, interview_type_id=manager.id, name="Manager Interview", order_index=3)
    db.add_all([screening, tech_step, manager_step])
    logger.info("[OK] Created interview flow with 3 steps")

    # ---- Positions ----
    deadline = datetime.now(timezone.utc) + timedelta(days=60)
    engineer = Position(
        company=company,
        interview_flow_id=flow.id,
        title="Senior Full-Stack Engineer",
        description="Develop and maintain software applications.",
        status="Open",
        is_visible=True,
        location="Remote",
        employment_type="Full-time",
        salary_min=50000,
        salary_max=80000,
        application_deadline=deadline,
    )
    data_scientist = Position(
        company=company,
        interview_flow_id=flow.id,
        title="Data Scientist",
        description="Analyze and interpret complex data.",
        status="Open",
        is_visible=True,
        location="Madrid",
        employment_type="Full-time",
        salary_min=60000,
        salary_max=90000,
        application_deadline=deadline,
    )
    db.add_all([engineer, data_scientist])

    # ---- Candidates ----
    john = Candidate(first_name="John", last_name="Doe", email="john.doe@example.com", phone="1234567890")
    jane = Candidate(first_name="Jane", last_name="Smith", email="jane.smith@example.com", phone="0987654321")
    carlos = Candidate(first_name="Carlos", last_name="García", email="carlos.garcia@example.com", phone="1122334455")
    db.add_all([john, jane, carlos])
    await db.flush()
    logger.info("[OK] Created 2 positions and 3 candidates")

    # ---- Applications and interviews ----
    applications = [
        Application(position_id=engineer.id, candidate_id=john.id, current_interview_step=tech_step.id),
        Application(position_id=engineer.id, candidate_id=jane.id, current_interview_step=screening.id),
        Application(position_id=data_scientist.id, candidate_id=carlos.id, current_interview_step=manager_step.id),
    ]
    db.add_all(applications)
    await db.flush()

    db.add_all(
        [
            Interview(application_id=applications[0].id, interview_step_id=screening.id, result="Passed", score=5),
            Interview(application_id=applications[0].id, interview_step_id=tech_step.id, result="Pending", score=3),
            Interview(application_id=applications[2].id, interview_step_id=screening.id, result="Passed", score=4),
            Interview(application_id=applications[2].id, interview_step_id=tech_step.id, result="Passed", score=5),
        ]
    )
    await db.flush()
    logger.info("[OK] Created 3 applications with interviews")


async def main() -> None:
    database = Database(settings.DATABASE_URL, echo=settings.DEBUG).open()
    try:
        async with database.session() as db:
            await seed_demo_data(db)
    finally:
        await database.close()


if __name__ == "__main__":
    configure_logging(settings.LOG_LEVEL)
    logger.info("Seeding demo data...")
    asyncio.run(main())
    logger.info("[OK] Done.")
