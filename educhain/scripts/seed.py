"""
Seed Script: Creates demo universities, transcripts and transactions.

Usage:
    python -m educhain.scripts.seed

Creates:
    5 universities (3 verified)
    20 transcripts
    40 transactions, scored by the live rule (large ones raise anomalies)
    and prints a development session token for the seeded admin.
"""

import asyncio
import random
import uuid
from datetime import datetime, timedelta
from decimal import Decimal

from educhain.auth.session import create_session_token
from educhain.db.engine import close_db, get_db_session, init_db
from educhain.db.repositories.transcript import transcript_repo
from educhain.db.repositories.university import university_repo
from educhain.db.repositories.user import user_repo
from educhain.schemas.transaction import TransactionCreate
from educhain.schemas.transcript import TranscriptCreate
from educhain.schemas.university import UniversityCreate
from educhain.services.transaction_service import TransactionService

UNIVERSITIES = [
    {"name": "Addis Ababa University", "website": "https://www.aau.edu.et", "verified": True},
    {"name": "Bahir Dar Institute of Technology", "website": "https://bit.bdu.edu.et", "verified": True},
    {"name": "Adama Science and Technology University", "website": "https://www.astu.edu.et", "verified": True},
    {"name": "Hawassa University", "website": "https://www.hu.edu.et", "verified": False},
    {"name": "Jimma University", "website": "https://www.ju.edu.et", "verified": False},
]

DEGREES = [
    "B.Sc. Computer Science",
    "B.Sc. Civil Engineering",
    "B.A. Economics",
    "M.Sc. Public Health",
    "LL.B. Law",
]

STUDENT_NAMES = [
    "Abebe Kebede", "Hanna Tesfaye", "Dawit Alemu", "Selam Getachew",
    "Yonas Bekele", "Meron Haile", "Samuel Tadesse", "Liya Mekonnen",
]

TRANSACTION_TYPES = ["tuition", "grants", "fees", "services"]

ADMIN_SUBJECT = "dev-superadmin"


async def seed() -> None:
    await init_db()
    rng = random.Random(2025)
    service = TransactionService()

    async with get_db_session() as session:
        await user_repo.upsert(
            session, ADMIN_SUBJECT,
            email="admin@educhain.local", first_name="Dev", last_name="Admin",
            role="superadmin",
        )

        universities = []
        for entry in UNIVERSITIES:
            uni = await university_repo.create(
                session,
                UniversityCreate(name=entry["name"], website=entry["website"]),
                wallet_address=f"0x{uuid.uuid4().hex}{uuid.uuid4().hex[:8]}",
            )
            if entry["verified"]:
                await university_repo.mark_verified(session, uni.id)
            universities.append(uni)
        print(f"Created {len(universities)} universities")

        for i in range(20):
            uni = rng.choice(universities)
            transcript = await transcript_repo.issue(
                session,
                TranscriptCreate(
                    student_id=f"STU-{1000 + i}",
                    university_id=uni.id,
                    student_name=rng.choice(STUDENT_NAMES),
                    degree=rng.choice(DEGREES),
                    issue_date=datetime.utcnow() - timedelta(days=rng.randint(30, 900)),
                ),
            )
            if i % 3 == 0:
                await transcript_repo.mark_verified(session, transcript.id)
        print("Created 20 transcripts")

        flagged = 0
        for i in range(40):
            amount = Decimal(str(round(rng.uniform(50, 18000), 2)))
            recorded = await service.record(
                session,
                TransactionCreate(
                    type=rng.choice(TRANSACTION_TYPES),
                    amount=amount,
                    university_id=rng.choice(universities).id,
                    student_id=f"STU-{1000 + rng.randint(0, 19)}",
                    description="Seeded transaction",
                ),
                user_id=ADMIN_SUBJECT,
            )
            flagged += recorded.anomaly is not None
        print(f"Created 40 transactions ({flagged} flagged)")

    await close_db()
    print("\nSeed completed successfully!")
    print("  Dev session token (send as cookie or Bearer):")
    print(f"  {create_session_token(ADMIN_SUBJECT, email='admin@educhain.local', role='superadmin')}")


if __name__ == "__main__":
    asyncio.run(seed())
