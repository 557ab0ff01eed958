"""University repository."""

import uuid
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from educhain.db.models import University
from educhain.db.repositories.base import BaseRepository
from educhain.schemas.university import UniversityCreate


class UniversityRepository(BaseRepository[University, UniversityCreate]):
    def __init__(self):
        super().__init__(University)

    async def mark_verified(self, db: AsyncSession, id: uuid.UUID) -> Optional[University]:
        return await self.set_fields(db, id, verified=True)

    async def count_verified(self, db: AsyncSession) -> int:
        return await self.count(db, University.verified.is_(True))


university_repo = UniversityRepository()
