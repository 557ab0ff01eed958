"""User repository: upsert from identity provider claims."""

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from educhain.db.models import User

_PROFILE_FIELDS = ("email", "first_name", "last_name", "profile_image_url")


class UserRepository:
    async def get(self, db: AsyncSession, user_id: str) -> User | None:
        result = await db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def upsert(self, db: AsyncSession, user_id: str, **profile) -> User:
        """Insert the user, or refresh profile fields the provider sent."""
        values = {k: profile[k] for k in _PROFILE_FIELDS if profile.get(k) is not None}

        user = await self.get(db, user_id)
        if user is None:
            user = User(id=user_id, **values)
            if profile.get("role"):
                user.role = profile["role"]
            db.add(user)
        else:
            for key, value in values.items():
                setattr(user, key, value)
            user.updated_at = datetime.utcnow()

        await db.flush()
        await db.refresh(user)
        return user


user_repo = UserRepository()
