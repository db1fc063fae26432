import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from daily_diet.models.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_session_id(self, session_id: str) -> Optional[User]:
        result = await self.db.execute(
            select(User).where(User.session_id == session_id).limit(1)
        )
        return result.scalar_one_or_none()

    async def list_by_session_id(self, session_id: str) -> List[User]:
        result = await self.db.execute(select(User).where(User.session_id == session_id))
        return list(result.scalars().all())

    async def get_by_session_and_id(self, session_id: str, user_id: UUID) -> Optional[User]:
        result = await self.db.execute(
            select(User).where(User.session_id == session_id, User.id == user_id)
        )
        return result.scalar_one_or_none()

    async def create_user(self, user: User) -> User:
        self.db.add(user)
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Ошибка при создании пользователя: {e}")
            raise
        await self.db.refresh(user)
        return user
