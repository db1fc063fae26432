import logging
from typing import List, Optional
from uuid import UUID, uuid4

from sqlalchemy import select, update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from daily_diet.models.meal import Meal
from daily_diet.services.time_utils import now_epoch_ms

logger = logging.getLogger(__name__)


class MealRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> List[Meal]:
        """Все приёмы пищи, без фильтра по владельцу"""
        result = await self.db.execute(select(Meal))
        return list(result.scalars().all())

    async def list_by_user(self, user_id: UUID) -> List[Meal]:
        """Приёмы пищи пользователя, от новых к старым"""
        result = await self.db.execute(
            select(Meal).where(Meal.user_id == user_id).order_by(Meal.date.desc())
        )
        return list(result.scalars().all())

    async def get_by_id(self, meal_id: UUID) -> Optional[Meal]:
        result = await self.db.execute(select(Meal).where(Meal.id == meal_id))
        return result.scalar_one_or_none()

    async def create(self, user_id: UUID, name: str, description: str, diet: bool) -> Meal:
        meal = Meal(
            id=uuid4(),
            user_id=user_id,
            name=name,
            description=description,
            diet=diet,
            date=now_epoch_ms(),
        )
        try:
            self.db.add(meal)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Ошибка при создании приёма пищи: {e}")
            raise
        return meal

    async def replace(
        self,
        meal_id: UUID,
        name: str,
        description: str,
        diet: bool,
        date_ms: int,
    ) -> None:
        # Без проверки существования: несуществующий id ничего не меняет
        stmt = (
            update(Meal)
            .where(Meal.id == meal_id)
            .values(name=name, description=description, diet=diet, date=date_ms)
        )
        await self._execute_and_commit(stmt, "обновлении приёма пищи")

    async def delete(self, meal_id: UUID) -> None:
        await self._execute_and_commit(delete(Meal).where(Meal.id == meal_id), "удалении приёма пищи")

    async def _execute_and_commit(self, stmt, action: str) -> None:
        try:
            await self.db.execute(stmt)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Ошибка при {action}: {e}")
            raise
