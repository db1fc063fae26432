import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from daily_diet.core.config import settings
from daily_diet.core.base import Base
from daily_diet.core.db import engine as default_engine

logger = logging.getLogger(__name__)


def load_models() -> list:
    """Регистрирует все модели в Base.metadata и возвращает имена таблиц"""
    from daily_diet.models import Meal, User  # noqa: F401

    return sorted(Base.metadata.tables)


async def init_database(engine: AsyncEngine = default_engine, reset: bool = None):
    """Создание таблиц users/meals; при reset — сначала удаление"""
    tables = load_models()
    if reset is None:
        reset = settings.RESET_DATABASE

    async with engine.begin() as conn:
        if reset:
            logger.warning("RESET_DATABASE=true - пересоздаем таблицы %s", tables)
            await conn.run_sync(Base.metadata.drop_all)

        await conn.run_sync(Base.metadata.create_all)

    logger.info("Таблицы БД созданы/проверены: %s", ", ".join(tables))
