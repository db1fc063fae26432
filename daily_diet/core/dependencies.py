from typing import Optional

from fastapi import Cookie, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from daily_diet.core.db import get_db
from daily_diet.core.config import settings
from daily_diet.models.user import User
from daily_diet.repositories.meal_repository import MealRepository
from daily_diet.repositories.user_repository import UserRepository


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    """Фабрика репозитория — инжектируется в эндпоинты через Depends."""
    return UserRepository(db)


def get_meal_repository(db: AsyncSession = Depends(get_db)) -> MealRepository:
    return MealRepository(db)


def get_optional_session_id(
        session_id: Optional[str] = Cookie(default=None, alias=settings.SESSION_COOKIE_NAME),
) -> Optional[str]:
    return session_id or None


def get_session_id(session_id: Optional[str] = Depends(get_optional_session_id)) -> str:
    """Токен сессии из cookie; без него — 401"""
    if not session_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return session_id


async def get_current_user(
        session_id: str = Depends(get_session_id),
        repo: UserRepository = Depends(get_user_repository),
) -> User:
    user = await repo.get_by_session_id(session_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return user
