"""
Общие фикстуры для всех тестов Daily Diet.

Стратегия:
- Тестовое FastAPI-приложение создаётся без startup-событий (нет подключения к БД).
- UserRepository и MealRepository заменяются на AsyncMock через dependency_overrides.
- Сессия передаётся cookie sessionId, как в браузере; get_current_user не подменяется,
  пользователь резолвится через mock_user_repo.get_by_session_id.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from httpx import AsyncClient, ASGITransport
from fastapi import FastAPI
from datetime import datetime
from typing import AsyncGenerator
from uuid import UUID, uuid4

from daily_diet.api.router import api_router
from daily_diet.core.config import settings
from daily_diet.core.dependencies import get_meal_repository, get_user_repository
from daily_diet.core.exceptions import register_exception_handlers
from daily_diet.models.meal import Meal
from daily_diet.models.user import User
from daily_diet.repositories.meal_repository import MealRepository
from daily_diet.repositories.user_repository import UserRepository

SESSION_ID = "4f1c2a9e-0000-4000-8000-000000000001"


# ---------------------------------------------------------------------------
# Вспомогательные функции
# ---------------------------------------------------------------------------

def create_test_app() -> FastAPI:
    """Тестовое FastAPI-приложение без startup-событий."""
    test_app = FastAPI(title="Daily Diet Test App")
    register_exception_handlers(test_app)
    test_app.include_router(api_router)
    return test_app


def make_meal(
        user_id: UUID,
        diet: bool = True,
        date: int = 1714910400000,
        name: str = "Салат",
        meal_id: UUID = None,
) -> Meal:
    return Meal(
        id=meal_id or uuid4(),
        user_id=user_id,
        name=name,
        description="Овощи и оливковое масло",
        diet=diet,
        date=date,
    )


# ---------------------------------------------------------------------------
# Фикстуры пользователей
# ---------------------------------------------------------------------------

@pytest.fixture
def user_fixture() -> User:
    """Пользователь, привязанный к SESSION_ID."""
    return User(
        id=UUID("9b2d7a52-5f0e-4d1b-9a4e-2f7c1d8e3a10"),
        session_id=SESSION_ID,
        name="tester",
        created_at=datetime(2024, 5, 5, 12, 0, 0),
    )


# ---------------------------------------------------------------------------
# Фикстуры для зависимостей
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_user_repo(user_fixture) -> AsyncMock:
    """Мокированный UserRepository: сессия SESSION_ID принадлежит user_fixture."""
    repo = AsyncMock(spec=UserRepository)
    repo.get_by_session_id.return_value = user_fixture
    return repo


@pytest.fixture
def mock_meal_repo() -> AsyncMock:
    repo = AsyncMock(spec=MealRepository)
    repo.list_all.return_value = []
    repo.list_by_user.return_value = []
    repo.get_by_id.return_value = None
    return repo


@pytest.fixture
def mock_db() -> MagicMock:
    """
    Мокированная сессия БД для тестов репозиториев.
    execute() возвращает MagicMock с предустановленными методами.
    """
    session = AsyncMock()
    session.add = MagicMock()
    default_result = MagicMock()
    default_result.scalar_one_or_none.return_value = None
    default_result.scalars.return_value.all.return_value = []
    session.execute.return_value = default_result
    return session


# ---------------------------------------------------------------------------
# HTTP-клиенты
# ---------------------------------------------------------------------------

@pytest.fixture
async def client(mock_user_repo, mock_meal_repo) -> AsyncGenerator[AsyncClient, None]:
    """Клиент без cookie сессии."""
    app = create_test_app()
    app.dependency_overrides[get_user_repository] = lambda: mock_user_repo
    app.dependency_overrides[get_meal_repository] = lambda: mock_meal_repo
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
async def session_client(mock_user_repo, mock_meal_repo) -> AsyncGenerator[AsyncClient, None]:
    """Клиент с cookie sessionId=SESSION_ID."""
    app = create_test_app()
    app.dependency_overrides[get_user_repository] = lambda: mock_user_repo
    app.dependency_overrides[get_meal_repository] = lambda: mock_meal_repo
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        cookies={settings.SESSION_COOKIE_NAME: SESSION_ID},
    ) as ac:
        yield ac
