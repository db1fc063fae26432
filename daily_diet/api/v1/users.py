import logging
from typing import Optional
from uuid import UUID, uuid4

from fastapi import APIRouter, Depends, Response, status

from daily_diet.core.dependencies import (
    get_optional_session_id,
    get_session_id,
    get_user_repository,
)
from daily_diet.models.user import User
from daily_diet.repositories.user_repository import UserRepository
from daily_diet.schemas.user import UserCreate, UserRead, UserListResponse, UserResponse
from daily_diet.services.session_service import session_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.get("", response_model=UserListResponse)
async def list_users(
        session_id: str = Depends(get_session_id),
        repo: UserRepository = Depends(get_user_repository),
):
    """Пользователи текущей сессии"""
    users = await repo.list_by_session_id(session_id)
    return UserListResponse(users=[UserRead.model_validate(u) for u in users])


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
        user_id: UUID,
        session_id: str = Depends(get_session_id),
        repo: UserRepository = Depends(get_user_repository),
):
    """Пользователь по id в рамках текущей сессии; чужой или несуществующий — null"""
    user = await repo.get_by_session_and_id(session_id, user_id)
    return UserResponse(user=UserRead.model_validate(user) if user else None)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
        user_data: UserCreate,
        session_id: Optional[str] = Depends(get_optional_session_id),
        repo: UserRepository = Depends(get_user_repository),
):
    """Регистрация анонимного пользователя; без cookie выдаётся новая сессия"""
    response = Response(status_code=status.HTTP_201_CREATED)
    session_id = session_service.ensure_session(response, session_id)

    # session_id уникален: повторная регистрация с той же cookie оставляет прежнего пользователя
    existing_user = await repo.get_by_session_id(session_id)
    if existing_user:
        logger.info(f"Сессия уже привязана к пользователю {existing_user.id}")
        return response

    new_user = await repo.create_user(
        User(id=uuid4(), name=user_data.name, session_id=session_id)
    )
    logger.info(f"Создан пользователь {new_user.id}")
    return response
